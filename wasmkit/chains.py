"""Known chains and their RPC endpoints."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from urllib.parse import urlsplit

from .errors import ChainUnsupported, EndpointNotFound, NotFound, ParsingError


class EndpointType(enum.Enum):
    """The kind of an RPC endpoint."""

    HTTP = "http"
    WEBSOCKET = "websocket"

    def matches(self, endpoint: "NodeEndpoint") -> bool:
        """Tell whether the endpoint is of this kind."""
        return endpoint.kind is self


_SCHEMES = {
    "http": EndpointType.HTTP,
    "https": EndpointType.HTTP,
    "ws": EndpointType.WEBSOCKET,
    "wss": EndpointType.WEBSOCKET,
}


@dataclass(frozen=True)
class NodeEndpoint:
    """An HTTP or WebSocket endpoint of a node."""

    kind: EndpointType
    url: str

    @classmethod
    def from_str(cls, s: str) -> "NodeEndpoint":
        """Parse an http(s) or ws(s) URL into an endpoint."""
        parts = urlsplit(s)
        kind = _SCHEMES.get(parts.scheme.lower())
        if kind is None or not parts.netloc:
            raise ParsingError(s, " Expected an http(s) or ws(s) endpoint")
        return cls(kind, s)

    def as_url(self) -> str:
        return self.url

    def __str__(self) -> str:
        return self.url


_CHAIN_URLS: dict[tuple[str, ...], tuple[str, ...]] = {
    ("polkadot", "dot"): (
        "wss://rpc.polkadot.io:443",
        "wss://polkadot-rpc-tn.dwellir.com:443",
        "wss://polkadot-rpc.dwellir.com:443",
    ),
    ("kusama", "ksm"): (
        "wss://kusama-rpc.polkadot.io:443",
        "wss://kusama-rpc-tn.dwellir.com:443",
        "wss://kusama-rpc.dwellir.com:443",
        "wss://kusama-rpc.polkadot.io:443",
        "wss://kusama-try-runtime-node.parity-chains.parity.io:443",
        "wss://kusama.public.curie.radiumblock.co:443/ws",
        "wss://rpc.dotters.network:443/kusama",
        "wss://rpc.ibp.network:443/kusama",
    ),
    ("westend", "wnd"): (
        "wss://westend-rpc.polkadot.io:443",
        "wss://westend-try-runtime-node.parity-chains.parity.io:443",
    ),
    ("rococo",): (
        "wss://rococo-rpc.polkadot.io:443",
        "wss://rococo.api.onfinality.io:443/public-ws",
    ),
    ("statemint",): (
        "wss://statemint-rpc.polkadot.io:443",
        "wss://statemint.api.onfinality.io:443/public-ws",
        "wss://statemint-rpc.dwellir.com:443",
    ),
    ("statemine",): (
        "wss://statemine-rpc.polkadot.io:443",
        "wss://statemine.api.onfinality.io:443/public-ws",
        "wss://statemine-rpc.dwellir.com:443",
    ),
    ("westmint",): ("wss://westmint-rpc.polkadot.io:443",),
    ("karura", "kar"): (
        "wss://karura-rpc-0.aca-api.network:443",
        "wss://karura-rpc-1.aca-api.network:443",
        "wss://karura-rpc-2.aca-api.network:443/ws",
    ),
    ("moonbase",): ("wss://wss.api.moonbase.moonbeam.network:443",),
    ("moonriver", "movr"): ("wss://wss.api.moonriver.moonbeam.network:443",),
    ("moonbeam", "glmr"): ("wss://wss.api.moonbeam.network:443",),
    ("local",): ("http://localhost:9933",),
}

_BY_NAME = {alias: urls for aliases, urls in _CHAIN_URLS.items() for alias in aliases}


def get_chain_urls(name: str) -> list[NodeEndpoint]:
    """Return the known endpoints of a chain given its name or alias."""
    urls = _BY_NAME.get(name)
    if urls is None:
        raise EndpointNotFound(name)
    endpoints = []
    for url in urls:
        try:
            endpoints.append(NodeEndpoint.from_str(url))
        except ParsingError:
            continue
    return endpoints


@dataclass
class ChainInfo:
    """A chain name with the list of its endpoints."""

    name: str
    endpoints: list[NodeEndpoint] = field(default_factory=list)

    @classmethod
    def from_str(cls, name: str) -> "ChainInfo":
        """Look a chain up by name or alias, ignoring case."""
        name = name.lower()
        try:
            endpoints = get_chain_urls(name)
        except EndpointNotFound as exc:
            raise NotFound(f"Chain not found: {name}") from exc
        if not endpoints:
            raise ChainUnsupported(name)
        return cls(name, endpoints)

    def get_random_url(self, filter: EndpointType | None = None) -> str:
        """Return the URL of one random endpoint, optionally of one kind only."""
        candidates = [ep for ep in self.endpoints if filter is None or filter.matches(ep)]
        if not candidates:
            raise NotFound(f"No node found for filter {filter}")
        return random.choice(candidates).as_url()