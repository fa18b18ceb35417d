"""Where a runtime comes from: a file, a node, a chain alias, a URL or a release."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from .chains import ChainInfo, NodeEndpoint, get_chain_urls
from .errors import EndpointNotFound, ParsingError, UnknownSource, WasmkitError
from .fetch import fetch_at_url, is_wasm_from_url
from .github_ref import GithubRef

log = logging.getLogger(__name__)

_URL_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")


@dataclass(frozen=True)
class OnchainBlock:
    """A node endpoint and an optional block hash to read the runtime at."""

    endpoint: NodeEndpoint
    block_ref: str | None = None

    def __str__(self) -> str:
        if self.block_ref is None:
            return str(self.endpoint)
        return f"{self.endpoint} at {self.block_ref}"


class Source:
    """Base class of every runtime source."""


@dataclass(frozen=True)
class FileSource(Source):
    """A runtime file on the local filesystem."""

    path: Path

    def as_file(self) -> Path:
        """Return the path of the file."""
        return self.path

    def __str__(self) -> str:
        return f'"{self.path}"'


@dataclass(frozen=True)
class ChainSource(Source):
    """A node the runtime can be read from."""

    block: OnchainBlock

    def __str__(self) -> str:
        return f"chain: {self.block}"


@dataclass(frozen=True)
class AliasSource(Source):
    """A chain name or alias such as ``westend`` or ``wnd``."""

    alias: str

    def __str__(self) -> str:
        return f'alias: "{self.alias}"'


@dataclass(frozen=True)
class UrlSource(Source):
    """A URL serving the runtime file."""

    url: str

    def as_file(self) -> Path:
        """Download the runtime into a temporary file and return its path."""
        return fetch_at_url(self.url)

    def __str__(self) -> str:
        return f'url: "{self.url}"'


@dataclass(frozen=True)
class GithubSource(Source):
    """A released runtime given as ``<runtime>@<version>``."""

    reference: GithubRef

    def as_file(self) -> Path:
        """Download the release into a temporary file and return its path."""
        return fetch_at_url(self.reference.as_url())

    def __str__(self) -> str:
        return f"github: {self.reference}"


def _load_simple(text: str) -> FileSource | ChainSource | None:
    """Resolve the plain cases: an RPC endpoint or an existing path."""
    try:
        return ChainSource(OnchainBlock(NodeEndpoint.from_str(text)))
    except ParsingError:
        pass
    if Path(text).exists():
        return FileSource(Path(text))
    return None


def parse_source(text: str) -> Source:
    """Guess which kind of source ``text`` describes.

    URLs containing ``wasm`` are fetched to check that they look like a runtime.
    """
    try:
        return GithubSource(GithubRef.from_str(text))
    except WasmkitError:
        pass

    try:
        if get_chain_urls(text):
            return AliasSource(text)
    except EndpointNotFound:
        pass

    simple = _load_simple(text)
    if isinstance(simple, FileSource):
        return simple

    if not _URL_SCHEME.match(text):
        raise UnknownSource(text)

    if "wasm" in text:
        try:
            looks_like_wasm = is_wasm_from_url(text)
        except WasmkitError:
            looks_like_wasm = False
        if looks_like_wasm:
            log.debug("What we got at %s could be some wasm indeed", text)
            return UrlSource(text)
    elif isinstance(simple, ChainSource):
        return simple

    raise UnknownSource(text)


def source_from_options(
    file: str | Path | None = None,
    chain: ChainInfo | None = None,
    block: str | None = None,
    url: str | None = None,
) -> Source:
    """Pick one source from command line options: file, then chain, then URL."""
    log.debug("Getting source from options: file=%r chain=%r block=%r url=%r", file, chain, block, url)
    if file is not None:
        return FileSource(Path(file))
    if chain is not None:
        endpoint = NodeEndpoint.from_str(chain.get_random_url(None))
        return ChainSource(OnchainBlock(endpoint, block))
    if url is not None:
        return UrlSource(url)
    raise UnknownSource("No file or chain or url provided!")


def get_source_type(text: str) -> Source:
    """Resolve ``text`` as a file, an endpoint or a chain alias."""
    simple = _load_simple(text)
    if simple is not None:
        return simple
    try:
        get_chain_urls(text)
    except EndpointNotFound:
        raise UnknownSource(text) from None
    return AliasSource(text)


def get_source(
    file: str | Path | None = None,
    chain: ChainInfo | None = None,
    block: str | None = None,
    dl_url: str | None = None,
) -> Source:
    """Like :func:`source_from_options`, but a URL is downloaded into a file first."""
    source = source_from_options(file, chain, block, dl_url)
    if isinstance(source, UrlSource):
        log.debug("Fetching runtime from %s", source.url)
        runtime_file = source.as_file()
        log.debug("Runtime fetched at %s", runtime_file)
        return FileSource(runtime_file)
    return source