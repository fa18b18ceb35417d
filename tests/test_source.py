from pathlib import Path

import pytest
import responses

from wasmkit.chains import ChainInfo, EndpointType
from wasmkit.errors import UnknownSource
from wasmkit.source import (
    AliasSource,
    ChainSource,
    FileSource,
    GithubSource,
    UrlSource,
    get_source,
    get_source_type,
    parse_source,
    source_from_options,
)

RELEASE_URL = (
    "https://github.com/paritytech/polkadot/releases/download/v0.9.42/"
    "kusama_runtime-v9420.compact.compressed.wasm"
)


@pytest.mark.parametrize("url", ["ws://localhost:9933", "wss://localhost:9933"])
def test_converts_from_chain_ws(url):
    src = parse_source(url)
    assert isinstance(src, ChainSource)
    assert src.block.endpoint.kind is EndpointType.WEBSOCKET
    assert src.block.endpoint.url == url


@pytest.mark.parametrize(
    "url",
    [
        "http://localhost:9933",
        "https://localhost:9933",
        "https://1rpc.io:443/astr",
        "https://astar.api.onfinality.io:443/public",
        "https://astar.public.blastapi.io:443",
        "https://evm.astar.network:443",
        "https://evm.shibuya.astar.network:443",
        "https://evm.shiden.astar.network:443",
        "https://http-versi-rpc-node-0.parity-versi.parity.io:443",
        "https://http-wococo-pos-rpc-node-0.parity-testnet.parity.io:443",
        "https://shibuya-rpc.dwellir.com:443",
        "https://shibuya.api.onfinality.io:443/public",
        "https://shibuya.public.blastapi.io:443",
        "https://shiden-rpc.dwellir.com:443",
        "https://shiden.api.onfinality.io:443/public",
        "https://shiden.public.blastapi.io:443",
        "https://www.alchemy.com:443/astar];",
    ],
)
def test_converts_from_chain_http(url):
    src = parse_source(url)
    assert isinstance(src, ChainSource)
    assert src.block.endpoint.kind is EndpointType.HTTP
    assert src.block.endpoint.url == url


@pytest.mark.parametrize("name", ["polkadot", "dot"])
def test_converts_from_alias(name):
    assert parse_source(name) == AliasSource(name)


def test_converts_from_url():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, RELEASE_URL, body=b"\0" * 500_000)
        src = parse_source(RELEASE_URL)
    assert src == UrlSource(RELEASE_URL)


def test_small_wasm_url_is_unknown():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, RELEASE_URL, body=b"tiny")
        with pytest.raises(UnknownSource):
            parse_source(RELEASE_URL)


def test_converts_from_path(tmp_path):
    (tmp_path / "{fake_runtime}.wasm").write_bytes(b"")
    path = str(tmp_path)
    assert parse_source(path) == FileSource(Path(path))


@pytest.mark.parametrize("value", ["foo", "bar"])
def test_catches_unknown(value, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(UnknownSource):
        parse_source(value)


def test_converts_from_github_ref():
    src = parse_source("kusama@0.9.42")
    assert isinstance(src, GithubSource)
    assert src.reference.runtime == "kusama"
    assert str(src) == "github: kusama@0.9.42"


def test_from_options_prefers_file():
    src = source_from_options("runtime.wasm", ChainInfo.from_str("local"), None, "https://example.com/x.wasm")
    assert src == FileSource(Path("runtime.wasm"))


def test_from_options_chain_uses_block():
    src = source_from_options(None, ChainInfo.from_str("local"), "0xabc", None)
    assert isinstance(src, ChainSource)
    assert src.block.endpoint.url == "http://localhost:9933"
    assert src.block.block_ref == "0xabc"


def test_from_options_url():
    assert source_from_options(url="https://example.com/r.wasm") == UrlSource("https://example.com/r.wasm")


def test_from_options_nothing_raises():
    with pytest.raises(UnknownSource):
        source_from_options(None, None, None, None)


def test_get_source_type(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert get_source_type("dot") == AliasSource("dot")
    assert isinstance(get_source_type("ws://localhost:9944"), ChainSource)
    with pytest.raises(UnknownSource):
        get_source_type("foo")


def test_file_as_file():
    assert FileSource(Path("a.wasm")).as_file() == Path("a.wasm")


def test_url_as_file_downloads():
    url = "https://example.com/runtime.wasm"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, url, body=b"runtime-bytes")
        path = UrlSource(url).as_file()
    try:
        assert path.read_bytes() == b"runtime-bytes"
    finally:
        path.unlink()


def test_github_as_file_downloads():
    src = parse_source("kusama@0.9.42")
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, RELEASE_URL, body=b"release")
        path = src.as_file()
    try:
        assert path.read_bytes() == b"release"
    finally:
        path.unlink()


def test_get_source_fetches_url():
    url = "https://example.com/other.wasm"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, url, body=b"data")
        src = get_source(None, None, None, url)
    assert isinstance(src, FileSource)
    try:
        assert src.path.read_bytes() == b"data"
    finally:
        src.path.unlink()