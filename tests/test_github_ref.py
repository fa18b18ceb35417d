import pytest

from wasmkit.errors import WasmkitError
from wasmkit.github_ref import GithubRef


@pytest.mark.parametrize("text", ["kusama@1.2.3", "kusama@v1.2.3"])
def test_from_str_ok(text):
    gh = GithubRef.from_str(text)
    assert gh.runtime == "kusama"
    assert str(gh.version) == "1.2.3"


@pytest.mark.parametrize("text", ["kusama-1.2.3", "ksm123", "123", "kusama@", "a@b@1.2.3"])
def test_from_str_err(text):
    with pytest.raises(WasmkitError):
        GithubRef.from_str(text)


def test_as_url():
    gh = GithubRef.from_str("kusama@1.2.3")
    assert (
        gh.as_url()
        == "https://github.com/paritytech/polkadot/releases/download/v1.2.3/kusama_runtime-v230.compact.compressed.wasm"
    )


def test_runtime_version():
    assert GithubRef.from_str("polkadot@0.9.42").runtime_version() == "9420"


def test_display_round_trip():
    gh = GithubRef.from_str("kusama@v0.9.42")
    assert str(gh) == "kusama@0.9.42"
    assert GithubRef.from_str(str(gh)) == gh