import pytest

from wasmkit.errors import (
    AlreadyCompressed,
    ChainUnsupported,
    EndpointNotFound,
    NoMetadataFound,
    NoRuntimeAtUrl,
    NotFound,
    PalletNotFound,
    ParsingError,
    SourceParseError,
    UnknownSource,
    UnsupportedFilter,
    UnsupportedRuntimeVersion,
    UnsupportedVariant,
    WasmkitError,
)


@pytest.mark.parametrize(
    ("exc", "fragment"),
    [
        (PalletNotFound("balances"), "balances"),
        (NotFound("thing"), "thing"),
        (ParsingError("url", "hint"), "url"),
        (EndpointNotFound("foobar"), "foobar"),
        (NoRuntimeAtUrl("http://localhost:9933"), "http://localhost:9933"),
        (UnknownSource("foo"), "foo"),
        (SourceParseError("foo"), "foo"),
        (ChainUnsupported("foobar"), "foobar"),
    ],
)
def test_errors_with_argument_mention_it(exc, fragment):
    assert isinstance(exc, WasmkitError)
    assert fragment in str(exc)


@pytest.mark.parametrize(
    ("exc", "keyword"),
    [
        (NoMetadataFound(), "metadata"),
        (AlreadyCompressed(), "compressed"),
        (UnsupportedVariant(), "variant"),
        (UnsupportedRuntimeVersion(), "version"),
        (UnsupportedFilter(), "filter"),
    ],
)
def test_fixed_errors_describe_themselves(exc, keyword):
    assert isinstance(exc, WasmkitError)
    assert keyword in str(exc).lower()


def test_pallet_not_found_message():
    exc = PalletNotFound("balances")
    assert exc.pallet == "balances"
    assert str(exc) == "The following pallet was not found: `balances`"


def test_parsing_error_keeps_parts():
    exc = ParsingError("url", " bad scheme")
    assert exc.name == "url"
    assert exc.hint == " bad scheme"
    assert str(exc) == "Error parsing `url`. bad scheme"


def test_endpoint_not_found_message():
    assert str(EndpointNotFound("foobar")) == "Endpoint not found for `foobar`"


def test_unknown_source_message():
    exc = UnknownSource("foo")
    assert exc.text == "foo"
    assert "foo" in str(exc)


def test_fixed_messages():
    assert str(AlreadyCompressed()) == "The input is already compressed"
    assert str(UnsupportedFilter()) == "Cannot filter with this format"


def test_chain_unsupported_keeps_name():
    exc = ChainUnsupported("foobar")
    assert exc.name == "foobar"
    assert "foobar" in str(exc)
    with pytest.raises(WasmkitError, match="foobar"):
        raise exc