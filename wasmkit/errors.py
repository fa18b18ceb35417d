"""Exception hierarchy shared by the whole package."""

from __future__ import annotations


class WasmkitError(Exception):
    """Base class of every error raised by the package."""


class PalletNotFound(WasmkitError):
    """The requested pallet does not exist in the runtime."""

    def __init__(self, pallet: str) -> None:
        self.pallet = pallet
        super().__init__(f"The following pallet was not found: `{pallet}`")


class NotFound(WasmkitError):
    """A named item could not be found."""

    def __init__(self, item: str) -> None:
        self.item = item
        super().__init__(f"The following item was not found: `{item}`")


class NoMetadataFound(WasmkitError):
    """The runtime holds no metadata for the requested item."""

    def __init__(self) -> None:
        super().__init__("No metadata found")


class AlreadyCompressed(WasmkitError):
    """The runtime to compress is already compressed."""

    def __init__(self) -> None:
        super().__init__("The input is already compressed")


class UnsupportedVariant(WasmkitError):
    """A type in the registry is not the expected variant."""

    def __init__(self) -> None:
        super().__init__("Unsupported variant")


class UnsupportedRuntimeVersion(WasmkitError):
    """The metadata version is older than V12."""

    def __init__(self) -> None:
        super().__init__("Unsupported Runtime version. Supported versions are V12 and above")


class ParsingError(WasmkitError):
    """A value could not be parsed."""

    def __init__(self, name: str, hint: str = "") -> None:
        self.name = name
        self.hint = hint
        super().__init__(f"Error parsing `{name}`.{hint}")


class EndpointNotFound(WasmkitError):
    """No endpoint is known for the given chain name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Endpoint not found for `{name}`")


class UnsupportedFilter(WasmkitError):
    """Filtering was requested for an output format that cannot filter."""

    def __init__(self) -> None:
        super().__init__("Cannot filter with this format")


class NoRuntimeAtUrl(WasmkitError):
    """Nothing that looks like a runtime was found at the URL."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Could not find a valid runtime at {url}")


class UnknownSource(WasmkitError):
    """The input cannot be resolved to a known source."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Cannot resolve `{text}` to a known Source")


class SourceParseError(WasmkitError):
    """A command line argument could not be parsed as a source."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"SourceParseError {text}")


class ChainUnsupported(WasmkitError):
    """The chain is known but has no usable endpoint."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unsupported chain: {name}")