"""Runtime metadata and the ways of writing it out."""

from __future__ import annotations

import dataclasses
import enum
import json
import logging
from dataclasses import dataclass, field
from typing import BinaryIO, Iterable, TypeVar

from .errors import (
    NoMetadataFound,
    PalletNotFound,
    ParsingError,
    UnsupportedFilter,
    UnsupportedRuntimeVersion,
)

log = logging.getLogger(__name__)


class OutputFormat(enum.Enum):
    """The formats metadata can be written in."""

    HUMAN = "human"
    JSON = "json"
    SCALE = "scale"
    HEX_SCALE = "hex+scale"
    JSON_SCALE = "json+scale"

    @classmethod
    def parse(cls, text: str) -> "OutputFormat":
        """Parse a format name such as ``json`` or ``scale+hex``."""
        try:
            return _FORMAT_NAMES[text]
        except KeyError:
            raise ParsingError(text, " Unknown output format") from None

    def default_filename(self) -> str:
        """The file name used when the output is ``auto``."""
        return _DEFAULT_FILENAMES[self]


_FORMAT_NAMES = {
    "human": OutputFormat.HUMAN,
    "json": OutputFormat.JSON,
    "scale": OutputFormat.SCALE,
    "hex+scale": OutputFormat.HEX_SCALE,
    "scale+hex": OutputFormat.HEX_SCALE,
    "json+scale": OutputFormat.JSON_SCALE,
    "scale+json": OutputFormat.JSON_SCALE,
}

_DEFAULT_FILENAMES = {
    OutputFormat.HUMAN: "metadata.txt",
    OutputFormat.JSON: "metadata.json",
    OutputFormat.SCALE: "metadata.scale",
    OutputFormat.HEX_SCALE: "metadata.hex",
    OutputFormat.JSON_SCALE: "metadata.jscale",
}


@dataclass(frozen=True)
class Variant:
    """One variant of a call, event or error enum."""

    index: int
    name: str


@dataclass
class Module:
    """A module of V12 or V13 metadata."""

    name: str
    index: int
    calls: list[str] | None = None
    events: list[str] | None = None


@dataclass
class Pallet:
    """A pallet of V14 metadata."""

    name: str
    index: int
    calls: list[Variant] | None = None
    events: list[Variant] | None = None
    errors: list[Variant] | None = None
    storage: list[str] | None = None
    constants: list[str] = field(default_factory=list)


@dataclass
class RuntimeMetadata:
    """Decoded metadata with its prefixed SCALE encoding."""

    version: int
    modules: list[Module] = field(default_factory=list)
    pallets: list[Pallet] = field(default_factory=list)
    encoded: bytes = b""


_Named = TypeVar("_Named", Module, Pallet)


def _find(items: Iterable[_Named], name: str) -> _Named:
    wanted = name.lower()
    for item in items:
        if item.name.lower() == wanted:
            return item
    raise PalletNotFound(name)


def _line(out: BinaryIO, text: str) -> None:
    out.write(f"{text}\n".encode())


def _emit(out: BinaryIO, data: bytes) -> None:
    try:
        out.write(data)
        out.flush()
    except BrokenPipeError:
        pass


def _write_variants(out: BinaryIO, variants: list[Variant] | None) -> None:
    if variants is None:
        raise NoMetadataFound()
    for variant in variants:
        _line(out, f"- {variant.index}: {variant.name}")


def _as_json(meta: RuntimeMetadata) -> dict:
    data: dict = {"version": meta.version}
    if meta.version == 14:
        data["pallets"] = [dataclasses.asdict(p) for p in meta.pallets]
    else:
        data["modules"] = [dataclasses.asdict(m) for m in meta.modules]
    return data


@dataclass
class MetadataWriter:
    """Writes runtime metadata to a binary stream in a chosen format."""

    metadata: RuntimeMetadata

    def write(self, fmt: OutputFormat, filter: str | None, out: BinaryIO) -> None:
        """Write the metadata; only the human format accepts a pallet filter."""
        log.debug("Writing metadata: fmt=%s, filter=%r", fmt, filter)
        if fmt is OutputFormat.HUMAN:
            if filter is not None:
                self.write_single_module(filter, out)
            else:
                self.write_modules_list(out)
            return
        if filter is not None:
            raise UnsupportedFilter()

        encoded = self.metadata.encoded
        if fmt is OutputFormat.JSON:
            _emit(out, (json.dumps(_as_json(self.metadata), indent=2) + "\n").encode())
        elif fmt is OutputFormat.SCALE:
            _emit(out, encoded)
        elif fmt is OutputFormat.HEX_SCALE:
            _emit(out, f"0x{encoded.hex()}\n".encode())
        else:
            payload = json.dumps({"result": f"0x{encoded.hex()}"}, indent=2)
            _emit(out, (payload + "\n").encode())

    def write_modules_list(self, out: BinaryIO) -> None:
        """Write every module or pallet, sorted by index."""
        meta = self.metadata
        if meta.version in (12, 13):
            items: list[Module] | list[Pallet] = meta.modules
        elif meta.version == 14:
            items = meta.pallets
        else:
            raise UnsupportedRuntimeVersion()
        for item in sorted(items, key=lambda i: i.index):
            _line(out, f" - {item.index:02}: {item.name}")

    def write_single_module(self, filter: str, out: BinaryIO) -> None:
        """Write the details of one module or pallet, matched by name ignoring case."""
        log.debug("write_single_module with filter: %r", filter)
        meta = self.metadata
        if meta.version in (12, 13):
            module = _find(meta.modules, filter)
            _line(out, f"Module {module.index:02}: {module.name}")
            _line(out, "🤙 Calls:")
            for call in module.calls or ():
                _line(out, f"  - {call}")
            _line(out, "📢 Events:")
            for event in module.events or ():
                _line(out, f"  - {event}")
        elif meta.version == 14:
            pallet = _find(meta.pallets, filter)
            _line(out, f"Module {pallet.index:02}: {pallet.name}")
            _line(out, "🤙 Calls:")
            _write_variants(out, pallet.calls)
            _line(out, "📢 Events:")
            _write_variants(out, pallet.events)
            _line(out, "⛔️ Errors:")
            _write_variants(out, pallet.errors)
            _line(out, "📦 Storage:")
            for entry in pallet.storage or ():
                _line(out, f"- {entry}")
            _line(out, "💎 Constants:")
            for constant in pallet.constants:
                _line(out, f"- {constant}")
        else:
            raise UnsupportedRuntimeVersion()