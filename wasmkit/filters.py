"""Module/call filter parsing."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import ParsingError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Filter:
    """A filter on a module (pallet) and optionally one of its calls."""

    module: str
    call: str | None = None

    @classmethod
    def from_str(cls, text: str) -> "Filter":
        """Parse ``module`` or ``module.call``, lower-cased; extra parts are ignored."""
        text = text.lower()
        if not text:
            raise ParsingError(text, "Cannot have a filter without at least a module")
        chunks = text.split(".")
        result = cls(chunks[0], chunks[1] if len(chunks) > 1 else None)
        log.debug("from_str(%s) => %r", text, result)
        return result