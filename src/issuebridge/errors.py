"""Conversion error taxonomy.

``ParseError`` aborts a conversion outright. ``PathResolutionError`` is
raised per location, collected by the mappers, and handed back joined in a
``ConversionError`` next to whatever issues were produced.
"""

from __future__ import annotations

from typing import List, Sequence, Union


class ParseError(ValueError):
    """Raised when a scan payload is not valid JSON of the expected shape."""

    def __init__(self, message: str, payload: Union[bytes, str]) -> None:
        if isinstance(payload, bytes):
            payload = payload.decode("utf-8", errors="replace")
        self.payload = payload
        super().__init__(f"{message}. Input: {payload}")


class PathResolutionError(ValueError):
    """Raised when a location URI cannot be turned into a file path."""

    def __init__(self, base_dir: str, uri: str, reason: str) -> None:
        self.base_dir = base_dir
        self.uri = uri
        super().__init__(
            f"failed to convert URI to absolute path: base directory: {base_dir}, "
            f"URI: {uri}: {reason}"
        )


class ConversionError(Exception):
    """Several per-item failures joined into one error."""

    def __init__(self, errors: Sequence[Exception]) -> None:
        self.errors: List[Exception] = list(errors)
        super().__init__("\n".join(str(e) for e in self.errors))


def join_errors(errors: Sequence[Exception]) -> ConversionError | None:
    """Return a joined ConversionError, or None when *errors* is empty."""
    if not errors:
        return None
    return ConversionError(errors)
