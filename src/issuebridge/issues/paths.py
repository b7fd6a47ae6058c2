"""Path canonicalisation for scanner-reported URIs."""

from __future__ import annotations

import os
import re
from urllib.parse import unquote

from issuebridge.errors import PathResolutionError

# A '%' that does not start a two-digit hex escape.
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def to_absolute_path(base_dir: str, relative_path: str) -> str:
    """Join *relative_path* under *base_dir* and clean the result.

    The URI is always treated as relative to *base_dir*, even when it carries
    a leading separator. An empty *base_dir* leaves the path relative.
    """
    if not base_dir:
        return os.path.normpath(relative_path) if relative_path else ""
    if not relative_path:
        return os.path.normpath(base_dir)
    return os.path.normpath(os.path.join(base_dir, relative_path.lstrip("/\\")))


def decode_path(encoded_path: str) -> str:
    """Percent-decode *encoded_path*. Raises ValueError on a broken escape."""
    m = _BAD_ESCAPE_RE.search(encoded_path)
    if m is not None:
        raise ValueError(f"invalid URL escape {encoded_path[m.start():m.start() + 3]!r}")
    return unquote(encoded_path, errors="strict")


def resolve_location(base_dir: str, uri: str) -> str:
    """Return the decoded absolute path of *uri* under *base_dir*."""
    try:
        return decode_path(to_absolute_path(base_dir, uri))
    except ValueError as exc:
        raise PathResolutionError(base_dir, uri, str(exc)) from exc
