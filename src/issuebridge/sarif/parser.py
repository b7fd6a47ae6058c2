"""SARIF ingestion: raw bytes to a typed :class:`SarifLog`."""

from __future__ import annotations

import json
from typing import Union

from issuebridge.errors import ParseError
from issuebridge.sarif.models import SarifLog


def parse_sarif(data: Union[bytes, str]) -> SarifLog:
    """Parse a SARIF document, unwrapping an optional ``{"sarif": {...}}`` envelope."""
    try:
        raw = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError(f"failed to parse SARIF JSON: {exc}", data) from exc

    if not isinstance(raw, dict):
        raise ParseError("failed to parse SARIF JSON: top level is not an object", data)

    envelope = raw.get("sarif")
    if isinstance(envelope, dict):
        raw = envelope

    return SarifLog.from_dict(raw)
