"""SCA JSON ingestion: one envelope or an array of envelopes."""

from __future__ import annotations

import json
from typing import List, Union

from issuebridge.errors import ParseError
from issuebridge.oss.models import ScanResult


def _is_array(data: Union[bytes, str]) -> bool:
    head = data.lstrip()[:1]
    return head in (b"[", "[")


def parse_scan_results(data: Union[bytes, str]) -> List[ScanResult]:
    """Parse SCA output into a list of ScanResult envelopes."""
    try:
        raw = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError(f"couldn't unmarshal CLI response: {exc}", data) from exc

    if _is_array(data):
        if not isinstance(raw, list) or not all(isinstance(item, dict) for item in raw):
            raise ParseError("couldn't unmarshal CLI response: expected an array of objects", data)
        return [ScanResult.from_dict(item) for item in raw]

    if not isinstance(raw, dict):
        raise ParseError("couldn't unmarshal CLI response: expected an object", data)
    return [ScanResult.from_dict(raw)]
