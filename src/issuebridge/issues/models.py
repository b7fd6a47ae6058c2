"""Unified issue model shared by the SARIF and SCA converters."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from issuebridge.errors import ConversionError, join_errors
from issuebridge.issues.severity import Severity


class SuppressionStatus(str, Enum):
    ACCEPTED = "accepted"
    UNDER_REVIEW = "underReview"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Position:
    """0-based line / character pair."""

    line: int = 0
    character: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"line": self.line, "character": self.character}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Position":
        return cls(line=data.get("line", 0), character=data.get("character", 0))


@dataclass(frozen=True)
class Range:
    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Range":
        return cls(
            start=Position.from_dict(data.get("start") or {}),
            end=Position.from_dict(data.get("end") or {}),
        )


@dataclass(frozen=True)
class DataflowElement:
    """One step of a traced code flow."""

    position: int  # index in the deduplicated flow
    file_path: str
    flow_range: Range
    content: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": self.position,
            "filePath": self.file_path,
            "flowRange": self.flow_range.to_dict(),
            "content": self.content,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DataflowElement":
        return cls(
            position=data.get("position", 0),
            file_path=data.get("filePath", ""),
            flow_range=Range.from_dict(data.get("flowRange") or {}),
            content=data.get("content", ""),
        )


@dataclass(frozen=True)
class IgnoreDetails:
    """Why and by whom a finding was suppressed."""

    category: str
    reason: str
    expiration: str  # RFC3339, or "" when the suppression never expires
    ignored_on: datetime
    ignored_by: str
    status: Optional[SuppressionStatus]
    dates_estimated: bool = False  # a date failed to parse; "now" was used

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "category": self.category,
            "reason": self.reason,
            "expiration": self.expiration,
            "ignoredOn": format_rfc3339(self.ignored_on),
            "ignoredBy": self.ignored_by,
            "status": self.status.value if self.status else "",
        }
        if self.dates_estimated:
            out["datesEstimated"] = True
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IgnoreDetails":
        status = data.get("status")
        estimated = bool(data.get("datesEstimated", False))
        try:
            ignored_on = parse_rfc3339(str(data.get("ignoredOn") or ""))
        except ValueError:
            ignored_on, estimated = datetime.now(timezone.utc).replace(microsecond=0), True
        return cls(
            category=data.get("category", ""),
            reason=data.get("reason", ""),
            expiration=data.get("expiration", ""),
            ignored_on=ignored_on,
            ignored_by=data.get("ignoredBy", ""),
            status=SuppressionStatus(status) if status else None,
            dates_estimated=estimated,
        )


@dataclass(frozen=True)
class Issue:
    """A normalized finding, from either a SARIF or an SCA report."""

    id: str
    title: str
    severity: Severity
    message: str = ""
    dataflow: Tuple[DataflowElement, ...] = ()
    cwes: Tuple[str, ...] = ()
    cves: Tuple[str, ...] = ()
    package_name: str = ""
    version: str = ""
    ecosystem: str = ""
    fixed_in: Tuple[str, ...] = ()
    remediation: str = ""
    file_path: str = ""
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based
    fingerprint: str = ""
    is_ignored: bool = False
    ignore_details: Optional[IgnoreDetails] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict; empty optional fields are left out."""
        out: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "severity": self.severity.value,
        }
        if self.dataflow:
            out["dataflow"] = [d.to_dict() for d in self.dataflow]
        if self.cwes:
            out["cwes"] = list(self.cwes)
        if self.cves:
            out["cves"] = list(self.cves)
        if self.package_name:
            out["packageName"] = self.package_name
        if self.version:
            out["version"] = self.version
        if self.ecosystem:
            out["ecosystem"] = self.ecosystem
        if self.fixed_in:
            out["fixedIn"] = list(self.fixed_in)
        if self.remediation:
            out["remediation"] = self.remediation
        if self.file_path:
            out["filePath"] = self.file_path
        if self.line:
            out["line"] = self.line
        if self.column:
            out["column"] = self.column
        if self.message:
            out["message"] = self.message
        if self.fingerprint:
            out["fingerPrint"] = self.fingerprint
        if self.is_ignored:
            out["isIgnored"] = True
        if self.ignore_details is not None:
            out["ignoreDetails"] = self.ignore_details.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Issue":
        details = data.get("ignoreDetails")
        return cls(
            id=data.get("id", ""),
            title=data.get("title", ""),
            severity=Severity(data.get("severity", Severity.LOW.value)),
            message=data.get("message", ""),
            dataflow=tuple(DataflowElement.from_dict(d) for d in data.get("dataflow", [])),
            cwes=tuple(data.get("cwes", [])),
            cves=tuple(data.get("cves", [])),
            package_name=data.get("packageName", ""),
            version=data.get("version", ""),
            ecosystem=data.get("ecosystem", ""),
            fixed_in=tuple(data.get("fixedIn", [])),
            remediation=data.get("remediation", ""),
            file_path=data.get("filePath", ""),
            line=data.get("line"),
            column=data.get("column"),
            fingerprint=data.get("fingerPrint", ""),
            is_ignored=bool(data.get("isIgnored", False)),
            ignore_details=IgnoreDetails.from_dict(details) if details else None,
        )


@dataclass
class ConversionResult:
    """Issues produced by one conversion call plus any per-item failures."""

    issues: Tuple[Issue, ...] = ()
    errors: List[Exception] = field(default_factory=list)

    @property
    def error(self) -> Optional[ConversionError]:
        return join_errors(self.errors)

    @property
    def ok(self) -> bool:
        return not self.errors

    def __iter__(self):
        # Allows ``issues, err = convert_...(...)``.
        return iter((self.issues, self.error))


def format_rfc3339(value: datetime) -> str:
    """Format *value* as RFC3339 ('Z' for UTC).

    Fractional seconds are written only when present, so whatever
    :func:`parse_rfc3339` read comes back out unchanged.
    """
    offset = value.utcoffset()
    if offset is None or not offset:
        return value.replace(tzinfo=None).isoformat() + "Z"
    return value.isoformat()


_FRACTION = re.compile(r"(T\d{2}:\d{2}:\d{2})\.(\d+)", re.IGNORECASE)


def parse_rfc3339(value: str) -> datetime:
    """Parse an RFC3339 timestamp. Raises ValueError.

    ``datetime.fromisoformat`` on 3.10 takes neither a ``Z`` suffix nor
    fractions other than 3 or 6 digits; both are normalised first.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}", text)
    return datetime.fromisoformat(text)
