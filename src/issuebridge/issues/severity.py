"""Severity classification: one ordered scale for SARIF and SCA encodings."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Severity(str, Enum):
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        return SEVERITY_ORDER[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank


SEVERITY_ORDER: dict[Severity, int] = {
    Severity.LOW: 0,
    Severity.MEDIUM: 1,
    Severity.HIGH: 2,
    Severity.CRITICAL: 3,
}

# SARIF numeric codes ("3", "2"), SARIF levels and SCA severity strings.
_SEVERITY_MAP: dict[str, Severity] = {
    "3": Severity.HIGH,
    "2": Severity.MEDIUM,
    "error": Severity.HIGH,
    "warning": Severity.MEDIUM,
    "critical": Severity.CRITICAL,
    "high": Severity.HIGH,
    "medium": Severity.MEDIUM,
    "low": Severity.LOW,
}


def classify(value: Optional[str]) -> Severity:
    """Map a raw severity encoding to :class:`Severity`. Unknown → LOW."""
    if not value:
        return Severity.LOW
    return _SEVERITY_MAP.get(value.strip().lower(), Severity.LOW)


def severity_at_or_above(severity: Severity, threshold: Severity) -> bool:
    """Return True if *severity* is at or above *threshold*."""
    return severity.rank >= threshold.rank
