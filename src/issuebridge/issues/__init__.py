"""Issue model, severity scale, and path helpers."""

from issuebridge.issues.models import (
    ConversionResult,
    DataflowElement,
    IgnoreDetails,
    Issue,
    Position,
    Range,
    SuppressionStatus,
)
from issuebridge.issues.paths import decode_path, resolve_location, to_absolute_path
from issuebridge.issues.severity import Severity, classify, severity_at_or_above

__all__ = [
    "ConversionResult",
    "DataflowElement",
    "IgnoreDetails",
    "Issue",
    "Position",
    "Range",
    "Severity",
    "SuppressionStatus",
    "classify",
    "decode_path",
    "resolve_location",
    "severity_at_or_above",
    "to_absolute_path",
]
