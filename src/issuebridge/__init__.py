"""issuebridge: normalize SARIF and SCA scan reports into one issue model."""

__version__ = "1.0.0"

from issuebridge.errors import ConversionError, ParseError, PathResolutionError
from issuebridge.issues.models import ConversionResult, DataflowElement, IgnoreDetails, Issue
from issuebridge.issues.severity import Severity
from issuebridge.oss.mapper import convert_oss_json_to_issues
from issuebridge.sarif.mapper import convert_sarif_json_to_issues

__all__ = [
    "ConversionError",
    "ConversionResult",
    "DataflowElement",
    "IgnoreDetails",
    "Issue",
    "ParseError",
    "PathResolutionError",
    "Severity",
    "__version__",
    "convert_oss_json_to_issues",
    "convert_sarif_json_to_issues",
]
