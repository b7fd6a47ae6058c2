"""JSON reporter for converted issues."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Sequence

from issuebridge.issues.models import Issue


def to_dict(
    issues: Sequence[Issue],
    *,
    success: bool = True,
    error: Optional[Exception] = None,
) -> Dict[str, Any]:
    """Wrap *issues* with a count and the conversion outcome."""
    out: Dict[str, Any] = {
        "success": success,
        "issueCount": len(issues),
        "issues": [issue.to_dict() for issue in issues],
    }
    if error is not None:
        out["errors"] = str(error).splitlines()
    return out


def render(
    issues: Sequence[Issue],
    *,
    success: bool = True,
    error: Optional[Exception] = None,
    indent: Optional[int] = 2,
) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(issues, success=success, error=error), indent=indent)
