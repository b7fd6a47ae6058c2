"""SARIF suppression resolution.

A result may carry several suppression records. The winner is picked by
status, highest first::

    accepted  >  underReview  >  rejected  >  anything unrecognised

A record with no ``status`` counts as ``accepted``. Equal statuses keep
list order. The result is ignored only when the winner is ``accepted``.

Suppression dates come in two shapes: ``Mon Jan 02 2006`` and RFC3339.
When neither parses, the current UTC time is used and the returned
``IgnoreDetails.dates_estimated`` flag is set.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional, Tuple

from issuebridge.issues.models import (
    IgnoreDetails,
    SuppressionStatus,
    format_rfc3339,
    parse_rfc3339,
)
from issuebridge.sarif.models import Suppression

_STATUS_PRIORITY = {
    SuppressionStatus.ACCEPTED: 3,
    SuppressionStatus.UNDER_REVIEW: 2,
    SuppressionStatus.REJECTED: 1,
}

_DEFAULT_REASON = "None given"


def suppression_status(suppression: Suppression) -> Optional[SuppressionStatus]:
    """Return the record's status; a missing status means accepted."""
    if not suppression.status:
        return SuppressionStatus.ACCEPTED
    try:
        return SuppressionStatus(suppression.status)
    except ValueError:
        return None


def highest_suppression(
    suppressions: List[Suppression],
) -> Tuple[Optional[Suppression], Optional[SuppressionStatus]]:
    """Pick the highest-priority suppression and its status."""
    best: Optional[Suppression] = None
    best_status: Optional[SuppressionStatus] = None
    best_rank = -1
    for sup in suppressions:
        status = suppression_status(sup)
        rank = _STATUS_PRIORITY.get(status, 0) if status else 0
        if rank > best_rank:
            best, best_status, best_rank = sup, status, rank
    return best, best_status


def parse_date(value: str) -> Tuple[datetime, bool]:
    """Parse a suppression date. Returns (timestamp, estimated)."""
    text = value.strip()
    try:
        return datetime.strptime(text, "%a %b %d %Y").replace(tzinfo=timezone.utc), False
    except ValueError:
        pass
    try:
        parsed = parse_rfc3339(text)
    except ValueError:
        parsed = None
    if parsed is not None and parsed.tzinfo is not None and "T" in text.upper():
        return parsed, False
    return datetime.now(timezone.utc).replace(microsecond=0), True


def to_ignore_details(suppression: Optional[Suppression]) -> Optional[IgnoreDetails]:
    """Map a SARIF suppression to IgnoreDetails (None in, None out)."""
    if suppression is None:
        return None

    ignored_on, on_estimated = parse_date(suppression.ignored_on)
    expiration = ""
    exp_estimated = False
    if suppression.expiration is not None:
        exp_date, exp_estimated = parse_date(suppression.expiration)
        expiration = format_rfc3339(exp_date)

    return IgnoreDetails(
        category=suppression.category,
        reason=suppression.justification.strip() or _DEFAULT_REASON,
        expiration=expiration,
        ignored_on=ignored_on,
        ignored_by=suppression.ignored_by,
        status=suppression_status(suppression),
        dates_estimated=on_estimated or exp_estimated,
    )


def resolve_suppressions(suppressions: List[Suppression]) -> Tuple[bool, Optional[IgnoreDetails]]:
    """Return (is_ignored, details) for a result's suppression list."""
    suppression, status = highest_suppression(suppressions)
    is_ignored = suppression is not None and status == SuppressionStatus.ACCEPTED
    return is_ignored, to_ignore_details(suppression)
