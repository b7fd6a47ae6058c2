"""SARIF → Issue mapping.

Only results whose rule is in the ``security`` category are converted.
One Issue is produced per result location; a location whose URI cannot be
resolved is logged and skipped, and its error is returned with the rest of
the batch in the :class:`ConversionResult`.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Set, Tuple, Union

from issuebridge.errors import PathResolutionError
from issuebridge.issues.models import ConversionResult, DataflowElement, Issue, Position, Range
from issuebridge.issues.paths import resolve_location
from issuebridge.issues.severity import classify
from issuebridge.sarif.dataflow import extract_dataflow
from issuebridge.sarif.models import Region, Result, Rule, Run
from issuebridge.sarif.parser import parse_sarif
from issuebridge.sarif.suppression import resolve_suppressions

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 100


def region_to_issue_range(region: Region) -> Range:
    """0-based range for the primary location of a result.

    SARIF regions are 1-based. The end is clamped so it never precedes the
    start line or drops below column 0.
    """
    start_line = region.start_line - 1
    return Range(
        start=Position(line=start_line, character=region.start_column - 1),
        end=Position(
            line=max(region.end_line - 1, start_line),
            character=max(region.end_column - 1, 0),
        ),
    )


def build_message(result: Result, rule: Rule) -> str:
    text = result.message
    if rule.short_description:
        text = f"{rule.short_description}: {text}"
    if len(text) > MAX_MESSAGE_LENGTH:
        text = text[:MAX_MESSAGE_LENGTH] + "..."
    return text


def _position(rng: Range) -> Tuple[Optional[int], Optional[int]]:
    """1-based (line, column) of the range start, or (None, None)."""
    if rng.start.line >= 0 and rng.start.character >= 0:
        return rng.start.line + 1, rng.start.character + 1
    return None, None


def run_to_issues(
    run: Run,
    base_dir: str,
    include_ignores: bool,
    log: Optional[logging.Logger] = None,
) -> ConversionResult:
    """Convert every security result of *run* into Issues."""
    log = log or logger
    issues: List[Issue] = []
    errors: List[Exception] = []
    seen: Set[Tuple[str, Optional[int]]] = set()

    for result in run.results:
        rule = run.get_rule(result.rule_id)
        is_ignored, details = resolve_suppressions(result.suppressions)
        dataflow: Optional[Tuple[DataflowElement, ...]] = None

        for location in result.locations:
            physical = location.physical_location
            try:
                path = resolve_location(base_dir, physical.uri)
            except PathResolutionError as exc:
                log.error("%s", exc)
                errors.append(exc)
                continue

            if not rule.is_security:
                log.debug("Skipping result for non-security rule %r", result.rule_id)
                continue
            if is_ignored and not include_ignores:
                continue

            line, column = _position(region_to_issue_range(physical.region))
            key = (path, line)
            if key in seen:
                continue
            seen.add(key)

            if dataflow is None:
                dataflow = tuple(extract_dataflow(result, base_dir, log))

            issues.append(
                Issue(
                    id=result.rule_id,
                    title=rule.short_description or rule.id,
                    severity=classify(result.level or rule.default_level),
                    message=build_message(result, rule),
                    dataflow=dataflow,
                    cwes=tuple(rule.cwe),
                    file_path=path,
                    line=line,
                    column=column,
                    fingerprint=result.primary_fingerprint,
                    is_ignored=is_ignored,
                    ignore_details=details,
                )
            )

    return ConversionResult(issues=tuple(issues), errors=errors)


def convert_sarif_json_to_issues(
    log: Optional[logging.Logger],
    data: Union[bytes, str],
    base_path: str,
    include_ignores: bool,
) -> ConversionResult:
    """Convert a SARIF document to Issues.

    Args:
        log: Logger for per-location failures; the module logger when None.
        data: Raw SARIF JSON, optionally wrapped as ``{"sarif": {...}}``.
        base_path: Directory the scan ran in. Empty keeps paths relative.
        include_ignores: Keep results whose suppression is accepted.

    Returns:
        A ConversionResult. Its ``errors`` list is non-empty when some
        locations could not be resolved; the remaining issues are still
        returned.

    Raises:
        ParseError: *data* is not a JSON object.
    """
    log = log or logger
    sarif_log = parse_sarif(data)
    if not sarif_log.runs:
        return ConversionResult()
    if len(sarif_log.runs) > 1:
        log.debug(
            "SARIF document has %d runs; only the first (%s) is converted",
            len(sarif_log.runs),
            sarif_log.runs[0].tool_name or "unnamed tool",
        )
    return run_to_issues(sarif_log.runs[0], base_path, include_ignores, log)
