"""Enhance raw scanner output with the converted issue list.

A tool handler hands over the scanner's stdout plus the name of the mapper
registered for that tool. Known mappers replace the output with
``{"success", "issueCount", "issues"}``; anything else (unknown mapper,
non-JSON output) passes through untouched.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from issuebridge.errors import ParseError
from issuebridge.issues.models import Issue
from issuebridge.oss.mapper import convert_oss_json_to_issues
from issuebridge.sarif.mapper import convert_sarif_json_to_issues

logger = logging.getLogger(__name__)

CODE_OUTPUT_MAPPER = "CodeOutputMapper"
SCA_OUTPUT_MAPPER = "ScaOutputMapper"


@dataclass
class EnhancedScanResult:
    original_output: str
    success: bool
    issues: List[Issue] = field(default_factory=list)

    @property
    def issue_count(self) -> int:
        return len(self.issues)

    def to_dict(self) -> Dict[str, object]:
        # original_output stays off the wire
        return {
            "success": self.success,
            "issueCount": self.issue_count,
            "issues": [issue.to_dict() for issue in self.issues],
        }


def extract_sca_issues(
    log: logging.Logger, result: EnhancedScanResult, work_dir: str, include_ignores: bool
) -> None:
    try:
        converted = convert_oss_json_to_issues(work_dir, result.original_output, include_ignores)
    except ParseError as exc:
        log.error("Failed to unmarshal SCA JSON output: %s", exc)
        return
    result.issues = list(converted.issues)


def extract_sast_issues(
    log: logging.Logger, result: EnhancedScanResult, work_dir: str, include_ignores: bool
) -> None:
    try:
        converted = convert_sarif_json_to_issues(log, result.original_output, work_dir, include_ignores)
    except ParseError as exc:
        log.debug("SARIF output could not be parsed: %s", exc)
        return
    result.issues = list(converted.issues)


OutputMapper = Callable[[logging.Logger, EnhancedScanResult, str, bool], None]

OUTPUT_MAPPERS: Dict[str, OutputMapper] = {
    CODE_OUTPUT_MAPPER: extract_sast_issues,
    SCA_OUTPUT_MAPPER: extract_sca_issues,
}


def is_json(text: str) -> bool:
    try:
        json.loads(text)
    except ValueError:
        return False
    return True


def map_scan_response(
    mapper_name: str,
    output: str,
    success: bool,
    work_dir: str,
    include_ignores: bool,
    log: Optional[logging.Logger] = None,
) -> str:
    """Return *output* enhanced with its issues, or unchanged when not mappable."""
    mapper = OUTPUT_MAPPERS.get(mapper_name)
    if mapper is None or not is_json(output):
        return output

    result = EnhancedScanResult(original_output=output, success=success)
    mapper(log or logger, result, work_dir, include_ignores)
    return json.dumps(result.to_dict())
