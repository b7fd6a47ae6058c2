"""SCA scan results → Issue mapping."""

from __future__ import annotations

from typing import Iterable, List, Set, Union

from issuebridge.issues.models import ConversionResult, Issue
from issuebridge.issues.severity import classify
from issuebridge.oss.lockfiles import target_file_path
from issuebridge.oss.models import ScanResult, Vulnerability
from issuebridge.oss.parser import parse_scan_results
from issuebridge.oss.remediation import remediation

MAX_MESSAGE_LENGTH = 200
_TRUNCATION_SUFFIX = "... (Snyk)"


def build_message(vuln: Vulnerability, advice: str) -> str:
    message = f"{vuln.title} affecting package {vuln.package_name}. {advice}"
    if len(message) > MAX_MESSAGE_LENGTH:
        message = message[:MAX_MESSAGE_LENGTH] + _TRUNCATION_SUFFIX
    return message


def to_issue(vuln: Vulnerability, target_path: str) -> Issue:
    advice = remediation(vuln)
    return Issue(
        id=vuln.id,
        title=vuln.title,
        severity=classify(vuln.severity),
        message=build_message(vuln, advice),
        cwes=tuple(vuln.cwe),
        cves=tuple(vuln.cve),
        package_name=vuln.package_name,
        version=vuln.version,
        ecosystem=vuln.package_manager,
        fixed_in=tuple(vuln.fixed_in),
        remediation=advice,
        file_path=target_path,
        line=vuln.line_number if vuln.line_number > 0 else None,
        is_ignored=vuln.is_ignored,
    )


def scan_results_to_issues(
    work_dir: str,
    scan_results: Iterable[ScanResult],
    include_ignores: bool,
) -> List[Issue]:
    """Convert envelopes to Issues.

    Dedup key: (target path, finding id, package name), shared across all
    envelopes of the call. First occurrence wins.
    """
    issues: List[Issue] = []
    seen: Set[str] = set()

    for scan_result in scan_results:
        target_path = target_file_path(work_dir, scan_result.display_target_file)
        for vuln in scan_result.vulnerabilities:
            if vuln.is_ignored and not include_ignores:
                continue
            key = f"{target_path}|{vuln.id}|{vuln.package_name}"
            if key in seen:
                continue
            seen.add(key)
            issues.append(to_issue(vuln, target_path))

    return issues


def convert_oss_json_to_issues(
    work_dir: str,
    data: Union[bytes, str],
    include_ignores: bool,
) -> ConversionResult:
    """Convert SCA JSON (one envelope or an array) to Issues.

    Raises ParseError when *data* is not valid JSON of either shape.
    """
    scan_results = parse_scan_results(data)
    return ConversionResult(issues=tuple(scan_results_to_issues(work_dir, scan_results, include_ignores)))
