"""SCA ingestion: parser, lockfile remapping, remediation, mapper."""

from issuebridge.oss.lockfiles import LOCKFILE_TO_MANIFEST, manifest_for, target_file_path
from issuebridge.oss.mapper import convert_oss_json_to_issues, scan_results_to_issues
from issuebridge.oss.models import ScanResult, Vulnerability
from issuebridge.oss.parser import parse_scan_results
from issuebridge.oss.remediation import remediation

__all__ = [
    "LOCKFILE_TO_MANIFEST",
    "ScanResult",
    "Vulnerability",
    "convert_oss_json_to_issues",
    "manifest_for",
    "parse_scan_results",
    "remediation",
    "scan_results_to_issues",
    "target_file_path",
]
