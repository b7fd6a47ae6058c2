"""SARIF ingestion: parser, suppression resolver, dataflow, mapper."""

from issuebridge.sarif.dataflow import extract_dataflow, region_to_flow_range
from issuebridge.sarif.mapper import convert_sarif_json_to_issues, region_to_issue_range
from issuebridge.sarif.parser import parse_sarif
from issuebridge.sarif.suppression import highest_suppression, resolve_suppressions

__all__ = [
    "convert_sarif_json_to_issues",
    "extract_dataflow",
    "highest_suppression",
    "parse_sarif",
    "region_to_flow_range",
    "region_to_issue_range",
    "resolve_suppressions",
]
