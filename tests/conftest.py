"""Shared test fixtures: sample SARIF and SCA reports."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import pytest


def make_rule(rule_id: str = "javascript/XSS", *, categories=("Security",), short: str = "Cross-site Scripting",
              cwe=("CWE-79",)) -> Dict[str, Any]:
    return {
        "id": rule_id,
        "name": rule_id.split("/")[-1],
        "shortDescription": {"text": short},
        "defaultConfiguration": {"level": "error"},
        "properties": {"categories": list(categories), "cwe": list(cwe)},
    }


def make_location(uri: str = "src/app.js", start_line: int = 5, start_col: int = 3,
                  end_line: int = 5, end_col: int = 10) -> Dict[str, Any]:
    return {
        "physicalLocation": {
            "artifactLocation": {"uri": uri},
            "region": {
                "startLine": start_line,
                "startColumn": start_col,
                "endLine": end_line,
                "endColumn": end_col,
            },
        }
    }


def make_result(rule_id: str = "javascript/XSS", *, text: str = "Unsanitized input flows into the DOM.",
                level: str = "error", locations: Optional[List[Dict[str, Any]]] = None,
                code_flows: Optional[List[Dict[str, Any]]] = None,
                suppressions: Optional[List[Dict[str, Any]]] = None,
                fingerprint: str = "fp-primary") -> Dict[str, Any]:
    result: Dict[str, Any] = {
        "ruleId": rule_id,
        "level": level,
        "message": {"text": text},
        "locations": locations if locations is not None else [make_location()],
        "fingerprints": {"0": "fp-identity", "1": fingerprint},
    }
    if code_flows is not None:
        result["codeFlows"] = code_flows
    if suppressions is not None:
        result["suppressions"] = suppressions
    return result


def make_code_flow(*steps) -> Dict[str, Any]:
    """*steps* are (uri, start_line, start_col, end_line, end_col) tuples."""
    return {
        "threadFlows": [
            {"locations": [{"location": make_location(*step)} for step in steps]}
        ]
    }


def make_sarif(results, rules=None) -> Dict[str, Any]:
    return {
        "$schema": "https://json.schemastore.org/sarif-2.1.0.json",
        "version": "2.1.0",
        "runs": [
            {
                "tool": {"driver": {"name": "SnykCode", "rules": rules if rules is not None else [make_rule()]}},
                "results": results,
            }
        ],
    }


def make_vuln(vuln_id: str = "SNYK-JS-LODASH-567746", *, package: str = "lodash", version: str = "4.17.15",
              severity: str = "high", title: str = "Prototype Pollution", **extra) -> Dict[str, Any]:
    vuln = {
        "id": vuln_id,
        "title": title,
        "severity": severity,
        "packageName": package,
        "name": package,
        "version": version,
        "packageManager": "npm",
        "identifiers": {"CWE": ["CWE-400"], "CVE": ["CVE-2020-8203"]},
        "fixedIn": ["4.17.19"],
        "from": ["goof@1.0.0", f"{package}@{version}"],
        "upgradePath": [False, f"{package}@4.17.19"],
        "isUpgradable": True,
        "isPatchable": False,
    }
    vuln.update(extra)
    return vuln


def make_scan_result(vulns, target: str = "package-lock.json") -> Dict[str, Any]:
    return {"vulnerabilities": vulns, "displayTargetFile": target, "packageManager": "npm"}


@pytest.fixture
def sarif_bytes() -> bytes:
    """A SARIF report with one security and one quality finding."""
    doc = make_sarif(
        results=[
            make_result(),
            make_result("javascript/NoUnusedVars", text="Unused variable.", level="note",
                        locations=[make_location("src/util.js", 1, 1, 1, 4)]),
        ],
        rules=[
            make_rule(),
            make_rule("javascript/NoUnusedVars", categories=("Defect",), short="Unused variable", cwe=()),
        ],
    )
    return json.dumps(doc).encode()


@pytest.fixture
def oss_bytes() -> bytes:
    return json.dumps(make_scan_result([make_vuln()], target="app/package-lock.json")).encode()
