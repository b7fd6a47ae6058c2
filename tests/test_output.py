"""Tests for the JSON reporter, terminal reporter, and scan-response mapping."""

import json
import logging

from rich.console import Console

from conftest import make_result, make_scan_result, make_sarif, make_vuln

from issuebridge.errors import ConversionError
from issuebridge.issues.models import Issue
from issuebridge.issues.severity import Severity
from issuebridge.output import json_report, terminal
from issuebridge.output.scan_response import (
    CODE_OUTPUT_MAPPER,
    SCA_OUTPUT_MAPPER,
    map_scan_response,
)


def _issues():
    return [
        Issue(id="A", title="a", severity=Severity.LOW, message="low one", file_path="/p/a.js", line=1),
        Issue(id="B", title="b", severity=Severity.CRITICAL, message="[critical] one", is_ignored=True),
    ]


class TestJsonReport:
    def test_valid_json(self):
        data = json.loads(json_report.render(_issues()))
        assert data["success"] is True
        assert data["issueCount"] == 2
        assert data["issues"][0]["id"] == "A"
        assert "errors" not in data

    def test_errors_listed(self):
        err = ConversionError([ValueError("one"), ValueError("two")])
        data = json.loads(json_report.render([], success=False, error=err))
        assert data["success"] is False
        assert data["errors"] == ["one", "two"]


class TestTerminalReport:
    def _render(self, **kw) -> str:
        console = Console(record=True, width=160)
        terminal.render(_issues(), console=console, **kw)
        return console.export_text()

    def test_table_and_summary(self):
        text = self._render()
        assert "Converted Issues" in text
        assert "/p/a.js:1" in text
        assert "[critical] one" in text
        assert "Issues:" in text

    def test_min_severity_filter(self):
        text = self._render(min_severity=Severity.HIGH)
        assert "low one" not in text
        assert "[critical] one" in text

    def test_empty(self):
        console = Console(record=True, width=120)
        terminal.render([], console=console, show_summary=False)
        assert "No issues" in console.export_text()

    def test_error_lines(self):
        err = ConversionError([ValueError("bad [uri]")])
        text = self._render(error=err)
        assert "bad [uri]" in text


class TestScanResponse:
    def test_sca_mapped(self):
        output = json.dumps(make_scan_result([make_vuln()]))
        data = json.loads(map_scan_response(SCA_OUTPUT_MAPPER, output, True, "/w", False))
        assert data["success"] is True
        assert data["issueCount"] == 1
        assert data["issues"][0]["filePath"] == "/w/package.json"

    def test_sast_mapped(self):
        output = json.dumps(make_sarif([make_result()]))
        data = json.loads(map_scan_response(CODE_OUTPUT_MAPPER, output, False, "/w", False))
        assert data["success"] is False
        assert data["issueCount"] == 1
        assert data["issues"][0]["filePath"] == "/w/src/app.js"

    def test_unknown_mapper_passthrough(self):
        output = json.dumps({"anything": 1})
        assert map_scan_response("Nope", output, True, "/w", False) == output

    def test_non_json_passthrough(self):
        assert map_scan_response(SCA_OUTPUT_MAPPER, "Tested 0 deps", True, "/w", False) == "Tested 0 deps"

    def test_sca_wrong_shape_yields_no_issues(self, caplog):
        with caplog.at_level(logging.ERROR):
            out = map_scan_response(SCA_OUTPUT_MAPPER, "42", True, "/w", False)
        data = json.loads(out)
        assert data["issueCount"] == 0
        assert data["issues"] == []
        assert "Failed to unmarshal SCA JSON output" in caplog.text
