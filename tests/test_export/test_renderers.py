"""Tests for JSON, JSONL and human-readable report rendering."""

from __future__ import annotations

import json

import pytest

from attestor.constants import CheckKind, CheckStatus
from attestor.export import export_json, export_jsonl, export_report, render_human
from attestor.references import SourceLocation
from attestor.report import ReportBuilder
from attestor.schemas import (
    UrlDetails,
    VerificationDetails,
    VerificationReport,
)
from attestor.verifiers import make_outcome


@pytest.fixture
def report() -> VerificationReport:
    builder = ReportBuilder()
    builder.add_file("ch1.qmd")
    builder.add_results([
        make_outcome(
            CheckKind.URL,
            SourceLocation("ch1.qmd", 3, "x"),
            CheckStatus.FAIL,
            "URL 'https://a.org' returned client error (HTTP 404)",
            VerificationDetails(
                url=UrlDetails(url="https://a.org", http_status=404)
            ),
        ),
        make_outcome(
            CheckKind.CODE_LINK,
            SourceLocation("ch1.qmd", 8, "y"),
            CheckStatus.WARN,
            "line range could not be verified",
        ),
        make_outcome(
            CheckKind.CITATION,
            SourceLocation("ch1.qmd", 1, "z"),
            CheckStatus.PASS,
            "Paper ID 'k' resolved successfully",
        ),
    ])
    return builder.build()


class TestJson:
    def test_pretty_json_round_trips(self, report: VerificationReport) -> None:
        text = export_json(report)
        assert text.startswith("{\n  ")
        data = json.loads(text)
        assert data["summary"] == {
            "total_checks": 3,
            "passed": 1,
            "failed": 1,
            "warnings": 1,
        }
        assert data["exit_code"] == 1
        assert data["results"][0]["details"]["url"]["http_status"] == 404
        assert VerificationReport.model_validate_json(text) == report

    def test_jsonl_one_outcome_per_line(self, report: VerificationReport) -> None:
        lines = export_jsonl(report).splitlines()
        assert len(lines) == 4
        outcomes = [json.loads(line) for line in lines[:-1]]
        assert [o["status"] for o in outcomes] == ["fail", "warn", "pass"]
        trailer = json.loads(lines[-1])
        assert trailer["summary"]["total_checks"] == 3
        assert trailer["exit_code"] == 1
        assert "summary" not in outcomes[0]


class TestHuman:
    def test_sections(self, report: VerificationReport) -> None:
        text = render_human(report)
        assert text.startswith("Verification Report\n")
        assert "Files: 1" in text
        assert "Total checks: 3" in text
        assert "Failures" in text
        assert "[FAIL] ch1.qmd:3\n   URL 'https://a.org'" in text
        assert "Warnings" in text
        assert "[warn] ch1.qmd:8" in text
        # Passing outcomes are counted, never listed.
        assert "resolved successfully" not in text

    def test_summary_only(self, report: VerificationReport) -> None:
        text = render_human(report, summary_only=True)
        assert "Failed: [FAIL] 1" in text
        assert "Failures" not in text

    def test_clean_report_has_no_sections(self) -> None:
        text = render_human(ReportBuilder().build())
        assert "Failures" not in text
        assert "Warnings:" in text
        assert "\nWarnings\n" not in text


class TestDispatch:
    def test_formats(self, report: VerificationReport) -> None:
        assert export_report(report, "json") == export_json(report)
        assert export_report(report, "jsonl") == export_jsonl(report)
        assert export_report(report, "human", summary_only=True) == render_human(
            report, summary_only=True
        )

    def test_unknown_format(self, report: VerificationReport) -> None:
        with pytest.raises(ValueError, match="Unsupported format: xml"):
            export_report(report, "xml")
