"""Plain-text report for terminals."""

from __future__ import annotations

from attestor.constants import CheckStatus
from attestor.schemas import VerificationOutcome, VerificationReport

_MARKS = {
    CheckStatus.PASS: "[ok]",
    CheckStatus.FAIL: "[FAIL]",
    CheckStatus.WARN: "[warn]",
}


def _header(title: str) -> list[str]:
    return ["", title, "=" * len(title)]


def _entries(outcomes: list[VerificationOutcome]) -> list[str]:
    lines: list[str] = []
    for outcome in outcomes:
        target = outcome.target
        lines.append(
            f"{_MARKS[outcome.status]} {target.file}:{target.line}"
        )
        lines.append(f"   {outcome.message}")
    return lines


def render_human(
    report: VerificationReport, *, summary_only: bool = False
) -> str:
    """Render *report* as text.

    Passing outcomes are counted but never listed.
    """
    summary = report.summary
    lines = _header("Verification Report")
    lines += [
        f"Files: {len(report.content_files)}",
        "",
        "Summary:",
        f"  Total checks: {summary.total_checks}",
        f"  Passed: {_MARKS[CheckStatus.PASS]} {summary.passed}",
        f"  Failed: {_MARKS[CheckStatus.FAIL]} {summary.failed}",
        f"  Warnings: {_MARKS[CheckStatus.WARN]} {summary.warnings}",
    ]

    if not summary_only:
        failures = report.filter_by_status(CheckStatus.FAIL)
        if failures:
            lines += _header("Failures")
            lines += _entries(failures)
        warnings = report.filter_by_status(CheckStatus.WARN)
        if warnings:
            lines += _header("Warnings")
            lines += _entries(warnings)

    return "\n".join(lines).lstrip("\n") + "\n"
