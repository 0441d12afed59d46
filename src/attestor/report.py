"""Accumulate outcomes and build the final verification report."""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from datetime import UTC, datetime

from attestor.constants import CheckStatus
from attestor.schemas import (
    ReportSummary,
    VerificationOutcome,
    VerificationReport,
)


def summarize(outcomes: Iterable[VerificationOutcome]) -> ReportSummary:
    """Partition *outcomes* by status."""
    total = passed = failed = warnings = 0
    for outcome in outcomes:
        total += 1
        if outcome.status == CheckStatus.PASS:
            passed += 1
        elif outcome.status == CheckStatus.FAIL:
            failed += 1
        elif outcome.status == CheckStatus.WARN:
            warnings += 1
    return ReportSummary(
        total_checks=total,
        passed=passed,
        failed=failed,
        warnings=warnings,
    )


def exit_code_for(summary: ReportSummary) -> int:
    """1 iff anything failed; warnings never change the exit code."""
    return 1 if summary.failed > 0 else 0


class ReportBuilder:
    """Order-preserving accumulator owned by one verification run.

    Counts are derived from the full outcome list in ``build`` rather
    than tallied on append, so they always match the list.
    """

    def __init__(self) -> None:
        self._files: list[str] = []
        self._results: list[VerificationOutcome] = []
        self._seen_ids: set[str] = set()

    def add_file(self, path: str) -> None:
        self._files.append(path)

    def add_result(self, outcome: VerificationOutcome) -> None:
        """Append *outcome*; re-adding the same check_id is a no-op."""
        if outcome.check_id in self._seen_ids:
            return
        self._seen_ids.add(outcome.check_id)
        self._results.append(outcome)

    def add_results(self, outcomes: Iterable[VerificationOutcome]) -> None:
        for outcome in outcomes:
            self.add_result(outcome)

    def build(self) -> VerificationReport:
        summary = summarize(self._results)
        return VerificationReport(
            report_id=str(uuid.uuid4()),
            generated_at=datetime.now(UTC),
            content_files=list(self._files),
            summary=summary,
            results=list(self._results),
            exit_code=exit_code_for(summary),
        )
