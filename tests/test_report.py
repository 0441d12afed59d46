"""Tests for report accumulation and the exit-code law."""

from __future__ import annotations

from attestor.constants import CheckKind, CheckStatus
from attestor.references import SourceLocation
from attestor.report import ReportBuilder, exit_code_for, summarize
from attestor.schemas import ReportSummary, VerificationOutcome
from attestor.verifiers import make_outcome

LOC = SourceLocation(file="a.qmd", line=1, text="")


def _outcome(status: CheckStatus) -> VerificationOutcome:
    return make_outcome(CheckKind.TODO_MARKER, LOC, status, status.value)


class TestSummary:
    def test_partition_by_status(self) -> None:
        summary = summarize([
            _outcome(CheckStatus.PASS),
            _outcome(CheckStatus.FAIL),
            _outcome(CheckStatus.WARN),
            _outcome(CheckStatus.WARN),
        ])
        assert summary == ReportSummary(
            total_checks=4, passed=1, failed=1, warnings=2
        )

    def test_exit_code_law(self) -> None:
        assert exit_code_for(ReportSummary(total_checks=0)) == 0
        assert exit_code_for(ReportSummary(total_checks=3, warnings=3)) == 0
        assert exit_code_for(ReportSummary(total_checks=1, failed=1)) == 1


class TestReportBuilder:
    def test_results_kept_in_order(self) -> None:
        outcomes = [_outcome(CheckStatus.PASS), _outcome(CheckStatus.FAIL)]
        builder = ReportBuilder()
        builder.add_file("a.qmd")
        builder.add_results(outcomes)
        report = builder.build()
        assert [r.check_id for r in report.results] == [
            o.check_id for o in outcomes
        ]
        assert report.content_files == ["a.qmd"]
        assert report.exit_code == 1

    def test_re_adding_same_outcome_is_noop(self) -> None:
        outcome = _outcome(CheckStatus.FAIL)
        builder = ReportBuilder()
        builder.add_result(outcome)
        builder.add_result(outcome)
        assert builder.build().summary.total_checks == 1

    def test_build_twice_same_content(self) -> None:
        builder = ReportBuilder()
        builder.add_results([_outcome(CheckStatus.WARN)])
        first, second = builder.build(), builder.build()
        assert first.results == second.results
        assert first.summary == second.summary
        assert first.report_id != second.report_id

    def test_empty_report_passes(self) -> None:
        report = ReportBuilder().build()
        assert report.summary.total_checks == 0
        assert report.exit_code == 0
        assert report.generated_at.tzinfo is not None

    def test_summary_independent_of_add_order(self) -> None:
        outcomes = [
            _outcome(CheckStatus.FAIL),
            _outcome(CheckStatus.PASS),
            _outcome(CheckStatus.WARN),
            _outcome(CheckStatus.PASS),
            _outcome(CheckStatus.WARN),
        ]
        forward, backward = ReportBuilder(), ReportBuilder()
        for outcome in outcomes:
            forward.add_result(outcome)
        backward.add_results(reversed(outcomes))
        backward.add_result(outcomes[2])

        first, second = forward.build(), backward.build()
        assert first.summary == second.summary == ReportSummary(
            total_checks=5, passed=2, failed=1, warnings=2
        )
        assert first.exit_code == second.exit_code == 1
