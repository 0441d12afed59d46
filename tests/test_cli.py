"""Tests for CLI argument parsing and the verify command."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from attestor import __version__
from attestor.cli import _build_parser, main
from attestor.config import Settings
from attestor.constants import CheckKind, CheckStatus, OutputFormat
from attestor.references import SourceLocation
from attestor.report import ReportBuilder
from attestor.schemas import VerificationReport
from attestor.verifiers import make_outcome

_RUN = "attestor.services.verification_service.run_verification"


def _report(status: CheckStatus | None = None) -> VerificationReport:
    builder = ReportBuilder()
    builder.add_file("ch1.qmd")
    if status is not None:
        builder.add_result(
            make_outcome(
                CheckKind.TODO_MARKER,
                SourceLocation("ch1.qmd", 2, "TODO"),
                status,
                "TODO marker found - remove before publishing",
            )
        )
    return builder.build()


class TestArgParser:
    def test_version_flag(self) -> None:
        args = _build_parser().parse_args(["--version"])
        assert args.version is True

    def test_verify_defaults(self) -> None:
        args = _build_parser().parse_args(["verify", "a.qmd", "b.qmd"])
        assert args.command == "verify"
        assert args.files == ["a.qmd", "b.qmd"]
        assert args.format == OutputFormat.JSON
        assert args.summary is False
        assert args.no_llm is False
        assert args.verbose is False

    def test_verify_with_options(self) -> None:
        args = _build_parser().parse_args(
            ["verify", "a.qmd", "--human", "--summary", "--no-llm", "-v"]
        )
        assert args.format == OutputFormat.HUMAN
        assert args.summary is True
        assert args.no_llm is True
        assert args.verbose is True

    def test_jsonl_flag(self) -> None:
        args = _build_parser().parse_args(["verify", "a.qmd", "--jsonl"])
        assert args.format == OutputFormat.JSONL

    def test_output_formats_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["verify", "a.qmd", "--json", "--human"])

    def test_files_required(self) -> None:
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["verify"])


class TestMain:
    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--version"])
        assert capsys.readouterr().out.strip() == f"attestor {__version__}"

    def test_no_command_prints_help(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main([])
        assert "usage: attestor" in capsys.readouterr().out

    def test_failures_exit_one_with_json(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch(
            _RUN, new_callable=AsyncMock, return_value=_report(CheckStatus.FAIL)
        ):
            with pytest.raises(SystemExit) as exc:
                main(["verify", "ch1.qmd"])
        assert exc.value.code == 1
        data = json.loads(capsys.readouterr().out)
        assert data["summary"]["failed"] == 1

    def test_warnings_exit_zero(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch(
            _RUN, new_callable=AsyncMock, return_value=_report(CheckStatus.WARN)
        ):
            with pytest.raises(SystemExit) as exc:
                main(["verify", "ch1.qmd", "--human"])
        assert exc.value.code == 0
        assert "Warnings" in capsys.readouterr().out

    def test_no_llm_flag_reaches_settings(self) -> None:
        with patch(
            _RUN, new_callable=AsyncMock, return_value=_report()
        ) as run:
            with pytest.raises(SystemExit):
                main(["verify", "ch1.qmd", "--no-llm"])
        assert run.await_args is not None
        files, settings = run.await_args.args
        assert files == ["ch1.qmd"]
        assert isinstance(settings, Settings)
        assert settings.use_llm is False

    def test_end_to_end_todo(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        doc = tmp_path / "draft.qmd"
        doc.write_text("FIXME: tighten\n", encoding="utf-8")
        with patch.dict(
            "os.environ",
            {"ATTESTOR_LLM_PROVIDER": "none", "ATTESTOR_SOURCE_HOST_BACKEND": "api"},
        ):
            with pytest.raises(SystemExit) as exc:
                main(["verify", str(doc), "--jsonl", "--no-llm"])
        assert exc.value.code == 1
        lines = capsys.readouterr().out.splitlines()
        first = json.loads(lines[0])
        assert first["check_type"] == "todo-marker"
        assert first["message"].startswith("FIXME marker found")
