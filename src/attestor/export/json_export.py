"""JSON export: pretty report and line-delimited stream."""

from __future__ import annotations

import json
from typing import Any

from attestor.schemas import VerificationReport


def export_json(report: VerificationReport) -> str:
    """Export the full report as indented JSON."""
    return report.model_dump_json(indent=2)


def export_jsonl(report: VerificationReport) -> str:
    """One outcome per line, then a single summary line.

    The summary line is the only one with a ``summary`` key, so
    consumers can tell it apart without counting lines.
    """
    lines = [outcome.model_dump_json() for outcome in report.results]
    trailer: dict[str, Any] = {
        "report_id": report.report_id,
        "generated_at": report.generated_at.isoformat(),
        "content_files": report.content_files,
        "summary": report.summary.model_dump(),
        "exit_code": report.exit_code,
    }
    lines.append(json.dumps(trailer, ensure_ascii=False))
    return "\n".join(lines) + "\n"
