"""Export module: report rendering by output format."""

from collections.abc import Callable

from attestor.constants import OutputFormat
from attestor.export.human import render_human
from attestor.export.json_export import export_json, export_jsonl
from attestor.schemas import VerificationReport

__all__ = [
    "export_json",
    "export_jsonl",
    "export_report",
    "render_human",
]

_EXPORTERS: dict[str, Callable[[VerificationReport], str]] = {
    OutputFormat.JSON: export_json,
    OutputFormat.JSONL: export_jsonl,
    OutputFormat.HUMAN: render_human,
}


def export_report(
    report: VerificationReport,
    fmt: str = OutputFormat.JSON,
    *,
    summary_only: bool = False,
) -> str:
    """Dispatch rendering by format string."""
    if fmt == OutputFormat.HUMAN:
        return render_human(report, summary_only=summary_only)
    exporter = _EXPORTERS.get(fmt)
    if exporter is None:
        valid = ", ".join(_EXPORTERS)
        msg = f"Unsupported format: {fmt}. Use: {valid}"
        raise ValueError(msg)
    return exporter(report)
