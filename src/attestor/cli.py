"""CLI entry point: ``attestor verify``."""

from __future__ import annotations

# Phase 1: Singleton logging, before any transitive litellm imports
from attestor.logging_config import setup_logging

setup_logging()

import argparse  # noqa: E402
import asyncio  # noqa: E402
import sys  # noqa: E402

from attestor import __version__  # noqa: E402
from attestor.config import Settings  # noqa: E402
from attestor.constants import OutputFormat  # noqa: E402
from attestor.logging_config import (  # noqa: E402
    cleanup_third_party_handlers,
    set_level,
)

# Phase 2: Clear litellm's duplicate handlers after all imports
cleanup_third_party_handlers()


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"attestor {__version__}")
        return

    if args.command == "verify":
        _run_verify(args)
    else:
        parser.print_help()


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="attestor",
        description=(
            "Pre-publication checks for prose: citations, links, "
            "code permalinks, uncited claims and leftover markers."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    verify = sub.add_parser(
        "verify",
        help="Verify content files before publishing",
    )
    verify.add_argument(
        "files",
        nargs="+",
        help="Content files to verify",
    )
    fmt = verify.add_mutually_exclusive_group()
    fmt.add_argument(
        "--json",
        dest="format",
        action="store_const",
        const=OutputFormat.JSON,
        help="JSON report (default)",
    )
    fmt.add_argument(
        "--jsonl",
        dest="format",
        action="store_const",
        const=OutputFormat.JSONL,
        help="One JSON outcome per line, then a summary line",
    )
    fmt.add_argument(
        "--human",
        dest="format",
        action="store_const",
        const=OutputFormat.HUMAN,
        help="Human-readable report",
    )
    verify.set_defaults(format=OutputFormat.JSON)
    verify.add_argument(
        "--summary",
        action="store_true",
        help="With --human, show only the summary counts",
    )
    verify.add_argument(
        "--no-llm",
        action="store_true",
        help="Classify claims with heuristics only",
    )
    verify.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    return parser


def _run_verify(args: argparse.Namespace) -> None:
    """Execute the verify command and exit with the report's code."""
    from attestor.export import export_report
    from attestor.services.verification_service import (
        run_verification,
    )

    settings = Settings()
    if args.no_llm:
        settings = settings.model_copy(update={"use_llm": False})
    set_level("DEBUG" if args.verbose else settings.log_level)

    report = asyncio.run(run_verification(args.files, settings))

    output = export_report(
        report, args.format, summary_only=args.summary
    )
    print(output.rstrip("\n"))
    sys.exit(report.exit_code)


if __name__ == "__main__":
    main()
