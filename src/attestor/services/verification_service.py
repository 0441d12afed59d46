"""File orchestration: run every extractor and verifier over input files."""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path

import httpx

from attestor.config import Settings
from attestor.constants import CheckKind, CheckStatus
from attestor.extraction import (
    extract_citations,
    extract_permalinks,
    extract_todo_markers,
    extract_urls,
    find_line_number,
    has_citation_marker,
    is_claim_candidate_line,
    is_permalink_url,
    line_text,
    split_sentences,
)
from attestor.extraction.patterns import CITATION_KEY_CHAR, URL_CHAR
from attestor.oracles.factory import (
    build_completer,
    build_knowledge_graph,
    build_source_host,
)
from attestor.oracles.protocols import (
    KnowledgeGraph,
    SourceHost,
    TextCompleter,
)
from attestor.references import ClaimSentence, SourceLocation
from attestor.report import ReportBuilder
from attestor.schemas import VerificationOutcome, VerificationReport
from attestor.verifiers import (
    build_http_client,
    make_outcome,
    verify_citation,
    verify_claim,
    verify_permalink,
    verify_todo_marker,
    verify_url,
)

logger = logging.getLogger(__name__)


@dataclass
class VerificationContext:
    """Oracles and settings shared by one verification run.

    Oracles are stateless from the run's point of view; the only
    mutable state of a run is the ReportBuilder in ``verify_files``.
    """

    settings: Settings
    knowledge_graph: KnowledgeGraph
    source_host: SourceHost | None
    completer: TextCompleter | None
    http_client: httpx.AsyncClient


@asynccontextmanager
async def open_context(
    settings: Settings | None = None,
) -> AsyncIterator[VerificationContext]:
    """Build oracles from *settings* and close the HTTP client on exit."""
    if settings is None:
        settings = Settings()
    async with build_http_client(
        request_timeout=settings.url_request_timeout,
        max_redirects=settings.max_redirects,
    ) as client:
        yield VerificationContext(
            settings=settings,
            knowledge_graph=build_knowledge_graph(settings),
            source_host=build_source_host(settings, client),
            completer=build_completer(settings),
            http_client=client,
        )


def _locate(
    lines: Sequence[str],
    file: str,
    needle: str,
    continuation: str | None = None,
) -> SourceLocation:
    line = find_line_number(lines, needle, continuation)
    return SourceLocation(file=file, line=line, text=line_text(lines, line))


async def verify_text(
    text: str, file: str, ctx: VerificationContext
) -> list[VerificationOutcome]:
    """Run all checks over the contents of one file.

    Lines are processed in file order so line numbers and citation
    de-duplication are stable across runs.
    """
    lines = text.splitlines()
    outcomes: list[VerificationOutcome] = []

    for number, line in enumerate(lines, 1):
        for todo in extract_todo_markers(line):
            outcomes.append(
                verify_todo_marker(todo, SourceLocation(file, number, line))
            )

    for citation in extract_citations(text):
        outcomes.append(
            await verify_citation(
                citation,
                _locate(lines, file, citation.marker, CITATION_KEY_CHAR),
                ctx.knowledge_graph,
            )
        )

    for url in extract_urls(text):
        if is_permalink_url(url.url):
            continue
        outcomes.append(
            await verify_url(
                url,
                _locate(lines, file, url.url, URL_CHAR),
                ctx.http_client,
                total_timeout=ctx.settings.url_total_timeout,
            )
        )

    for link in extract_permalinks(text):
        outcomes.append(
            await verify_permalink(
                link,
                _locate(lines, file, link.url),
                ctx.source_host,
            )
        )

    outcomes.extend(await _verify_claims(lines, file, ctx))
    return outcomes


async def _verify_claims(
    lines: Sequence[str], file: str, ctx: VerificationContext
) -> list[VerificationOutcome]:
    outcomes: list[VerificationOutcome] = []
    for number, line in enumerate(lines, 1):
        if not is_claim_candidate_line(line):
            continue
        previous_cited = number > 1 and has_citation_marker(lines[number - 2])
        for sentence in split_sentences(line):
            claim = ClaimSentence(
                text=sentence,
                has_citation=previous_cited or has_citation_marker(sentence),
            )
            outcome = await verify_claim(
                claim,
                SourceLocation(file, number, sentence),
                ctx.completer,
                use_llm=ctx.settings.use_llm,
            )
            # Passing sentences are noise unless explicitly requested.
            if (
                outcome.status == CheckStatus.FAIL
                or ctx.settings.report_passing_claims
            ):
                outcomes.append(outcome)
    return outcomes


async def verify_file(
    path: str | Path, ctx: VerificationContext
) -> list[VerificationOutcome]:
    """Read *path* as UTF-8 and verify it.

    Raises OSError or UnicodeDecodeError if the file cannot be read.
    """
    text = Path(path).read_text(encoding="utf-8")
    return await verify_text(text, str(path), ctx)


async def verify_files(
    paths: Sequence[str | Path], ctx: VerificationContext
) -> VerificationReport:
    """Verify each file in turn and build one report.

    An unreadable file becomes a single failing outcome; the remaining
    files are still verified.
    """
    builder = ReportBuilder()
    for path in paths:
        file = str(path)
        builder.add_file(file)
        start = time.monotonic()
        try:
            outcomes = await verify_file(file, ctx)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("event=file_unreadable file=%s error=%s", file, exc)
            builder.add_result(
                make_outcome(
                    CheckKind.FILE,
                    SourceLocation(file=file, line=0, text=""),
                    CheckStatus.FAIL,
                    f"Cannot read file: {exc}",
                )
            )
            continue
        builder.add_results(outcomes)
        logger.info(
            "event=file_verified file=%s checks=%d duration_ms=%.0f",
            file,
            len(outcomes),
            (time.monotonic() - start) * 1000,
        )
    return builder.build()


async def run_verification(
    paths: Sequence[str | Path], settings: Settings | None = None
) -> VerificationReport:
    async with open_context(settings) as ctx:
        return await verify_files(paths, ctx)
