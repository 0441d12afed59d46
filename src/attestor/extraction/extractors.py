"""Pure extractors over raw text.

Every extractor is a generator function: each call starts a fresh,
finite pass over the text, nothing is cached between calls, and an
input without matches simply yields nothing.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence

from attestor.constants import MIN_SENTENCE_CHARS
from attestor.extraction.patterns import (
    CITATION_RE,
    PERMALINK_RE,
    SENTENCE_END_RE,
    SKIP_LINE_PREFIXES,
    TODO_RE,
    URL_RE,
)
from attestor.references import (
    CitationRef,
    PermalinkRef,
    TodoRef,
    UrlRef,
)


def extract_citations(text: str) -> Iterator[CitationRef]:
    """Yield each cited key once, in first-seen order."""
    seen: set[str] = set()
    for match in CITATION_RE.finditer(text):
        key = match.group(1)
        if key in seen:
            continue
        seen.add(key)
        yield CitationRef(key=key)


def extract_urls(text: str) -> Iterator[UrlRef]:
    for match in URL_RE.finditer(text):
        yield UrlRef(url=match.group(0))


def extract_permalinks(text: str) -> Iterator[PermalinkRef]:
    """Yield parsed source permalinks.

    A single ``#L<n>`` anchor yields ``end_line == start_line``; a
    reversed ``#L<a>-L<b>`` range is normalized so start <= end.
    """
    for match in PERMALINK_RE.finditer(text):
        start = int(match.group("start"))
        end_raw = match.group("end")
        end = int(end_raw) if end_raw else start
        yield PermalinkRef(
            url=match.group(0),
            owner=match.group("owner"),
            repo=match.group("repo"),
            commit_sha=match.group("sha"),
            file_path=match.group("path"),
            start_line=min(start, end),
            end_line=max(start, end),
        )


def extract_todo_markers(text: str) -> Iterator[TodoRef]:
    for match in TODO_RE.finditer(text):
        yield TodoRef(marker=match.group(0).strip())


def split_sentences(line: str) -> Iterator[str]:
    """Split a line after ``.``, ``?`` or ``!``.

    Fragments shorter than MIN_SENTENCE_CHARS are noise and are dropped.
    """
    for piece in SENTENCE_END_RE.split(line):
        sentence = piece.strip()
        if len(sentence) >= MIN_SENTENCE_CHARS:
            yield sentence


def has_citation_marker(text: str) -> bool:
    return CITATION_RE.search(text) is not None


def is_permalink_url(url: str) -> bool:
    """True if *url* is a full source permalink (checked as a code link)."""
    return PERMALINK_RE.match(url) is not None


def is_claim_candidate_line(line: str) -> bool:
    if not line.strip():
        return False
    return not line.startswith(SKIP_LINE_PREFIXES)


def find_line_number(
    lines: Sequence[str], needle: str, continuation: str | None = None
) -> int:
    """Best-effort 1-based line of the first line containing *needle*.

    With *continuation* (a one-character regex class), an occurrence
    followed by such a character is skipped, so ``@paper:a`` is not
    placed on a line that only holds ``@paper:abc``. Returns 0 when the
    text cannot be relocated.
    """
    if continuation is None:
        for i, line in enumerate(lines, 1):
            if needle in line:
                return i
        return 0

    pattern = re.compile(re.escape(needle) + "(?!" + continuation + ")")
    for i, line in enumerate(lines, 1):
        if pattern.search(line):
            return i
    return 0


def line_text(lines: Sequence[str], line_number: int) -> str:
    if 0 < line_number <= len(lines):
        return lines[line_number - 1]
    return ""
