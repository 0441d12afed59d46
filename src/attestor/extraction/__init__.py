"""Reference extraction: pure pattern matching over raw text, no I/O."""

from attestor.extraction.extractors import (
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

__all__ = [
    "extract_citations",
    "extract_permalinks",
    "extract_todo_markers",
    "extract_urls",
    "find_line_number",
    "has_citation_marker",
    "is_claim_candidate_line",
    "is_permalink_url",
    "line_text",
    "split_sentences",
]
