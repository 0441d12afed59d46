"""Frozen, identity-less reference types produced by the extractors.

A reference occurrence is one syntactic match in source text. It is
immutable once extracted and discarded after verification; only the
outcome it produces survives into the report.
"""

from dataclasses import dataclass
from enum import StrEnum

from attestor.constants import CITATION_PREFIX


class ReferenceKind(StrEnum):
    CITATION = "citation"
    URL = "url"
    CODE_PERMALINK = "code-permalink"
    TODO_MARKER = "todo-marker"
    CLAIM_SENTENCE = "claim-sentence"


@dataclass(frozen=True)
class SourceLocation:
    """Where a reference occurs. ``line == 0`` means it could not be relocated."""

    file: str
    line: int
    text: str


@dataclass(frozen=True)
class CitationRef:
    key: str
    kind: ReferenceKind = ReferenceKind.CITATION

    @property
    def marker(self) -> str:
        return f"{CITATION_PREFIX}{self.key}"


@dataclass(frozen=True)
class UrlRef:
    url: str
    kind: ReferenceKind = ReferenceKind.URL


@dataclass(frozen=True)
class PermalinkRef:
    """A blob URL pinned to a commit, file path and line range."""

    url: str
    owner: str
    repo: str
    commit_sha: str
    file_path: str
    start_line: int
    end_line: int
    kind: ReferenceKind = ReferenceKind.CODE_PERMALINK

    @property
    def line_range(self) -> str:
        return f"L{self.start_line}-L{self.end_line}"


@dataclass(frozen=True)
class TodoRef:
    marker: str
    kind: ReferenceKind = ReferenceKind.TODO_MARKER


@dataclass(frozen=True)
class ClaimSentence:
    text: str
    has_citation: bool = False
    kind: ReferenceKind = ReferenceKind.CLAIM_SENTENCE
