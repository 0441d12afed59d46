"""Verifiers: one outcome per reference, never an exception."""

from attestor.verifiers.base import make_outcome
from attestor.verifiers.citations import verify_citation
from attestor.verifiers.claims import verify_claim
from attestor.verifiers.permalinks import estimate_line_count, verify_permalink
from attestor.verifiers.todos import verify_todo_marker
from attestor.verifiers.urls import build_http_client, verify_url

__all__ = [
    "build_http_client",
    "estimate_line_count",
    "make_outcome",
    "verify_citation",
    "verify_claim",
    "verify_permalink",
    "verify_todo_marker",
    "verify_url",
]
