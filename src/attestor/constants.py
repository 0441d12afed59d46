"""Shared constants: single source of truth for cross-module values.

All magic strings and numbers that appear in 2+ files belong here.
StrEnum members are str-compatible, so JSON output and comparisons
against raw strings work unchanged.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class CheckKind(StrEnum):
    """Kind of check that produced a verification outcome."""

    CITATION = "citation"
    URL = "url"
    CODE_LINK = "code-link"
    CLAIM = "claim"
    TODO_MARKER = "todo-marker"
    FILE = "file"  # whole-file read failure


class CheckStatus(StrEnum):
    """Tri-state outcome of a single check."""

    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"


class ConfidenceLevel(StrEnum):
    """Qualitative confidence of a claim classification."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SuggestedAction(StrEnum):
    """Follow-up suggested to the author for a classified sentence."""

    ADD_CITATION = "add citation"
    NONE = "no action needed"
    REVIEW = "review manually"


class LLMProvider(StrEnum):
    """Text-completion backends the claim classifier can escalate to."""

    AUTO = "auto"
    LITELLM = "litellm"
    CLAUDE_CLI = "claude-cli"
    OLLAMA = "ollama"
    NONE = "none"


class SourceHostBackend(StrEnum):
    """How file metadata at a commit is looked up."""

    AUTO = "auto"
    GH_CLI = "gh"
    API = "api"


class OutputFormat(StrEnum):
    JSON = "json"
    JSONL = "jsonl"
    HUMAN = "human"


# ── Extraction ───────────────────────────────────────────

CITATION_PREFIX = "@paper:"
MIN_SENTENCE_CHARS = 20
PERMALINK_HOST = "github.com"

# ── Code Links ───────────────────────────────────────────

# Assumed average line width when estimating a file's line count
# from its byte size. Minified text sits far above, sparse text below.
CHARS_PER_LINE_ESTIMATE = 30
SHORT_SHA_LENGTH = 8

# ── URL Probing (seconds) ────────────────────────────────

URL_REQUEST_TIMEOUT = 10
URL_TOTAL_TIMEOUT = 15
MAX_REDIRECTS = 10
USER_AGENT = "attestor-link-check/0.1"

# ── Oracles ──────────────────────────────────────────────

ORACLE_TIMEOUT = 30
NOT_FOUND_MARKERS = ("not found", "no such")

# ── Circuit Breaker Configuration ────────────────────────

CB_LLM_FAILURE_THRESHOLD = 5
CB_LLM_RECOVERY_TIMEOUT = 30

# ── Retry Strategy ───────────────────────────────────────

RETRY_MAX_ATTEMPTS = 3
RETRY_INITIAL_WAIT = 2
RETRY_MAX_WAIT = 30

# ── LLM Output ───────────────────────────────────────────

LLM_MAX_OUTPUT_TOKENS = 512

# ── Misc ─────────────────────────────────────────────────

ERROR_TRUNCATION_CHARS = 200
