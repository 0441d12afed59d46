"""Compiled pattern tables shared by the extractors.

Compiled once at import and never mutated, so concurrent extraction
needs no synchronization.
"""

from __future__ import annotations

import re

from attestor.constants import CITATION_PREFIX, PERMALINK_HOST

# Single characters that may continue a citation key or a URL. A match
# followed by one of these is only a prefix of a longer reference.
CITATION_KEY_CHAR = r"[A-Za-z0-9_-]"
# Closing brackets end a URL so markdown links and autolinks stay clean.
URL_CHAR = r"[^\s)\]>]"

CITATION_RE = re.compile(
    re.escape(CITATION_PREFIX) + "(" + CITATION_KEY_CHAR + "+)"
)
URL_RE = re.compile(r"https?://" + URL_CHAR + "+")

PERMALINK_RE = re.compile(
    r"https://" + re.escape(PERMALINK_HOST) + r"/"
    r"(?P<owner>[^/\s]+)/"
    r"(?P<repo>[^/\s]+)/blob/"
    r"(?P<sha>[0-9a-fA-F]{1,40})/"
    r"(?P<path>[^#\s]+)"
    r"#L(?P<start>\d+)(?:-L(?P<end>\d+))?"
)

TODO_RE = re.compile(r"\b(TODO|FIXME|XXX|HACK)\b:?\s*", re.IGNORECASE)

SENTENCE_END_RE = re.compile(r"(?<=[.?!])")

# Lines the claim scan never looks at: frontmatter fences, code fences,
# headings and blank lines.
SKIP_LINE_PREFIXES = ("---", "```", "#")
