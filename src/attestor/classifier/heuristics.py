"""Pattern tiers for deciding whether a sentence needs a citation.

Tiers are checked in order: exemptions, then must-cite (high
confidence), then should-cite (medium confidence). A sentence that
matches nothing is a low-confidence "no citation needed".
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from attestor.constants import ConfidenceLevel, SuggestedAction

_I = re.IGNORECASE


@dataclass(frozen=True)
class ClaimJudgment:
    needs_citation: bool
    confidence: ConfidenceLevel
    reason: str
    suggested_action: SuggestedAction = SuggestedAction.NONE


@dataclass(frozen=True)
class _Rule:
    pattern: re.Pattern[str]
    reason: str


EXEMPT_RULES: tuple[_Rule, ...] = (
    _Rule(
        re.compile(r"\b(is\s+defined\s+as|refers?\s+to|means?)\b", _I),
        "Definitional sentence; definitions need no citation",
    ),
    _Rule(
        re.compile(
            r"\b(?:for\s+example|such\s+as)\b|\b(?:e\.g\.|i\.e\.)", _I
        ),
        "Example sentence; examples need no citation",
    ),
    _Rule(
        re.compile(
            r"\b(in\s+this\s+(section|chapter)|we\s+now|let\s+us)\b", _I
        ),
        "Transitional prose; no citation needed",
    ),
    _Rule(
        re.compile(r"^```"),
        "Code fence marker; not prose",
    ),
)

MUST_CITE_RULES: tuple[_Rule, ...] = (
    _Rule(
        re.compile(
            r"(\b\d+(?:\.\d+)?%|\b\d+(?:\.\d+)?x|\bfaster|\bslower|\bbetter|\bworse)"
            r"\s+(than|compared\s+to)\b",
            _I,
        ),
        "Quantitative or comparative claim",
    ),
    _Rule(
        re.compile(
            r"\b(discovered|introduced|invented|developed)\s+by\b", _I
        ),
        "Attributes a discovery or invention",
    ),
    _Rule(
        re.compile(
            r"\baccording\s+to\b"
            r"|\bas\s+(shown|described|demonstrated)\s+(in|by)\b",
            _I,
        ),
        "Refers to prior work",
    ),
    _Rule(
        re.compile(
            r"\bstudies\s+(have\s+)?(shown|demonstrated|found|revealed)\b",
            _I,
        ),
        "Refers to prior studies",
    ),
)

SHOULD_CITE_RULES: tuple[_Rule, ...] = (
    _Rule(
        re.compile(r"\b(causes?|leads?\s+to|results?\s+in)\b", _I),
        "Causal claim",
    ),
    _Rule(
        re.compile(r"\bO\((n|log)|\bcomplexity\s+of\b", _I),
        "Complexity statement",
    ),
    _Rule(
        re.compile(r"\b(historically|traditionally|originally)\b", _I),
        "Historical framing",
    ),
)


def _first_match(rules: tuple[_Rule, ...], sentence: str) -> _Rule | None:
    for rule in rules:
        if rule.pattern.search(sentence):
            return rule
    return None


def analyze_claim_with_heuristics(sentence: str) -> ClaimJudgment:
    """Classify *sentence* with the pattern tiers alone."""
    sentence = sentence.strip()

    rule = _first_match(EXEMPT_RULES, sentence)
    if rule is not None:
        return ClaimJudgment(False, ConfidenceLevel.HIGH, rule.reason)

    rule = _first_match(MUST_CITE_RULES, sentence)
    if rule is not None:
        return ClaimJudgment(
            True,
            ConfidenceLevel.HIGH,
            rule.reason,
            SuggestedAction.ADD_CITATION,
        )

    rule = _first_match(SHOULD_CITE_RULES, sentence)
    if rule is not None:
        return ClaimJudgment(
            True,
            ConfidenceLevel.MEDIUM,
            rule.reason,
            SuggestedAction.ADD_CITATION,
        )

    return ClaimJudgment(
        False,
        ConfidenceLevel.LOW,
        "No citation-requiring patterns detected",
    )
