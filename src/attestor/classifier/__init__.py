"""Claim classifier: pattern tiers with a language-model fallback."""

from attestor.classifier.claims import (
    ClaimAnalysis,
    classify_claim,
    parse_claim_response,
)
from attestor.classifier.heuristics import (
    ClaimJudgment,
    analyze_claim_with_heuristics,
)

__all__ = [
    "ClaimAnalysis",
    "ClaimJudgment",
    "analyze_claim_with_heuristics",
    "classify_claim",
    "parse_claim_response",
]
