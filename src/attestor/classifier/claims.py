"""Claim classification with a text-completion fallback."""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from attestor.classifier.heuristics import (
    ClaimJudgment,
    analyze_claim_with_heuristics,
)
from attestor.constants import ConfidenceLevel, SuggestedAction
from attestor.oracles.protocols import TextCompleter
from attestor.prompts import build_claim_prompt
from attestor.resilience.errors import classify_error

logger = logging.getLogger(__name__)


class ClaimAnalysis(BaseModel):
    """Structured judgment returned by the completion oracle."""

    needs_citation: bool
    confidence: ConfidenceLevel = ConfidenceLevel.LOW
    reason: str = ""
    suggested_action: str = ""

    @field_validator("confidence", mode="before")
    @classmethod
    def _normalize_confidence(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().lower()
            if v in {level.value for level in ConfidenceLevel}:
                return v
        return ConfidenceLevel.LOW

    def to_judgment(self) -> ClaimJudgment:
        default = (
            SuggestedAction.ADD_CITATION
            if self.needs_citation
            else SuggestedAction.NONE
        )
        try:
            action = SuggestedAction(self.suggested_action.strip().lower())
        except ValueError:
            action = default
        return ClaimJudgment(
            needs_citation=self.needs_citation,
            confidence=self.confidence,
            reason=self.reason or "Classified by language model",
            suggested_action=action,
        )


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence (```json ... ```)."""
    s = text.strip()
    if s.startswith("```"):
        s = s[3:]
        if s.lower().startswith("json"):
            s = s[4:]
        end = s.find("```")
        if end != -1:
            s = s[:end]
    return s.strip()


def parse_claim_response(text: str) -> ClaimAnalysis:
    """Parse the oracle's JSON judgment, tolerating code fences.

    Raises ValueError on anything that is not a valid judgment.
    """
    try:
        data = json.loads(strip_code_fences(text))
    except json.JSONDecodeError as exc:
        msg = f"parse LLM response: {exc}"
        raise ValueError(msg) from exc
    try:
        return ClaimAnalysis.model_validate(data)
    except ValidationError as exc:
        msg = f"invalid LLM judgment: {exc.error_count()} errors"
        raise ValueError(msg) from exc


async def classify_claim(
    sentence: str,
    completer: TextCompleter | None,
    *,
    use_llm: bool = True,
) -> ClaimJudgment:
    """Classify *sentence*, escalating only low-confidence results.

    The oracle is consulted only when heuristics are inconclusive,
    *use_llm* is set and a completer is reachable. Any oracle failure
    keeps the heuristic result.
    """
    judgment = analyze_claim_with_heuristics(sentence)
    if judgment.confidence != ConfidenceLevel.LOW:
        return judgment
    if not use_llm or completer is None:
        return judgment

    try:
        response = await completer.complete(build_claim_prompt(sentence))
        return parse_claim_response(response).to_judgment()
    except Exception as exc:
        logger.warning(
            "event=claim_escalation_failed error_class=%s error=%s",
            classify_error(exc).value,
            exc,
        )
        return judgment
