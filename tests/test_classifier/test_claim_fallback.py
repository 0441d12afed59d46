"""Tests for claim classification with the completion fallback."""

from __future__ import annotations

import json

import pytest

from attestor.classifier import classify_claim, parse_claim_response
from attestor.classifier.claims import strip_code_fences
from attestor.constants import ConfidenceLevel, SuggestedAction
from attestor.oracles.errors import OracleError
from attestor.oracles.fakes import FakeCompleter

LOW_SENTENCE = "Bayesian samplers mix slowly on large trees."


def _response(**overrides: object) -> str:
    payload: dict[str, object] = {
        "needs_citation": True,
        "confidence": "medium",
        "reason": "Empirical claim",
        "suggested_action": "add citation",
    }
    payload.update(overrides)
    return json.dumps(payload)


class TestParseResponse:
    def test_plain_json(self) -> None:
        analysis = parse_claim_response(_response())
        assert analysis.needs_citation is True
        assert analysis.confidence == ConfidenceLevel.MEDIUM

    def test_fenced_json(self) -> None:
        text = f"```json\n{_response()}\n```"
        assert parse_claim_response(text).reason == "Empirical claim"

    def test_invalid_confidence_becomes_low(self) -> None:
        analysis = parse_claim_response(_response(confidence="very"))
        assert analysis.confidence == ConfidenceLevel.LOW

    def test_not_json_raises(self) -> None:
        with pytest.raises(ValueError, match="parse LLM response"):
            parse_claim_response("I think it needs one.")

    def test_missing_field_raises(self) -> None:
        with pytest.raises(ValueError, match="invalid LLM judgment"):
            parse_claim_response(json.dumps({"reason": "x"}))

    def test_unknown_action_falls_back(self) -> None:
        judgment = parse_claim_response(
            _response(suggested_action="shrug")
        ).to_judgment()
        assert judgment.suggested_action == SuggestedAction.ADD_CITATION

    def test_strip_code_fences_without_fence(self) -> None:
        assert strip_code_fences('  {"a": 1} ') == '{"a": 1}'


class TestClassifyClaim:
    async def test_low_confidence_escalates(self) -> None:
        completer = FakeCompleter(_response())
        judgment = await classify_claim(LOW_SENTENCE, completer)
        assert judgment.needs_citation is True
        assert judgment.confidence == ConfidenceLevel.MEDIUM
        assert len(completer.prompts) == 1
        assert LOW_SENTENCE in completer.prompts[0]

    async def test_confident_heuristic_not_escalated(self) -> None:
        completer = FakeCompleter(_response(needs_citation=False))
        judgment = await classify_claim(
            "Method A is 40% faster than method B.", completer
        )
        assert judgment.needs_citation is True
        assert completer.prompts == []

    async def test_use_llm_false_skips_oracle(self) -> None:
        completer = FakeCompleter(_response())
        judgment = await classify_claim(
            LOW_SENTENCE, completer, use_llm=False
        )
        assert judgment.confidence == ConfidenceLevel.LOW
        assert completer.prompts == []

    async def test_no_completer_keeps_heuristic(self) -> None:
        judgment = await classify_claim(LOW_SENTENCE, None)
        assert judgment.needs_citation is False
        assert judgment.confidence == ConfidenceLevel.LOW

    async def test_oracle_error_keeps_heuristic(self) -> None:
        completer = FakeCompleter(error=OracleError("claude timed out"))
        judgment = await classify_claim(LOW_SENTENCE, completer)
        assert judgment.needs_citation is False
        assert judgment.confidence == ConfidenceLevel.LOW

    async def test_garbage_response_keeps_heuristic(self) -> None:
        completer = FakeCompleter("not json")
        judgment = await classify_claim(LOW_SENTENCE, completer)
        assert judgment.confidence == ConfidenceLevel.LOW
