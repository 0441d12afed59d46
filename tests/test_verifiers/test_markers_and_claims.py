"""Tests for TODO-marker and claim verifiers."""

from __future__ import annotations

import json

from attestor.constants import (
    CheckKind,
    CheckStatus,
    ConfidenceLevel,
    SuggestedAction,
)
from attestor.oracles.fakes import FakeCompleter
from attestor.references import ClaimSentence, SourceLocation, TodoRef
from attestor.verifiers import verify_claim, verify_todo_marker

LOC = SourceLocation(file="ch3.qmd", line=9, text="")


class TestTodoMarker:
    def test_always_fails(self) -> None:
        outcome = verify_todo_marker(TodoRef("todo:"), LOC)
        assert outcome.check_type == CheckKind.TODO_MARKER
        assert outcome.status == CheckStatus.FAIL
        assert outcome.message.startswith("TODO marker found")
        assert outcome.details.populated() == []


class TestClaim:
    async def test_uncited_comparative_fails_high(self) -> None:
        outcome = await verify_claim(
            ClaimSentence("Method A is 40% faster than method B."), LOC
        )
        assert outcome.status == CheckStatus.FAIL
        claim = outcome.details.claim
        assert claim is not None
        assert claim.confidence == ConfidenceLevel.HIGH
        assert claim.suggested_action == SuggestedAction.ADD_CITATION

    async def test_definition_passes(self) -> None:
        outcome = await verify_claim(
            ClaimSentence(
                "A phylogenetic tree is defined as a branching diagram."
            ),
            LOC,
        )
        assert outcome.status == CheckStatus.PASS
        assert outcome.details.claim is not None
        assert outcome.details.claim.confidence == ConfidenceLevel.HIGH
        assert "Definitional" in outcome.message

    async def test_citation_short_circuits(self) -> None:
        completer = FakeCompleter(json.dumps({"needs_citation": True}))
        outcome = await verify_claim(
            ClaimSentence(
                "Method A is 40% faster than method B [@paper:x].",
                has_citation=True,
            ),
            LOC,
            completer,
        )
        assert outcome.status == CheckStatus.PASS
        assert outcome.message == "Claim has citation"
        assert completer.prompts == []

    async def test_oracle_verdict_used_for_low_confidence(self) -> None:
        completer = FakeCompleter(
            json.dumps({
                "needs_citation": True,
                "confidence": "medium",
                "reason": "Empirical statement",
                "suggested_action": "review manually",
            })
        )
        outcome = await verify_claim(
            ClaimSentence("Bayesian samplers mix slowly on large trees."),
            LOC,
            completer,
        )
        assert outcome.status == CheckStatus.FAIL
        assert "Empirical statement" in outcome.message
        assert outcome.details.claim is not None
        assert outcome.details.claim.suggested_action == SuggestedAction.REVIEW
