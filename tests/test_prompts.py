"""Tests for prompt construction."""

from __future__ import annotations

from attestor.prompts import build_claim_prompt


def test_sentence_embedded_quoted() -> None:
    prompt = build_claim_prompt('Trees "grow" fast.')
    assert repr('Trees "grow" fast.') in prompt


def test_json_braces_survive_formatting() -> None:
    prompt = build_claim_prompt("x")
    assert '"needs_citation": true/false' in prompt
    assert prompt.count("{") == prompt.count("}")
