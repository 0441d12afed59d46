"""LLM prompts. All prompt text lives here."""

CLAIM_ANALYSIS_PROMPT = """\
Analyze if this sentence from a scientific document is a factual claim \
that requires a citation.

Sentence: {sentence!r}

Respond with JSON only:
{{
  "needs_citation": true/false,
  "confidence": "high"/"medium"/"low",
  "reason": "brief explanation",
  "suggested_action": "add citation" or "no action needed" or "review manually"
}}

Guidelines:
- Performance comparisons ("X is faster than Y") NEED citations
- Attribution of discoveries ("discovered by", "introduced by") NEED citations
- Quantitative claims (numbers, percentages) NEED citations
- Definitions ("is defined as") do NOT need citations
- Examples ("for example", "e.g.") do NOT need citations
- Transitional prose ("in this section") does NOT need citations"""


def build_claim_prompt(sentence: str) -> str:
    return CLAIM_ANALYSIS_PROMPT.format(sentence=sentence)
