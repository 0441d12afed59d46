"""Verify that factual claims carry a citation."""

from __future__ import annotations

from attestor.classifier.claims import classify_claim
from attestor.constants import (
    CheckKind,
    CheckStatus,
    ConfidenceLevel,
    SuggestedAction,
)
from attestor.oracles.protocols import TextCompleter
from attestor.references import ClaimSentence, SourceLocation
from attestor.schemas import ClaimDetails, VerificationDetails, VerificationOutcome
from attestor.verifiers.base import make_outcome


async def verify_claim(
    claim: ClaimSentence,
    location: SourceLocation,
    completer: TextCompleter | None = None,
    *,
    use_llm: bool = True,
) -> VerificationOutcome:
    """Fail uncited sentences the classifier says need a citation.

    A sentence that already carries a citation passes without being
    classified.
    """
    if claim.has_citation:
        return make_outcome(
            CheckKind.CLAIM,
            location,
            CheckStatus.PASS,
            "Claim has citation",
            VerificationDetails(
                claim=ClaimDetails(
                    claim_text=claim.text,
                    confidence=ConfidenceLevel.HIGH,
                    suggested_action=SuggestedAction.NONE,
                    reason="Citation marker present",
                )
            ),
        )

    judgment = await classify_claim(claim.text, completer, use_llm=use_llm)
    if judgment.needs_citation:
        status = CheckStatus.FAIL
        message = f"Uncited factual claim detected ({judgment.reason})"
        action = judgment.suggested_action
        if action == SuggestedAction.NONE:
            action = SuggestedAction.ADD_CITATION
    else:
        status = CheckStatus.PASS
        message = judgment.reason
        action = judgment.suggested_action

    return make_outcome(
        CheckKind.CLAIM,
        location,
        status,
        message,
        VerificationDetails(
            claim=ClaimDetails(
                claim_text=claim.text,
                confidence=judgment.confidence,
                suggested_action=action,
                reason=judgment.reason,
            )
        ),
    )
