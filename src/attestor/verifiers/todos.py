"""TODO-family markers always fail; there is nothing to look up."""

from __future__ import annotations

from attestor.constants import CheckKind, CheckStatus
from attestor.references import SourceLocation, TodoRef
from attestor.schemas import VerificationOutcome
from attestor.verifiers.base import make_outcome


def verify_todo_marker(
    ref: TodoRef, location: SourceLocation
) -> VerificationOutcome:
    return make_outcome(
        CheckKind.TODO_MARKER,
        location,
        CheckStatus.FAIL,
        f"{ref.marker.rstrip(':').upper()} marker found - remove before publishing",
    )
