"""Outcome construction shared by every verifier."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from attestor.constants import CheckKind, CheckStatus
from attestor.references import SourceLocation
from attestor.schemas import (
    VerificationDetails,
    VerificationOutcome,
    VerificationTarget,
)


def make_outcome(
    check_type: CheckKind,
    location: SourceLocation,
    status: CheckStatus,
    message: str,
    details: VerificationDetails | None = None,
) -> VerificationOutcome:
    """Stamp a fresh id and UTC timestamp onto a new outcome."""
    return VerificationOutcome(
        check_id=str(uuid.uuid4()),
        check_type=check_type,
        target=VerificationTarget(
            file=location.file,
            line=location.line,
            text=location.text,
        ),
        status=status,
        message=message,
        details=details or VerificationDetails(),
        checked_at=datetime.now(UTC),
    )
