"""Services: orchestration of a verification run."""

from attestor.services.verification_service import (
    VerificationContext,
    open_context,
    run_verification,
    verify_file,
    verify_files,
    verify_text,
)

__all__ = [
    "VerificationContext",
    "open_context",
    "run_verification",
    "verify_file",
    "verify_files",
    "verify_text",
]
