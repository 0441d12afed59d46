"""Pydantic models for verification outcomes and reports."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from attestor.constants import CheckKind, CheckStatus

_FROZEN = ConfigDict(frozen=True)


class CitationDetails(BaseModel):
    model_config = _FROZEN

    paper_id: str
    resolved: bool


class UrlDetails(BaseModel):
    model_config = _FROZEN

    url: str
    http_status: int | None = None
    error: str | None = None


class CodeLinkDetails(BaseModel):
    """Outcome details for a source permalink.

    ``line_count_estimated`` is True whenever the line count was
    derived from the file's byte size rather than counted; in that case
    ``line_range_valid`` was not checked by comparison.
    """

    model_config = _FROZEN

    permalink: str
    file_exists: bool
    line_range_valid: bool
    line_count_estimated: bool = False
    estimated_line_count: int | None = None


class ClaimDetails(BaseModel):
    model_config = _FROZEN

    claim_text: str
    confidence: str
    suggested_action: str
    reason: str = ""


class VerificationDetails(BaseModel):
    """Kind-specific details; at most one variant is populated."""

    model_config = _FROZEN

    citation: CitationDetails | None = None
    url: UrlDetails | None = None
    code_link: CodeLinkDetails | None = None
    claim: ClaimDetails | None = None

    def populated(self) -> list[str]:
        return [
            name
            for name in ("citation", "url", "code_link", "claim")
            if getattr(self, name) is not None
        ]


# Which details variant each check kind may carry
_DETAILS_FOR_KIND: dict[CheckKind, str | None] = {
    CheckKind.CITATION: "citation",
    CheckKind.URL: "url",
    CheckKind.CODE_LINK: "code_link",
    CheckKind.CLAIM: "claim",
    CheckKind.TODO_MARKER: None,
    CheckKind.FILE: None,
}


class VerificationTarget(BaseModel):
    model_config = _FROZEN

    file: str
    line: int = 0
    text: str = ""


class VerificationOutcome(BaseModel):
    """Write-once result of one check."""

    model_config = _FROZEN

    check_id: str
    check_type: CheckKind
    target: VerificationTarget
    status: CheckStatus
    message: str
    details: VerificationDetails = Field(
        default_factory=VerificationDetails
    )
    checked_at: datetime

    @model_validator(mode="after")
    def _details_match_kind(self) -> VerificationOutcome:
        populated = self.details.populated()
        expected = _DETAILS_FOR_KIND[self.check_type]
        allowed = [] if expected is None else [expected]
        if any(name not in allowed for name in populated):
            msg = (
                f"{self.check_type} outcome cannot carry "
                f"{', '.join(populated)} details"
            )
            raise ValueError(msg)
        return self


class ReportSummary(BaseModel):
    model_config = _FROZEN

    total_checks: int = 0
    passed: int = 0
    failed: int = 0
    warnings: int = 0


class VerificationReport(BaseModel):
    """Aggregated outcomes for one verification run."""

    model_config = _FROZEN

    report_id: str
    generated_at: datetime
    content_files: list[str] = Field(
        default_factory=lambda: list[str]()
    )
    summary: ReportSummary = Field(default_factory=ReportSummary)
    results: list[VerificationOutcome] = Field(
        default_factory=lambda: list[VerificationOutcome]()
    )
    exit_code: int = 0

    def filter_by_status(
        self, status: CheckStatus
    ) -> list[VerificationOutcome]:
        return [r for r in self.results if r.status == status]

    def filter_by_type(
        self, check_type: CheckKind
    ) -> list[VerificationOutcome]:
        return [r for r in self.results if r.check_type == check_type]
