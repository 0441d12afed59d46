"""Verify ``@paper:<key>`` citations against the knowledge graph."""

from __future__ import annotations

import logging

from attestor.constants import CheckKind, CheckStatus
from attestor.oracles.errors import OracleError, OracleUnavailableError
from attestor.oracles.protocols import KnowledgeGraph
from attestor.references import CitationRef, SourceLocation
from attestor.schemas import (
    CitationDetails,
    VerificationDetails,
    VerificationOutcome,
)
from attestor.verifiers.base import make_outcome

logger = logging.getLogger(__name__)


def _details(key: str, resolved: bool) -> VerificationDetails:
    return VerificationDetails(
        citation=CitationDetails(paper_id=key, resolved=resolved)
    )


async def verify_citation(
    ref: CitationRef,
    location: SourceLocation,
    knowledge_graph: KnowledgeGraph,
) -> VerificationOutcome:
    """Pass if the key resolves, fail if absent or the lookup errors.

    A missing backend is a warning: it says nothing about the citation.
    """
    try:
        resolved = await knowledge_graph.resolve(ref.key)
    except OracleUnavailableError as exc:
        logger.info("event=kg_unavailable key=%s error=%s", ref.key, exc)
        return make_outcome(
            CheckKind.CITATION,
            location,
            CheckStatus.WARN,
            f"Cannot verify paper ID {ref.key!r}: {exc}",
            _details(ref.key, False),
        )
    except OracleError as exc:
        logger.warning("event=kg_error key=%s error=%s", ref.key, exc)
        return make_outcome(
            CheckKind.CITATION,
            location,
            CheckStatus.FAIL,
            f"Failed to verify paper ID {ref.key!r}: {exc}",
            _details(ref.key, False),
        )

    if resolved:
        return make_outcome(
            CheckKind.CITATION,
            location,
            CheckStatus.PASS,
            f"Paper ID {ref.key!r} resolved successfully",
            _details(ref.key, True),
        )
    return make_outcome(
        CheckKind.CITATION,
        location,
        CheckStatus.FAIL,
        f"Paper ID {ref.key!r} not found in knowledge graph",
        _details(ref.key, False),
    )
