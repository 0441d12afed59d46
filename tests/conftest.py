"""Shared test fixtures: fake oracles, mock HTTP transport, settings."""

import os

# No real oracles in tests. Drop any ATTESTOR_* overrides from the
# shell so Settings() sees only the defaults each test passes in.
for _var in [k for k in os.environ if k.startswith("ATTESTOR_")]:
    del os.environ[_var]

from collections.abc import AsyncIterator, Callable

import httpx
import pytest
import pytest_asyncio

from attestor.config import Settings
from attestor.oracles.fakes import (
    FakeCompleter,
    FakeKnowledgeGraph,
    FakeSourceHost,
)
from attestor.services.verification_service import VerificationContext
from attestor.verifiers import build_http_client

Handler = Callable[[httpx.Request], httpx.Response]


def ok_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200)


def make_client(handler: Handler = ok_handler) -> httpx.AsyncClient:
    """HTTP client whose requests never leave the process."""
    return build_http_client(
        request_timeout=5,
        max_redirects=3,
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(use_llm=False, llm_provider="none")


@pytest_asyncio.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with make_client() as client:
        yield client


@pytest.fixture
def make_context(
    settings: Settings, http_client: httpx.AsyncClient
) -> Callable[..., VerificationContext]:
    """Factory for a VerificationContext wired to fakes."""

    def _make(
        *,
        knowledge_graph: FakeKnowledgeGraph | None = None,
        source_host: FakeSourceHost | None = None,
        completer: FakeCompleter | None = None,
        client: httpx.AsyncClient | None = None,
        **overrides: object,
    ) -> VerificationContext:
        return VerificationContext(
            settings=settings.model_copy(update=overrides),
            knowledge_graph=knowledge_graph or FakeKnowledgeGraph(),
            source_host=source_host or FakeSourceHost(),
            completer=completer,
            http_client=client or http_client,
        )

    return _make
