"""Build oracle backends from settings."""

from __future__ import annotations

import logging

import httpx

from attestor.config import Settings
from attestor.constants import LLMProvider, SourceHostBackend
from attestor.oracles._subprocess import is_installed
from attestor.oracles.completion import CliCompleter, LiteLLMCompleter
from attestor.oracles.knowledge_graph import BipKnowledgeGraph
from attestor.oracles.protocols import (
    KnowledgeGraph,
    SourceHost,
    TextCompleter,
)
from attestor.oracles.source_host import GhCliSourceHost, GitHubApiSourceHost

logger = logging.getLogger(__name__)


def build_knowledge_graph(settings: Settings) -> KnowledgeGraph:
    return BipKnowledgeGraph(
        command=settings.knowledge_graph_command,
        timeout=settings.oracle_timeout_seconds,
    )


def build_source_host(
    settings: Settings, client: httpx.AsyncClient
) -> SourceHost:
    """Pick the file-metadata backend.

    ``auto`` prefers the gh CLI (it carries the user's login) and falls
    back to the REST API.
    """
    backend = settings.source_host_backend
    if backend == SourceHostBackend.AUTO:
        backend = (
            SourceHostBackend.GH_CLI
            if is_installed("gh")
            else SourceHostBackend.API
        )
    if backend == SourceHostBackend.GH_CLI:
        return GhCliSourceHost(timeout=settings.oracle_timeout_seconds)
    return GitHubApiSourceHost(
        client,
        base_url=settings.github_api_url,
        token=settings.github_token,
    )


def build_completer(settings: Settings) -> TextCompleter | None:
    """Return a reachable text-completion oracle, or None.

    None when the fallback is disabled or no provider is reachable;
    low-confidence claims then keep their heuristic result.
    """
    if not settings.use_llm:
        return None

    provider = settings.llm_provider
    if provider == LLMProvider.NONE:
        return None
    if provider == LLMProvider.AUTO:
        provider = _detect_provider(settings)
        if provider is None:
            logger.info("event=no_llm_provider")
            return None

    if provider == LLMProvider.LITELLM:
        return LiteLLMCompleter(
            settings.litellm_model_chain,
            timeout=settings.llm_timeout_seconds,
        )
    if provider == LLMProvider.CLAUDE_CLI:
        if not is_installed("claude"):
            return None
        return CliCompleter(
            "claude",
            settings.claude_cli_model,
            timeout=settings.llm_timeout_seconds,
        )
    if not is_installed("ollama"):
        return None
    return CliCompleter(
        "ollama",
        settings.ollama_model,
        timeout=settings.llm_timeout_seconds,
    )


def _detect_provider(settings: Settings) -> LLMProvider | None:
    if settings.has_llm_api_key:
        return LLMProvider.LITELLM
    if is_installed("claude"):
        return LLMProvider.CLAUDE_CLI
    if is_installed("ollama"):
        return LLMProvider.OLLAMA
    return None
