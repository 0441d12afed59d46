"""Environment-based configuration."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

from attestor.constants import (
    MAX_REDIRECTS,
    ORACLE_TIMEOUT,
    URL_REQUEST_TIMEOUT,
    URL_TOTAL_TIMEOUT,
    LLMProvider,
    SourceHostBackend,
)

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Reads from .env file and ATTESTOR_* environment variables."""

    # Claim classification
    use_llm: bool = True
    llm_provider: LLMProvider = LLMProvider.AUTO
    report_passing_claims: bool = False

    # LLM Provider
    anthropic_api_key: str = ""
    openai_api_key: str = ""

    # Model chain (first = primary, rest = fallbacks tried in order)
    litellm_model_chain: Annotated[list[str], NoDecode] = [
        "anthropic/claude-3-5-haiku-latest",
        "openai/gpt-4.1-mini",
    ]
    llm_timeout_seconds: int = 60
    claude_cli_model: str = "claude-3-5-haiku-latest"
    ollama_model: str = "llama3.2"

    # Knowledge graph
    knowledge_graph_command: str = "bip"

    # Source host
    source_host_backend: SourceHostBackend = SourceHostBackend.AUTO
    github_api_url: str = "https://api.github.com"
    github_token: str = ""

    # Timeouts (seconds)
    url_request_timeout: float = URL_REQUEST_TIMEOUT
    url_total_timeout: float = URL_TOTAL_TIMEOUT
    max_redirects: int = MAX_REDIRECTS
    oracle_timeout_seconds: float = ORACLE_TIMEOUT

    # Logging
    log_level: str = "INFO"

    @field_validator("litellm_model_chain", mode="before")
    @classmethod
    def _parse_chain(cls, v: Any) -> Any:
        """Accept comma-separated string or JSON array."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("litellm_model_chain")
    @classmethod
    def _validate_chain(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError(
                "litellm_model_chain must contain at least one model"
            )
        seen: set[str] = set()
        dupes: list[str] = []
        for m in v:
            if m in seen:
                dupes.append(m)
            seen.add(m)
        if dupes:
            logger.warning(
                "Duplicate models in ATTESTOR_LITELLM_MODEL_CHAIN: %s",
                ", ".join(dupes),
            )
        return v

    @field_validator("max_redirects")
    @classmethod
    def _validate_redirects(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_redirects must be >= 0")
        return v

    @property
    def has_llm_api_key(self) -> bool:
        return bool(self.anthropic_api_key or self.openai_api_key)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "ATTESTOR_",
        "extra": "ignore",
    }
