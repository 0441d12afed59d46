"""Text-completion oracles used by the claim classifier."""

from __future__ import annotations

import logging

from circuitbreaker import CircuitBreakerError

from attestor.constants import ORACLE_TIMEOUT
from attestor.oracles._llm_call import guarded_llm_call
from attestor.oracles._subprocess import run_command
from attestor.oracles.errors import OracleError
from attestor.resilience.errors import classify_error

logger = logging.getLogger(__name__)


class LiteLLMCompleter:
    """Complete a prompt through the litellm model chain.

    Models are tried in order; the first successful response wins.
    """

    def __init__(self, models: list[str], timeout: int = 60) -> None:
        if not models:
            raise ValueError("LiteLLMCompleter needs at least one model")
        self._models = list(models)
        self._timeout = timeout

    async def complete(self, prompt: str) -> str:
        messages = [{"role": "user", "content": prompt}]
        last_error: Exception | None = None
        for model in self._models:
            try:
                result = await guarded_llm_call(
                    model, messages, self._timeout
                )
                logger.info(
                    "event=completion_ok model=%s input_tokens=%d output_tokens=%d",
                    result.model,
                    result.input_tokens,
                    result.output_tokens,
                )
                return result.content.strip()
            except CircuitBreakerError as exc:
                logger.warning("event=circuit_open model=%s", model)
                last_error = exc
            except Exception as exc:
                logger.warning(
                    "event=completion_failed model=%s error_class=%s",
                    model,
                    classify_error(exc).value,
                )
                last_error = exc
        msg = f"all models failed: {last_error}"
        raise OracleError(msg)


class CliCompleter:
    """Complete a prompt with a locally installed CLI.

    ``claude -p <prompt> --model <model>`` or ``ollama run <model> <prompt>``.
    """

    def __init__(
        self,
        provider: str,
        model: str,
        timeout: float = ORACLE_TIMEOUT,
    ) -> None:
        if provider not in ("claude", "ollama"):
            msg = f"unknown provider: {provider}"
            raise ValueError(msg)
        self.provider = provider
        self._model = model
        self._timeout = timeout

    def _argv(self, prompt: str) -> list[str]:
        if self.provider == "claude":
            return ["claude", "-p", prompt, "--model", self._model]
        return ["ollama", "run", self._model, prompt]

    async def complete(self, prompt: str) -> str:
        result = await run_command(
            *self._argv(prompt), timeout=self._timeout
        )
        if not result.ok:
            msg = f"{self.provider} error (exit {result.returncode}): {result.stderr.strip()}"
            raise OracleError(msg)
        return result.stdout.strip()
