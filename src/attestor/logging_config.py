"""Logging for the ``attestor`` command.

stdout carries the verification report (JSON, JSONL or text), so every
log line goes to stderr. Setup happens in two steps around the imports
in ``attestor.cli``:

1. ``setup_logging()`` runs before anything imports litellm, so
   ``LITELLM_LOG`` is already set when litellm configures itself.
2. ``cleanup_third_party_handlers()`` runs after the imports and drops
   the StreamHandlers litellm attaches, which would print each of its
   records twice next to the root handler.

Both steps run at most once per process.
"""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

_LITELLM_LOGGERS = ("LiteLLM", "LiteLLM Router", "LiteLLM Proxy")

# Request-level chatter from the completion and URL-probe clients.
# Held at WARNING even under --verbose.
_SUPPRESSED_LOGGERS = (
    *_LITELLM_LOGGERS,
    "openai._base_client",
    "httpx",
    "httpcore",
)

_phase1_done = False
_phase2_done = False


def _resolve_level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        msg = f"Unknown log level: {level}"
        raise ValueError(msg)
    return value


def setup_logging(level: str = "WARNING") -> None:
    """Send root logging to stderr and quiet the HTTP/LLM libraries."""
    global _phase1_done  # noqa: PLW0603
    if _phase1_done:
        return
    _phase1_done = True

    os.environ.setdefault("LITELLM_LOG", "WARNING")

    logging.basicConfig(
        level=_resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr,
    )

    for name in _SUPPRESSED_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def set_level(level: str) -> None:
    """Apply ``--verbose`` or ``ATTESTOR_LOG_LEVEL`` once settings load."""
    logging.getLogger().setLevel(_resolve_level(level))


def cleanup_third_party_handlers() -> None:
    global _phase2_done  # noqa: PLW0603
    if _phase2_done:
        return
    _phase2_done = True

    for name in _LITELLM_LOGGERS:
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.propagate = True
