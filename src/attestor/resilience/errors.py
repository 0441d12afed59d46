"""Error classes for oracle and probe failure log events.

Verifiers already turn failures into outcomes; ``classify_error`` only
labels the ``error_class=`` field of the log line written alongside,
so a run's log shows at a glance whether failures were rate limits,
outages or bad requests.
"""

from __future__ import annotations

import json
from enum import Enum

import httpx
from pydantic import ValidationError


class ErrorClass(Enum):
    TRANSIENT = "transient"  # 429, rate limit, network
    SERVER = "server"  # 5xx
    TIMEOUT = "timeout"
    CLIENT = "client"  # 4xx other than 429
    MALFORMED = "malformed"  # unparseable oracle response
    UNKNOWN = "unknown"


def _from_status(status_code: int) -> ErrorClass | None:
    if status_code == 429:
        return ErrorClass.TRANSIENT
    if 400 <= status_code < 500:
        return ErrorClass.CLIENT
    if 500 <= status_code < 600:
        return ErrorClass.SERVER
    return None


def classify_error(error: BaseException) -> ErrorClass:
    """Label *error* for logging.

    Typed exceptions (httpx, pydantic, litellm's ``status_code``) are
    checked first. Oracle errors built from CLI stderr carry no
    structure, so their message is matched last.
    """
    if isinstance(error, httpx.HTTPStatusError):
        by_status = _from_status(error.response.status_code)
        if by_status is not None:
            return by_status
    status_code = getattr(error, "status_code", None)
    if isinstance(status_code, int):
        by_status = _from_status(status_code)
        if by_status is not None:
            return by_status

    if isinstance(error, (TimeoutError, httpx.TimeoutException)):
        return ErrorClass.TIMEOUT
    if isinstance(error, httpx.TransportError):
        return ErrorClass.TRANSIENT
    if isinstance(error, (ValidationError, json.JSONDecodeError)):
        return ErrorClass.MALFORMED

    msg = str(error).lower()
    if "timed out" in msg or "timeout" in msg:
        return ErrorClass.TIMEOUT
    if "rate limit" in msg or "429" in msg:
        return ErrorClass.TRANSIENT
    if any(f"http {code}" in msg for code in ("500", "502", "503", "504")):
        return ErrorClass.SERVER
    if any(f"http {code}" in msg for code in ("400", "401", "403", "404")):
        return ErrorClass.CLIENT

    return ErrorClass.UNKNOWN
