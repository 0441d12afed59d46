"""Verify that bare URLs are reachable."""

from __future__ import annotations

import asyncio
import logging

import httpx

from attestor.constants import (
    MAX_REDIRECTS,
    URL_REQUEST_TIMEOUT,
    URL_TOTAL_TIMEOUT,
    USER_AGENT,
    CheckKind,
    CheckStatus,
)
from attestor.references import SourceLocation, UrlRef
from attestor.resilience.errors import classify_error
from attestor.schemas import UrlDetails, VerificationDetails, VerificationOutcome
from attestor.verifiers.base import make_outcome

logger = logging.getLogger(__name__)


def build_http_client(
    request_timeout: float = URL_REQUEST_TIMEOUT,
    max_redirects: int = MAX_REDIRECTS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Client used for URL probes and REST oracles."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(request_timeout),
        follow_redirects=True,
        max_redirects=max_redirects,
        headers={"User-Agent": USER_AGENT},
        transport=transport,
    )


async def _probe(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    total_timeout: float,
) -> int:
    """Return the final status code; the body is never read."""
    async with asyncio.timeout(total_timeout):
        async with client.stream(method, url) as response:
            return response.status_code


def _describe(exc: BaseException, total_timeout: float) -> str:
    if isinstance(exc, httpx.TooManyRedirects):
        return "too many redirects"
    if isinstance(exc, (TimeoutError, httpx.TimeoutException)):
        return f"timed out after {total_timeout:g}s"
    return str(exc) or type(exc).__name__


def _failure(
    ref: UrlRef, location: SourceLocation, message: str, error: str
) -> VerificationOutcome:
    return make_outcome(
        CheckKind.URL,
        location,
        CheckStatus.FAIL,
        message,
        VerificationDetails(url=UrlDetails(url=ref.url, error=error)),
    )


async def verify_url(
    ref: UrlRef,
    location: SourceLocation,
    client: httpx.AsyncClient,
    *,
    total_timeout: float = URL_TOTAL_TIMEOUT,
) -> VerificationOutcome:
    """Probe *ref* with HEAD, retrying once with GET on transport failure.

    2xx/3xx pass, 4xx fail, anything else warns. A network failure on
    both attempts fails.
    """
    url = ref.url
    try:
        status = await _probe(client, "HEAD", url, total_timeout)
    except httpx.InvalidURL as exc:
        return _failure(ref, location, f"Invalid URL {url!r}: {exc}", str(exc))
    except (httpx.HTTPError, TimeoutError) as head_exc:
        # Some servers reject HEAD outright.
        logger.debug(
            "event=head_failed url=%s error_class=%s",
            url,
            classify_error(head_exc).value,
        )
        try:
            status = await _probe(client, "GET", url, total_timeout)
        except (httpx.HTTPError, httpx.InvalidURL, TimeoutError) as exc:
            error = _describe(exc, total_timeout)
            logger.info("event=url_unreachable url=%s error=%s", url, error)
            return _failure(
                ref,
                location,
                f"URL {url!r} is not accessible: {error}",
                error,
            )

    details = VerificationDetails(
        url=UrlDetails(url=url, http_status=status)
    )
    if 200 <= status < 400:
        return make_outcome(
            CheckKind.URL,
            location,
            CheckStatus.PASS,
            f"URL {url!r} is accessible (HTTP {status})",
            details,
        )
    if 400 <= status < 500:
        return make_outcome(
            CheckKind.URL,
            location,
            CheckStatus.FAIL,
            f"URL {url!r} returned client error (HTTP {status})",
            details,
        )
    return make_outcome(
        CheckKind.URL,
        location,
        CheckStatus.WARN,
        f"URL {url!r} returned unexpected status (HTTP {status})",
        details,
    )
