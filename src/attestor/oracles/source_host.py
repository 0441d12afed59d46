"""Source-hosting file metadata lookups (GitHub contents API).

Two backends share one contract: the ``gh`` CLI (uses the caller's
existing GitHub login) and direct REST calls over httpx.
"""

from __future__ import annotations

import json
import logging
from typing import Any, cast
from urllib.parse import quote

import httpx

from attestor.constants import ERROR_TRUNCATION_CHARS, ORACLE_TIMEOUT
from attestor.oracles._subprocess import run_command
from attestor.oracles.errors import OracleError, OracleUnavailableError
from attestor.oracles.protocols import FileMetadata

logger = logging.getLogger(__name__)


def contents_path(
    owner: str, repo: str, commit_sha: str, path: str
) -> str:
    """``repos/{owner}/{repo}/contents/{path}?ref={sha}``."""
    return (
        f"repos/{quote(owner)}/{quote(repo)}/contents/"
        f"{quote(path, safe='/')}?ref={quote(commit_sha)}"
    )


def parse_contents_payload(raw: str) -> FileMetadata:
    """Extract file metadata from a contents API response body.

    The path exists, so a directory listing (JSON array) or a non-file
    entry such as a submodule or symlink is an OracleError, not absence.
    """
    try:
        data: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        msg = f"parse response: {exc}"
        raise OracleError(msg) from exc

    if isinstance(data, list):
        msg = "path is a directory, not a file"
        raise OracleError(msg)
    if not isinstance(data, dict):
        msg = "parse response: unexpected payload"
        raise OracleError(msg)

    payload = cast(dict[str, Any], data)
    kind = payload.get("type", "file")
    if kind != "file":
        msg = f"path is a {kind}, not a file"
        raise OracleError(msg)
    try:
        size = int(payload.get("size", 0))
    except (TypeError, ValueError) as exc:
        msg = f"parse response: invalid size {payload.get('size')!r}"
        raise OracleError(msg) from exc
    return FileMetadata(size_bytes=size)


class GhCliSourceHost:
    """Look files up with ``gh api``."""

    def __init__(
        self, command: str = "gh", timeout: float = ORACLE_TIMEOUT
    ) -> None:
        self._command = command
        self._timeout = timeout

    async def get_file(
        self, owner: str, repo: str, commit_sha: str, path: str
    ) -> FileMetadata | None:
        result = await run_command(
            self._command,
            "api",
            contents_path(owner, repo, commit_sha, path),
            timeout=self._timeout,
        )
        if not result.ok:
            stderr = result.stderr.strip()
            if "404" in stderr or "Not Found" in stderr:
                return None
            if "rate limit" in stderr.lower():
                msg = f"gh api rate limited: {stderr[:ERROR_TRUNCATION_CHARS]}"
                raise OracleUnavailableError(msg)
            msg = f"gh api error: {stderr or f'exit {result.returncode}'}"
            raise OracleError(msg)
        return parse_contents_payload(result.stdout)


class GitHubApiSourceHost:
    """Look files up with direct REST calls.

    Works unauthenticated (low rate limit) or with a token.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str = "https://api.github.com",
        token: str = "",
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    async def get_file(
        self, owner: str, repo: str, commit_sha: str, path: str
    ) -> FileMetadata | None:
        url = f"{self._base_url}/{contents_path(owner, repo, commit_sha, path)}"
        try:
            response = await self._client.get(url, headers=self._headers)
        except httpx.HTTPError as exc:
            msg = f"GitHub API request failed: {exc}"
            raise OracleError(msg) from exc

        if response.status_code == 404:
            return None
        if _is_rate_limited(response):
            logger.warning(
                "event=github_rate_limited status=%d",
                response.status_code,
            )
            msg = f"GitHub API rate limited (HTTP {response.status_code})"
            raise OracleUnavailableError(msg)
        if response.is_error:
            body = response.text[:ERROR_TRUNCATION_CHARS]
            msg = f"GitHub API error (HTTP {response.status_code}): {body}"
            raise OracleError(msg)
        return parse_contents_payload(response.text)


def _is_rate_limited(response: httpx.Response) -> bool:
    if response.status_code == 429:
        return True
    return (
        response.status_code == 403
        and response.headers.get("x-ratelimit-remaining") == "0"
    )
