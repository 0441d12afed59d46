"""In-memory fake oracles for testing.

Dict-backed implementations of the three oracle protocols.
No subprocesses, no network, instant answers for unit tests.
"""

from __future__ import annotations

from attestor.oracles.errors import OracleError
from attestor.oracles.protocols import FileMetadata


class FakeKnowledgeGraph:
    """Set-backed KnowledgeGraph.

    Keys in ``known`` resolve; keys in ``errors`` raise the mapped
    exception; everything else is reported absent.
    """

    def __init__(
        self,
        known: set[str] | None = None,
        errors: dict[str, OracleError] | None = None,
    ) -> None:
        self.known = set(known or ())
        self.errors = dict(errors or {})
        self.calls: list[str] = []

    async def resolve(self, key: str) -> bool:
        self.calls.append(key)
        if key in self.errors:
            raise self.errors[key]
        return key in self.known


class FakeSourceHost:
    """Dict-backed SourceHost keyed by (owner, repo, sha, path)."""

    def __init__(
        self,
        files: dict[tuple[str, str, str, str], int] | None = None,
        error: OracleError | None = None,
    ) -> None:
        self.files = dict(files or {})
        self.error = error
        self.calls: list[tuple[str, str, str, str]] = []

    async def get_file(
        self, owner: str, repo: str, commit_sha: str, path: str
    ) -> FileMetadata | None:
        key = (owner, repo, commit_sha, path)
        self.calls.append(key)
        if self.error is not None:
            raise self.error
        size = self.files.get(key)
        if size is None:
            return None
        return FileMetadata(size_bytes=size)


class FakeCompleter:
    """Returns a canned response, or raises if ``error`` is set."""

    def __init__(
        self,
        response: str = "",
        error: Exception | None = None,
    ) -> None:
        self.response = response
        self.error = error
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response
