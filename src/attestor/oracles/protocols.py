"""Protocol-based oracle interfaces.

Backends satisfy these protocols structurally (no inheritance), so a
subprocess-driven backend can be swapped for a direct API client
without touching verifier logic. Test doubles live in
``attestor.oracles.fakes``.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class FileMetadata:
    """Metadata of a file at a specific commit."""

    size_bytes: int


class KnowledgeGraph(Protocol):
    async def resolve(self, key: str) -> bool:
        """True if the key exists, False if explicitly absent.

        Raises OracleUnavailableError / OracleError otherwise.
        """
        ...


class SourceHost(Protocol):
    async def get_file(
        self, owner: str, repo: str, commit_sha: str, path: str
    ) -> FileMetadata | None:
        """File metadata at *commit_sha*, or None if it does not exist."""
        ...


class TextCompleter(Protocol):
    async def complete(self, prompt: str) -> str: ...
