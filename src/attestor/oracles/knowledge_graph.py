"""Knowledge-graph lookup backed by the ``bip`` paper-library CLI."""

from __future__ import annotations

import logging

from attestor.constants import NOT_FOUND_MARKERS, ORACLE_TIMEOUT
from attestor.oracles._subprocess import run_command
from attestor.oracles.errors import OracleError

logger = logging.getLogger(__name__)


class BipKnowledgeGraph:
    """Resolve citation keys with ``bip s2 get <key>``.

    Exit status 0 means the paper exists. A non-zero exit whose stderr
    says the paper was not found is a definitive absence; any other
    non-zero exit is an error and keeps the stderr text.
    """

    def __init__(
        self,
        command: str = "bip",
        timeout: float = ORACLE_TIMEOUT,
    ) -> None:
        self._command = command
        self._timeout = timeout

    async def resolve(self, key: str) -> bool:
        result = await run_command(
            self._command, "s2", "get", key, timeout=self._timeout
        )
        if result.ok:
            return True

        stderr = result.stderr.strip()
        if any(marker in stderr.lower() for marker in NOT_FOUND_MARKERS):
            logger.debug("event=kg_not_found key=%s", key)
            return False

        msg = f"{self._command} lookup failed: {stderr or f'exit {result.returncode}'}"
        raise OracleError(msg)
