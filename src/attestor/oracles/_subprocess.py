"""Bounded subprocess calls shared by the CLI-backed oracles."""

from __future__ import annotations

import asyncio
import logging
import shutil
from dataclasses import dataclass

from attestor.oracles.errors import OracleError, OracleUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def is_installed(executable: str) -> bool:
    return shutil.which(executable) is not None


async def run_command(
    *args: str, timeout: float
) -> CommandResult:
    """Run *args* and capture output, killing the process on timeout.

    Raises OracleUnavailableError if the executable is not on PATH or
    cannot be launched, and OracleError on any other spawn failure or
    when the deadline passes.
    """
    executable = args[0]
    if not is_installed(executable):
        msg = f"{executable} CLI not found"
        raise OracleUnavailableError(msg)

    try:
        proc = await asyncio.create_subprocess_exec(
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except (FileNotFoundError, PermissionError) as exc:
        logger.warning(
            "event=subprocess_spawn_failed cmd=%s error=%s", executable, exc
        )
        msg = f"{executable} cannot be started: {exc}"
        raise OracleUnavailableError(msg) from exc
    except OSError as exc:
        logger.warning(
            "event=subprocess_spawn_failed cmd=%s error=%s", executable, exc
        )
        msg = f"{executable} failed to start: {exc}"
        raise OracleError(msg) from exc

    try:
        stdout, stderr = await asyncio.wait_for(
            proc.communicate(), timeout=timeout
        )
    except TimeoutError:
        proc.kill()
        await proc.wait()
        logger.warning(
            "event=subprocess_timeout cmd=%s timeout=%s",
            executable,
            timeout,
        )
        msg = f"{executable} timed out after {timeout:g}s"
        raise OracleError(msg) from None

    return CommandResult(
        returncode=proc.returncode or 0,
        stdout=stdout.decode(errors="replace"),
        stderr=stderr.decode(errors="replace"),
    )
