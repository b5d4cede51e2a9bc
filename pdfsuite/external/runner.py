"""Helpers for locating and running external tools."""

from __future__ import annotations

import shutil
import subprocess
from typing import MutableMapping, Sequence

from ..core.utils import get_logger
from ..exceptions import SubprocessError

LOGGER = get_logger("pdfsuite.external.runner")


def which(executables: Sequence[str]) -> str | None:
    """Return the first executable from *executables* found on ``PATH``."""

    for candidate in executables:
        found = shutil.which(candidate)
        if found:
            LOGGER.debug("Detected external tool: %s -> %s", candidate, found)
            return found
    return None


def require_executable(executables: Sequence[str], tool: str) -> str:
    executable = which(executables)
    if executable is None:
        LOGGER.error("%s not found on PATH (tried %s)", tool, ", ".join(executables))
        raise SubprocessError(f"{tool} is not available on this server")
    return executable


def run_subprocess(
    command: Sequence[str],
    *,
    tool: str,
    timeout: float | None = None,
    env: MutableMapping[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run *command* to completion capturing stdout and stderr.

    Parameters
    ----------
    command:
        Command and arguments to execute. No shell is involved.
    tool:
        Human readable tool name used in error messages.
    timeout:
        Seconds to wait before the child is killed.
    env:
        Optional environment for the child.

    Raises
    ------
    SubprocessError
        If the process cannot be started, exceeds *timeout* or exits with a
        non-zero status. The captured streams are logged, not attached.
    """

    LOGGER.debug("Executing command: %s", " ".join(command))
    try:
        completed = subprocess.run(
            list(command),
            env=env,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
            text=True,
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as exc:
        LOGGER.error("%s timed out after %s seconds\nstderr: %s", tool, timeout, exc.stderr)
        raise SubprocessError(f"{tool} timed out", command=command) from exc
    except OSError as exc:
        LOGGER.error("Failed to start %s: %s", tool, exc)
        raise SubprocessError(f"{tool} could not be started", command=command) from exc

    if completed.returncode != 0:
        LOGGER.warning(
            "%s exited with code %s\nstdout: %s\nstderr: %s",
            tool,
            completed.returncode,
            completed.stdout,
            completed.stderr,
        )
        raise SubprocessError(
            f"{tool} failed to process the document",
            command=command,
            returncode=completed.returncode,
        )

    LOGGER.debug(
        "Command finished with exit code %s\nstdout: %s\nstderr: %s",
        completed.returncode,
        completed.stdout,
        completed.stderr,
    )
    return completed


__all__ = ["require_executable", "run_subprocess", "which"]
