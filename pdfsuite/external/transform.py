"""Shared stage/run/collect lifecycle for external tool transforms."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

from ..core.utils import get_logger
from ..exceptions import SubprocessError
from .runner import run_subprocess
from .tempstore import ArtifactScope, TempResourceStore

LOGGER = get_logger("pdfsuite.external.transform")

CommandFactory = Callable[[Path, Path, ArtifactScope], Sequence[str]]
"""Builds the command line from the staged input, the expected output and the scope."""


def execute_tool(
    store: TempResourceStore,
    *,
    tool: str,
    data: bytes,
    input_name: str,
    output_name: str,
    build_command: CommandFactory,
    timeout: float | None = None,
    input_subdir: str | None = None,
    output_subdir: str | None = None,
) -> bytes:
    """Stage ``data``, run the tool and return the bytes of its output artifact.

    Every artifact of the run lives in one request scope which is removed on
    all exit paths, including failures while staging before the tool starts.
    """

    with store.scope() as scope:
        source = scope.stage(input_name, data, subdir=input_subdir)
        output = scope.create(output_name, subdir=output_subdir)
        command = build_command(source.path, output.path, scope)

        run_subprocess(command, tool=tool, timeout=timeout)

        if not output.exists():
            LOGGER.error("%s exited successfully but produced no %s", tool, output.name)
            raise SubprocessError(f"{tool} produced no output", command=command, returncode=0)

        result = store.read(output)
        LOGGER.info("%s produced %d bytes from %d input bytes", tool, len(result), len(data))
        return result


__all__ = ["CommandFactory", "execute_tool"]
