"""Sub-command definitions for the pdfsuite CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ...exceptions import ValidationError
from ...tools.common.interfaces import InputFile


def read_inputs(paths: Sequence[str]) -> list[InputFile]:
    inputs: list[InputFile] = []
    for raw in paths:
        path = Path(raw).expanduser()
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise ValidationError(f"Unable to read input file: {path}") from exc
        inputs.append(InputFile(data=data, filename=path.name))
    return inputs
