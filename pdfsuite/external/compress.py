"""Ghostscript backed PDF compression."""

from __future__ import annotations

import dataclasses
from pathlib import Path

from ..config import Settings, get_settings
from ..core.utils import get_logger
from ..exceptions import ValidationError
from .runner import require_executable
from .tempstore import ArtifactScope, TempResourceStore
from .transform import execute_tool

LOGGER = get_logger("pdfsuite.external.compress")

TOOL_NAME = "Ghostscript"


@dataclasses.dataclass(slots=True)
class CompressionResult:
    """Represents the outcome of a compression run."""

    data: bytes
    original_size: int
    preset: str

    @property
    def compressed_size(self) -> int:
        return len(self.data)

    @property
    def bytes_saved(self) -> int:
        return max(self.original_size - self.compressed_size, 0)

    @property
    def compression_ratio(self) -> float:
        if self.original_size == 0:
            return 1.0
        return self.compressed_size / self.original_size


def build_ghostscript_command(
    executable: str,
    source: Path,
    output: Path,
    *,
    preset: str = "/ebook",
    compatibility_level: str = "1.4",
) -> list[str]:
    """Construct the Ghostscript ``pdfwrite`` command for *preset*."""

    return [
        executable,
        "-sDEVICE=pdfwrite",
        f"-dCompatibilityLevel={compatibility_level}",
        f"-dPDFSETTINGS={preset}",
        "-dNOPAUSE",
        "-dBATCH",
        "-dSAFER",
        "-dQUIET",
        f"-sOutputFile={output}",
        str(source),
    ]


def compress_pdf(
    data: bytes,
    *,
    settings: Settings | None = None,
    store: TempResourceStore | None = None,
) -> CompressionResult:
    """Re-encode ``data`` with Ghostscript using the configured quality preset."""

    if not data:
        raise ValidationError("Document is empty")

    settings = settings or get_settings()
    store = store or TempResourceStore(settings.temp_dir)
    executable = require_executable(settings.ghostscript_executables, TOOL_NAME)

    def _command(source: Path, output: Path, _scope: ArtifactScope) -> list[str]:
        return build_ghostscript_command(
            executable,
            source,
            output,
            preset=settings.compress_preset,
            compatibility_level=settings.compatibility_level,
        )

    LOGGER.debug("Compressing %d bytes with preset %s", len(data), settings.compress_preset)
    compressed = execute_tool(
        store,
        tool=TOOL_NAME,
        data=data,
        input_name="input.pdf",
        output_name="compressed.pdf",
        build_command=_command,
        timeout=settings.subprocess_timeout_seconds,
    )
    return CompressionResult(data=compressed, original_size=len(data), preset=settings.compress_preset)


__all__ = ["CompressionResult", "build_ghostscript_command", "compress_pdf"]
