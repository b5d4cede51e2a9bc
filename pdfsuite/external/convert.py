"""LibreOffice backed document format conversion."""

from __future__ import annotations

import dataclasses
import re
from pathlib import Path

from ..config import Settings, get_settings
from ..core.utils import get_logger, safe_filename
from ..exceptions import ValidationError
from .runner import require_executable
from .tempstore import ArtifactScope, TempResourceStore
from .transform import execute_tool

LOGGER = get_logger("pdfsuite.external.convert")

TOOL_NAME = "LibreOffice"

_EXTENSION = re.compile(r"^[A-Za-z0-9]+$")


@dataclasses.dataclass(slots=True)
class ConversionResult:
    """Converted file contents and the name to offer for download."""

    data: bytes
    filename: str
    target_format: str


def target_extension(target_format: str | None) -> str:
    """Return the file extension LibreOffice uses for ``target_format``.

    ``--convert-to`` accepts an optional filter after a colon, e.g.
    ``"pdf:writer_pdf_Export"``; only the part before it names the output.
    """

    if target_format is None or not target_format.strip():
        raise ValidationError("An output format is required")
    extension = target_format.strip().split(":", 1)[0].lower()
    if not _EXTENSION.match(extension):
        raise ValidationError(f"Unsupported output format: {target_format!r}")
    return extension


def build_soffice_command(
    executable: str,
    source: Path,
    output_dir: Path,
    target_format: str,
    *,
    profile_dir: Path | None = None,
) -> list[str]:
    """Construct a headless LibreOffice conversion command."""

    command = [executable]
    if profile_dir is not None:
        command.append(f"-env:UserInstallation={profile_dir.resolve().as_uri()}")
    command.extend(
        [
            "--headless",
            "--nologo",
            "--nolockcheck",
            "--nodefault",
            "--nofirststartwizard",
            "--convert-to",
            target_format,
            "--outdir",
            str(output_dir),
            str(source),
        ]
    )
    return command


def convert_document(
    data: bytes,
    filename: str | None,
    target_format: str | None,
    *,
    settings: Settings | None = None,
    store: TempResourceStore | None = None,
) -> ConversionResult:
    """Convert ``data`` to ``target_format`` with LibreOffice.

    The input is staged under its original file name so the output is named
    ``<original base name>.<extension>``.
    """

    extension = target_extension(target_format)
    if not data:
        raise ValidationError("Document is empty")

    settings = settings or get_settings()
    store = store or TempResourceStore(settings.temp_dir)
    executable = require_executable(settings.soffice_executables, TOOL_NAME)

    input_name = safe_filename(filename, "document")
    output_name = f"{Path(input_name).stem or 'document'}.{extension}"

    def _command(source: Path, output: Path, scope: ArtifactScope) -> list[str]:
        return build_soffice_command(
            executable,
            source,
            output.parent,
            target_format.strip(),
            profile_dir=scope.directory("profile"),
        )

    LOGGER.debug("Converting %s to %s", input_name, extension)
    converted = execute_tool(
        store,
        tool=TOOL_NAME,
        data=data,
        input_name=input_name,
        output_name=output_name,
        build_command=_command,
        timeout=settings.subprocess_timeout_seconds,
        input_subdir="in",
        output_subdir="out",
    )
    return ConversionResult(data=converted, filename=output_name, target_format=extension)


__all__ = ["ConversionResult", "build_soffice_command", "convert_document", "target_extension"]
