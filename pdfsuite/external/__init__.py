"""Transforms delegated to external programs and their temporary artifacts."""

from __future__ import annotations

from .compress import CompressionResult, build_ghostscript_command, compress_pdf
from .convert import ConversionResult, build_soffice_command, convert_document, target_extension
from .runner import require_executable, run_subprocess, which
from .tempstore import ArtifactScope, TempArtifact, TempResourceStore
from .transform import execute_tool

__all__ = [
    "ArtifactScope",
    "CompressionResult",
    "ConversionResult",
    "TempArtifact",
    "TempResourceStore",
    "build_ghostscript_command",
    "build_soffice_command",
    "compress_pdf",
    "convert_document",
    "execute_tool",
    "require_executable",
    "run_subprocess",
    "target_extension",
    "which",
]
