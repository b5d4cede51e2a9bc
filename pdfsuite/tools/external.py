"""Plugins exposing the external tool transforms through the registry."""

from __future__ import annotations

import mimetypes

from ..core.utils import get_logger, timestamped_filename
from ..exceptions import ValidationError
from ..external import TempResourceStore, compress_pdf, convert_document, target_extension
from .common.interfaces import BaseTool, OperationKind, TransformResult
from .common.pipeline import register_tool

LOGGER = get_logger("pdfsuite.tools.external")


@register_tool(OperationKind.COMPRESS)
class CompressTool(BaseTool):
    name = "compress"

    def run(self) -> TransformResult:
        settings = self.request.resolved_settings()
        source = self.request.single_input()
        result = compress_pdf(
            source.data,
            settings=settings,
            store=TempResourceStore(settings.temp_dir),
        )
        LOGGER.debug(
            "Compressed %d bytes to %d bytes (ratio %.2f)",
            result.original_size,
            result.compressed_size,
            result.compression_ratio,
        )
        return TransformResult(result.data, timestamped_filename("compressed"))


@register_tool(OperationKind.CONVERT)
class ConvertTool(BaseTool):
    name = "convert"

    def run(self) -> TransformResult:
        target_format = self.request.params.get("target_format")
        if target_format is None or not str(target_format).strip():
            raise ValidationError("No output format specified")
        extension = target_extension(str(target_format))

        settings = self.request.resolved_settings()
        source = self.request.single_input()
        result = convert_document(
            source.data,
            source.filename,
            str(target_format),
            settings=settings,
            store=TempResourceStore(settings.temp_dir),
        )
        media_type = mimetypes.guess_type(f"file.{extension}")[0] or "application/octet-stream"
        return TransformResult(result.data, result.filename, media_type)
