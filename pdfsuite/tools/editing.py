"""Plugins exposing the in-memory editing operations through the registry."""

from __future__ import annotations

from ..core.document import PdfDocument
from ..core.utils import get_logger, timestamped_filename
from ..editor import (
    MIN_MERGE_INPUTS,
    merge_documents,
    protect_document,
    rotate_document,
    split_by_expression,
    unlock_document,
    watermark_document,
)
from ..exceptions import ValidationError
from .common.interfaces import BaseTool, OperationKind, TransformResult
from .common.pipeline import register_tool

LOGGER = get_logger("pdfsuite.tools.editing")


@register_tool(OperationKind.MERGE)
class MergeTool(BaseTool):
    name = "merge"

    def run(self) -> TransformResult:
        request = self.request
        if len(request.inputs) < MIN_MERGE_INPUTS:
            raise ValidationError(f"At least {MIN_MERGE_INPUTS} PDFs are required to merge")

        documents = [PdfDocument.from_bytes(item.data) for item in request.inputs]
        merged = merge_documents(documents, bookmarks=request.params.get("bookmarks"))
        return TransformResult(merged.to_bytes(), timestamped_filename("merged"))


@register_tool(OperationKind.SPLIT)
class SplitTool(BaseTool):
    name = "split"

    def run(self) -> TransformResult:
        expression = self.request.params.get("ranges")
        if expression is None or not str(expression).strip():
            raise ValidationError("No page ranges provided")

        document = self.request.load_document()
        extracted = split_by_expression(document, str(expression))
        return TransformResult(extracted.to_bytes(), timestamped_filename("split"))


@register_tool(OperationKind.ROTATE)
class RotateTool(BaseTool):
    name = "rotate"

    def run(self) -> TransformResult:
        angle = self.request.params.get("angle")
        if angle is None or (isinstance(angle, str) and not angle.strip()):
            raise ValidationError("No rotation angle provided")

        document = rotate_document(self.request.load_document(), angle)
        return TransformResult(document.to_bytes(), timestamped_filename("rotated"))


@register_tool(OperationKind.PROTECT)
class ProtectTool(BaseTool):
    name = "protect"

    def run(self) -> TransformResult:
        password = self.request.params.get("password")
        if not password:
            raise ValidationError("No password provided")

        data = protect_document(self.request.load_document(), password)
        return TransformResult(data, timestamped_filename("protected"))


@register_tool(OperationKind.UNLOCK)
class UnlockTool(BaseTool):
    name = "unlock"

    def run(self) -> TransformResult:
        source = self.request.single_input()
        document = unlock_document(source.data, self.request.params.get("password"))
        return TransformResult(document.to_bytes(), timestamped_filename("unlocked"))


@register_tool(OperationKind.WATERMARK)
class WatermarkTool(BaseTool):
    name = "watermark"

    def run(self) -> TransformResult:
        text = self.request.params.get("text")
        if text is None or not str(text).strip():
            raise ValidationError("No watermark text provided")

        style = self.request.resolved_settings().watermark_style()
        document = watermark_document(self.request.load_document(), str(text), style=style)
        return TransformResult(document.to_bytes(), timestamped_filename("watermarked"))
