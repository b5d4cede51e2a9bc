"""PDF merge, split, rotate, watermark, password and conversion toolkit."""

from __future__ import annotations

from typing import Iterable, Sequence

from .config import Settings, WatermarkStyle, get_settings
from .core import (
    DocumentInfo,
    PageRange,
    PdfDocument,
    describe_document,
    parse_page_range,
    require_page_range,
)
from .editor import (
    merge_documents,
    protect_document,
    rotate_document,
    split_by_expression,
    split_document,
    unlock_document,
    watermark_document,
)
from .exceptions import (
    AuthError,
    EmptyPageRangeError,
    PdfSuiteError,
    ResourceError,
    StructuralError,
    SubprocessError,
    ValidationError,
)
from .external import TempArtifact, TempResourceStore, compress_pdf, convert_document
from .tools import load_builtin_plugins
from .tools.common import (
    InputFile,
    OperationKind,
    TransformRequest,
    TransformResult,
    register_tool,
    registry,
    run_transform,
)

load_builtin_plugins()

__version__ = "0.1.0"

__all__ = [
    "AuthError",
    "DocumentInfo",
    "EmptyPageRangeError",
    "InputFile",
    "OperationKind",
    "PageRange",
    "PdfDocument",
    "PdfSuiteError",
    "ResourceError",
    "Settings",
    "StructuralError",
    "SubprocessError",
    "TempArtifact",
    "TempResourceStore",
    "TransformRequest",
    "TransformResult",
    "ValidationError",
    "WatermarkStyle",
    "compress_pdf",
    "convert_document",
    "describe_document",
    "get_settings",
    "merge_documents",
    "merge_pdfs",
    "parse_page_range",
    "protect_document",
    "protect_pdf",
    "register_tool",
    "registry",
    "require_page_range",
    "rotate_document",
    "rotate_pdf",
    "run_transform",
    "split_by_expression",
    "split_document",
    "split_pdf",
    "unlock_document",
    "unlock_pdf",
    "watermark_document",
    "watermark_pdf",
]


def merge_pdfs(inputs: Iterable[bytes], *, bookmarks: Sequence[str] | None = None) -> bytes:
    """Convenience wrapper around the merge plugin."""

    request = TransformRequest(
        OperationKind.MERGE,
        inputs=[InputFile(data) for data in inputs],
        params={"bookmarks": bookmarks},
    )
    return run_transform(request).data


def split_pdf(data: bytes, ranges: str) -> bytes:
    """Convenience wrapper around the split plugin."""

    request = TransformRequest(OperationKind.SPLIT, inputs=[InputFile(data)], params={"ranges": ranges})
    return run_transform(request).data


def rotate_pdf(data: bytes, angle: int) -> bytes:
    """Convenience wrapper around the rotate plugin."""

    request = TransformRequest(OperationKind.ROTATE, inputs=[InputFile(data)], params={"angle": angle})
    return run_transform(request).data


def protect_pdf(data: bytes, password: str) -> bytes:
    """Convenience wrapper around the protect plugin."""

    request = TransformRequest(
        OperationKind.PROTECT, inputs=[InputFile(data)], params={"password": password}
    )
    return run_transform(request).data


def unlock_pdf(data: bytes, password: str | None = None) -> bytes:
    """Convenience wrapper around the unlock plugin."""

    request = TransformRequest(
        OperationKind.UNLOCK, inputs=[InputFile(data)], params={"password": password}
    )
    return run_transform(request).data


def watermark_pdf(data: bytes, text: str, *, settings: Settings | None = None) -> bytes:
    """Convenience wrapper around the watermark plugin."""

    request = TransformRequest(
        OperationKind.WATERMARK,
        inputs=[InputFile(data)],
        params={"text": text},
        settings=settings,
    )
    return run_transform(request).data
