"""Document model, page range parsing and shared helpers."""

from __future__ import annotations

from .document import DocumentInfo, PageBox, PdfDocument, describe_document, normalize_rotation
from .ranges import PageRange, parse_page_range, require_page_range
from .utils import configure_logging, get_logger

__all__ = [
    "DocumentInfo",
    "PageBox",
    "PageRange",
    "PdfDocument",
    "configure_logging",
    "describe_document",
    "get_logger",
    "normalize_rotation",
    "parse_page_range",
    "require_page_range",
]
