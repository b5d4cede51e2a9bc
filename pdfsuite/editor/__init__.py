"""Structural editing operations over :class:`pdfsuite.core.PdfDocument`."""

from __future__ import annotations

from .merge import MIN_MERGE_INPUTS, merge_documents
from .rotate import coerce_angle, rotate_document
from .security import protect_document, unlock_document
from .split import split_by_expression, split_document
from .watermark import build_overlay, text_origin, watermark_document

__all__ = [
    "MIN_MERGE_INPUTS",
    "build_overlay",
    "coerce_angle",
    "merge_documents",
    "protect_document",
    "rotate_document",
    "split_by_expression",
    "split_document",
    "text_origin",
    "unlock_document",
    "watermark_document",
]
