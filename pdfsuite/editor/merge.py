"""Merge functionality for :mod:`pdfsuite.editor`."""

from __future__ import annotations

from typing import Sequence

from ..core.document import PdfDocument
from ..core.utils import get_logger
from ..exceptions import ValidationError

LOGGER = get_logger("pdfsuite.editor.merge")

MIN_MERGE_INPUTS = 2


def merge_documents(
    documents: Sequence[PdfDocument],
    *,
    bookmarks: Sequence[str] | None = None,
) -> PdfDocument:
    """Concatenate ``documents`` into a new document.

    Pages are appended in list order, each document contributing its pages
    in their original order with rotation and content unchanged. Metadata
    of the first document is carried over.

    Args:
        documents: At least two loaded documents.
        bookmarks: Optional outline titles, one per input, each pointing at
            the first page that input contributed. Missing or blank titles
            fall back to ``"Document <n>"``.

    Raises:
        ValidationError: If fewer than two documents are supplied.
    """

    if len(documents) < MIN_MERGE_INPUTS:
        raise ValidationError(f"At least {MIN_MERGE_INPUTS} PDFs are required to merge")

    merged = PdfDocument.empty()
    starts: list[int] = []
    for index, document in enumerate(documents):
        LOGGER.debug("Adding %d page(s) from input %d", document.page_count, index + 1)
        starts.append(merged.page_count)
        merged.append(document)

    merged.add_metadata(documents[0].metadata)

    if bookmarks is not None:
        for index, start in enumerate(starts):
            if start >= merged.page_count:
                continue
            title = bookmarks[index] if index < len(bookmarks) else None
            merged.add_bookmark((title or "").strip() or f"Document {index + 1}", start)

    LOGGER.info("Merged %d PDFs into %d page(s)", len(documents), merged.page_count)
    return merged


__all__ = ["MIN_MERGE_INPUTS", "merge_documents"]
