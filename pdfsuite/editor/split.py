"""Page extraction for :mod:`pdfsuite.editor`."""

from __future__ import annotations

from ..core.document import PdfDocument
from ..core.ranges import PageRange, require_page_range
from ..core.utils import get_logger
from ..exceptions import EmptyPageRangeError

LOGGER = get_logger("pdfsuite.editor.split")


def split_document(document: PdfDocument, page_range: PageRange) -> PdfDocument:
    """Return a document with the pages at ``page_range`` in ascending index order.

    Token order of the original expression is not preserved: ``"5,1-2"``
    yields pages 1, 2 and 5.
    """

    if not page_range:
        raise EmptyPageRangeError(None, document.page_count)

    indices = sorted(set(page_range))
    LOGGER.debug("Extracting page indices %s of %d", indices, document.page_count)
    return document.extract(indices)


def split_by_expression(document: PdfDocument, expression: str | None) -> PdfDocument:
    """Parse ``expression`` against ``document`` and extract the selected pages."""

    return split_document(document, require_page_range(expression, document.page_count))


__all__ = ["split_document", "split_by_expression"]
