from __future__ import annotations

import pytest

from conftest import page_widths
from pdfsuite import (
    EmptyPageRangeError,
    PdfDocument,
    merge_pdfs,
    split_by_expression,
    split_document,
    split_pdf,
)


def test_split_extracts_ranges_in_ascending_order(sample_pdf: bytes) -> None:
    result = split_pdf(sample_pdf, "5,1-2")

    assert page_widths(result) == [101, 102, 105]


def test_split_document_with_parsed_range(sample_pdf: bytes) -> None:
    document = PdfDocument.from_bytes(sample_pdf)

    extracted = split_document(document, (1, 3))

    assert extracted.page_count == 2
    assert page_widths(extracted.to_bytes()) == [102, 104]


@pytest.mark.parametrize("expression", ["", "0,100", "7-9", "b-a"])
def test_split_rejects_empty_selection(sample_pdf: bytes, expression: str) -> None:
    document = PdfDocument.from_bytes(sample_pdf)

    with pytest.raises(EmptyPageRangeError):
        split_by_expression(document, expression)


def test_split_document_rejects_empty_range(sample_pdf: bytes) -> None:
    with pytest.raises(EmptyPageRangeError):
        split_document(PdfDocument.from_bytes(sample_pdf), ())


def test_split_then_merge_restores_page_count(sample_pdf: bytes) -> None:
    parts = [split_pdf(sample_pdf, expression) for expression in ("1-2", "3", "4-5")]

    rebuilt = merge_pdfs(parts)

    assert page_widths(rebuilt) == [101, 102, 103, 104, 105]
