from __future__ import annotations

import pytest

from conftest import PdfFactory, page_widths
from pdfsuite import AuthError, PdfDocument, StructuralError, ValidationError, describe_document


def test_from_bytes_reads_pages_and_metadata(sample_pdf: bytes) -> None:
    document = PdfDocument.from_bytes(sample_pdf)

    assert document.page_count == 5
    assert document.was_encrypted is False
    assert document.metadata.get("/Title") == "Sample"
    assert document.page_box(0).width == 101


def test_from_bytes_rejects_garbage() -> None:
    with pytest.raises(StructuralError):
        PdfDocument.from_bytes(b"definitely not a pdf")


def test_from_bytes_rejects_empty_payload() -> None:
    with pytest.raises(ValidationError):
        PdfDocument.from_bytes(b"")


def test_from_bytes_requires_password_for_encrypted(sample_pdf: bytes) -> None:
    encrypted = PdfDocument.from_bytes(sample_pdf).to_bytes(password="secret")

    with pytest.raises(AuthError):
        PdfDocument.from_bytes(encrypted)

    document = PdfDocument.from_bytes(encrypted, password="secret")
    assert document.was_encrypted is True
    assert document.page_count == 5


def test_extract_keeps_requested_order(sample_pdf: bytes) -> None:
    document = PdfDocument.from_bytes(sample_pdf)
    extracted = document.extract([4, 0])

    assert page_widths(extracted.to_bytes()) == [105, 101]
    assert document.page_count == 5


def test_set_rotation_normalizes_and_validates(pdf_factory: PdfFactory) -> None:
    document = PdfDocument.from_bytes(pdf_factory([100]))

    document.set_rotation(0, -90)
    assert document.rotation(0) == 270

    with pytest.raises(ValidationError):
        document.set_rotation(0, 45)


def test_page_index_out_of_range(sample_pdf: bytes) -> None:
    document = PdfDocument.from_bytes(sample_pdf)

    with pytest.raises(IndexError):
        document.rotation(5)


def test_describe_document_reports_rotations(pdf_factory: PdfFactory) -> None:
    info = describe_document(pdf_factory([100, 120], rotations=[0, 90], title="Info"))

    assert info.page_count == 2
    assert info.encrypted is False
    assert info.rotations == [0, 90]
    assert info.metadata["/Title"] == "Info"
