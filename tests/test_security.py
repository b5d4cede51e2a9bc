from __future__ import annotations

from io import BytesIO

import pytest
from pypdf import PdfReader

from conftest import PdfFactory, page_widths
from pdfsuite import (
    AuthError,
    PdfDocument,
    ValidationError,
    protect_document,
    protect_pdf,
    unlock_document,
    unlock_pdf,
)


def test_protect_encrypts_with_the_given_password(sample_pdf: bytes) -> None:
    protected = protect_pdf(sample_pdf, "secret")

    reader = PdfReader(BytesIO(protected))
    assert reader.is_encrypted is True
    assert reader.decrypt("secret") != 0
    assert len(reader.pages) == 5


def test_protect_rejects_empty_password(sample_pdf: bytes) -> None:
    with pytest.raises(ValidationError):
        protect_document(PdfDocument.from_bytes(sample_pdf), "")


def test_protect_then_unlock_round_trip(sample_pdf: bytes) -> None:
    protected = protect_pdf(sample_pdf, "secret")

    unlocked = unlock_pdf(protected, "secret")

    reader = PdfReader(BytesIO(unlocked))
    assert reader.is_encrypted is False
    assert page_widths(unlocked) == page_widths(sample_pdf)
    assert reader.metadata.get("/Title") == "Sample"


def test_unlock_with_wrong_password_raises_auth_error(sample_pdf: bytes) -> None:
    protected = protect_pdf(sample_pdf, "secret")

    with pytest.raises(AuthError):
        unlock_pdf(protected, "wrong")


def test_unlock_without_password_raises_auth_error(sample_pdf: bytes) -> None:
    protected = protect_pdf(sample_pdf, "secret")

    with pytest.raises(AuthError):
        unlock_document(protected)


def test_unlock_with_password_on_plain_document_raises_auth_error(sample_pdf: bytes) -> None:
    with pytest.raises(AuthError):
        unlock_pdf(sample_pdf, "secret")


def test_unlock_plain_document_without_password_reserialises(pdf_factory: PdfFactory) -> None:
    source = pdf_factory([10, 20])

    assert page_widths(unlock_pdf(source)) == [10, 20]
