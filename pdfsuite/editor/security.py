"""Password protection helpers for :mod:`pdfsuite.editor`."""

from __future__ import annotations

from ..core.document import PdfDocument
from ..core.utils import get_logger
from ..exceptions import AuthError, ValidationError

LOGGER = get_logger("pdfsuite.editor.security")


def protect_document(document: PdfDocument, password: str | None) -> bytes:
    """Serialise ``document`` encrypted with ``password``.

    The same value is used as user and owner password, so it both opens and
    administers the result.
    """

    if not password:
        raise ValidationError("A non-empty password is required")

    LOGGER.debug("Encrypting PDF with %d page(s)", document.page_count)
    return document.to_bytes(password=password)


def unlock_document(data: bytes, password: str | None = None) -> PdfDocument:
    """Open ``data`` with ``password`` and return a document that serialises unencrypted.

    Raises:
        AuthError: If the password does not open an encrypted PDF, if no
            password is given for a PDF that needs one, or if a password is
            given for a PDF that is not encrypted.
        StructuralError: If ``data`` is not a readable PDF.
    """

    document = PdfDocument.from_bytes(data, password=password or None)
    if password and not document.was_encrypted:
        raise AuthError("Failed to unlock PDF: the document is not encrypted")

    LOGGER.debug("Unlocked PDF with %d page(s)", document.page_count)
    return document


__all__ = ["protect_document", "unlock_document"]
