"""Exception hierarchy shared by every :mod:`pdfsuite` operation."""

from __future__ import annotations

from typing import Sequence


class PdfSuiteError(Exception):
    """Base exception for all errors raised by :mod:`pdfsuite`."""


class ValidationError(PdfSuiteError):
    """Raised when a required parameter is missing, empty or out of range."""


class EmptyPageRangeError(ValidationError):
    """Raised when a page range expression selects no pages."""

    def __init__(self, expression: str | None, page_count: int) -> None:
        self.expression = expression
        self.page_count = page_count
        super().__init__(
            f"Page range {expression!r} selects no pages of a {page_count}-page document"
        )


class AuthError(PdfSuiteError):
    """Raised when an encrypted PDF cannot be opened with the supplied password."""


class StructuralError(PdfSuiteError):
    """Raised when input bytes cannot be read or written as a PDF document."""


class SubprocessError(PdfSuiteError):
    """Raised when an external tool is unavailable, times out or exits non-zero.

    The message stays generic; captured diagnostics are only logged.
    """

    def __init__(
        self,
        message: str,
        *,
        command: Sequence[str] | None = None,
        returncode: int | None = None,
    ) -> None:
        super().__init__(message)
        self.command = list(command) if command else []
        self.returncode = returncode


class ResourceError(PdfSuiteError):
    """Raised when a temporary artifact cannot be created, read or written."""


__all__ = [
    "PdfSuiteError",
    "ValidationError",
    "EmptyPageRangeError",
    "AuthError",
    "StructuralError",
    "SubprocessError",
    "ResourceError",
]
