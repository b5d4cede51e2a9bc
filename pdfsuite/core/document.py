"""In-memory PDF document model built on :mod:`pypdf`.

:class:`PdfDocument` wraps a :class:`pypdf.PdfWriter` so that editing
operations can read page geometry and rotation, move pages between
documents, stamp overlays and finally serialise the result back to bytes,
optionally encrypted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from io import BytesIO
from typing import Iterable, Iterator, Mapping, Sequence

from pypdf import PageObject, PdfReader, PdfWriter

from ..exceptions import AuthError, StructuralError, ValidationError
from .utils import get_logger

LOGGER = get_logger("pdfsuite.core.document")

VALID_ROTATIONS = (0, 90, 180, 270)


@dataclass(frozen=True)
class PageBox:
    """Unrotated media box of a page, in PDF points."""

    left: float
    bottom: float
    width: float
    height: float


@dataclass
class DocumentInfo:
    """Summary of a PDF used by the ``info`` operation."""

    page_count: int
    encrypted: bool
    rotations: list[int] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)


def normalize_rotation(angle: int) -> int:
    return int(angle) % 360


def _string_metadata(metadata: Mapping[object, object] | None) -> dict[str, str]:
    if not metadata:
        return {}
    return {
        key: str(value)
        for key, value in metadata.items()
        if isinstance(key, str) and value is not None
    }


def _open_reader(data: bytes, password: str | None) -> tuple[PdfReader, bool]:
    if not data:
        raise ValidationError("Document is empty")

    try:
        reader = PdfReader(BytesIO(data))
    except Exception as exc:  # pypdf raises a variety of parse errors
        raise StructuralError("Unable to read PDF document") from exc

    encrypted = bool(reader.is_encrypted)
    if encrypted:
        try:
            status = reader.decrypt(password or "")
        except Exception as exc:  # pragma: no cover - decrypt errors vary
            raise AuthError("Failed to decrypt PDF") from exc
        if status == 0:
            if password:
                raise AuthError("Incorrect password for encrypted PDF")
            raise AuthError("PDF is encrypted and requires a password")

    try:
        len(reader.pages)
    except Exception as exc:
        raise StructuralError("Unable to read the page tree of the PDF document") from exc

    return reader, encrypted


class PdfDocument:
    """Mutable, ordered sequence of PDF pages."""

    def __init__(self, writer: PdfWriter, *, was_encrypted: bool = False) -> None:
        self._writer = writer
        self.was_encrypted = was_encrypted

    # -- construction -------------------------------------------------------

    @classmethod
    def empty(cls) -> "PdfDocument":
        return cls(PdfWriter())

    @classmethod
    def from_bytes(cls, data: bytes, *, password: str | None = None) -> "PdfDocument":
        """Load ``data`` into a new document.

        Raises:
            ValidationError: If ``data`` is empty.
            StructuralError: If ``data`` is not a readable PDF.
            AuthError: If the PDF is encrypted and ``password`` (or the empty
                user password) does not open it.
        """

        reader, encrypted = _open_reader(data, password)

        writer = PdfWriter()
        try:
            writer.clone_reader_document_root(reader)
        except Exception as exc:
            raise StructuralError("Unable to copy PDF document structure") from exc

        metadata = _string_metadata(reader.metadata)
        if metadata:
            writer.add_metadata(metadata)

        LOGGER.debug("Loaded PDF with %d page(s) (encrypted=%s)", len(writer.pages), encrypted)
        return cls(writer, was_encrypted=encrypted)

    # -- inspection ---------------------------------------------------------

    @property
    def page_count(self) -> int:
        return len(self._writer.pages)

    @property
    def pages(self) -> Sequence[PageObject]:
        return self._writer.pages

    def __iter__(self) -> Iterator[PageObject]:
        return iter(self._writer.pages)

    def __len__(self) -> int:
        return self.page_count

    @property
    def metadata(self) -> dict[str, str]:
        return _string_metadata(self._writer.metadata)

    def _page(self, index: int) -> PageObject:
        if not 0 <= index < self.page_count:
            raise IndexError(f"Page index {index} out of range for {self.page_count} page(s)")
        return self._writer.pages[index]

    def rotation(self, index: int) -> int:
        return normalize_rotation(self._page(index).rotation)

    def rotations(self) -> list[int]:
        return [normalize_rotation(page.rotation) for page in self._writer.pages]

    def page_box(self, index: int) -> PageBox:
        box = self._page(index).mediabox
        return PageBox(
            left=float(box.left),
            bottom=float(box.bottom),
            width=float(box.width),
            height=float(box.height),
        )

    # -- mutation -----------------------------------------------------------

    def set_rotation(self, index: int, angle: int) -> None:
        angle = normalize_rotation(angle)
        if angle not in VALID_ROTATIONS:
            raise ValidationError(f"Rotation must be a multiple of 90 degrees, got {angle}")
        self._page(index).rotation = angle

    def extract(self, indices: Iterable[int]) -> "PdfDocument":
        """Return a new document holding copies of the pages at ``indices``, in order."""

        target = PdfWriter()
        for index in indices:
            target.add_page(self._page(index))
        metadata = self.metadata
        if metadata:
            target.add_metadata(metadata)
        return PdfDocument(target)

    def append(self, other: "PdfDocument") -> None:
        for page in other.pages:
            self._writer.add_page(page)

    def stamp(self, index: int, overlay: PageObject) -> None:
        """Draw ``overlay`` on top of the existing content of page ``index``."""

        self._page(index).merge_page(overlay)

    def add_metadata(self, metadata: Mapping[str, str]) -> None:
        if metadata:
            self._writer.add_metadata(dict(metadata))

    def add_bookmark(self, title: str, page_index: int) -> None:
        self._writer.add_outline_item(title, page_index)

    # -- serialisation ------------------------------------------------------

    def to_bytes(self, *, password: str | None = None) -> bytes:
        """Serialise the document, encrypting it when ``password`` is given.

        The password is applied as both the user and the owner password.
        """

        if password:
            try:
                self._writer.encrypt(user_password=password, owner_password=password)
            except Exception as exc:  # pragma: no cover - encryption errors vary
                raise StructuralError("Failed to encrypt PDF") from exc

        buffer = BytesIO()
        try:
            self._writer.write(buffer)
        except Exception as exc:  # pragma: no cover - pypdf write errors vary
            raise StructuralError("Unable to serialise PDF document") from exc
        return buffer.getvalue()


def describe_document(data: bytes, *, password: str | None = None) -> DocumentInfo:
    """Return page count, encryption state, rotations and metadata for ``data``."""

    document = PdfDocument.from_bytes(data, password=password)
    return DocumentInfo(
        page_count=document.page_count,
        encrypted=document.was_encrypted,
        rotations=document.rotations(),
        metadata=document.metadata,
    )


__all__ = [
    "PdfDocument",
    "PageBox",
    "DocumentInfo",
    "VALID_ROTATIONS",
    "normalize_rotation",
    "describe_document",
]
