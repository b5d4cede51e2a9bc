"""Page rotation for :mod:`pdfsuite.editor`."""

from __future__ import annotations

from ..core.document import PdfDocument, normalize_rotation
from ..core.utils import get_logger
from ..exceptions import ValidationError

LOGGER = get_logger("pdfsuite.editor.rotate")


def coerce_angle(value: object) -> int:
    """Convert a user supplied angle into an integer multiple of 90."""

    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("A rotation angle is required")
    if isinstance(value, bool):
        raise ValidationError(f"Rotation angle must be an integer, got {value!r}")
    try:
        angle = int(str(value).strip()) if isinstance(value, str) else int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Rotation angle must be an integer, got {value!r}") from exc
    if angle % 90:
        raise ValidationError(f"Rotation angle must be a multiple of 90 degrees, got {angle}")
    return angle


def rotate_document(document: PdfDocument, delta: object) -> PdfDocument:
    """Rotate every page of ``document`` by ``delta`` degrees in place and return it.

    Each page ends up at ``(current + delta) mod 360``.
    """

    angle = coerce_angle(delta)
    for index in range(document.page_count):
        document.set_rotation(index, normalize_rotation(document.rotation(index) + angle))
    LOGGER.debug("Rotated %d page(s) by %d degrees", document.page_count, angle)
    return document


__all__ = ["coerce_angle", "rotate_document"]
