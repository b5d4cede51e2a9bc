"""Text watermarking for :mod:`pdfsuite.editor`.

Each page receives a single line of text centred on its unrotated media
box. The overlay is drawn with :mod:`reportlab` on a page of the same size
and merged over the existing content with :mod:`pypdf`.
"""

from __future__ import annotations

from io import BytesIO

from pypdf import PageObject, PdfReader
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen.canvas import Canvas

from ..config import WatermarkStyle
from ..core.document import PageBox, PdfDocument
from ..core.utils import get_logger
from ..exceptions import ValidationError

LOGGER = get_logger("pdfsuite.editor.watermark")


def text_origin(box: PageBox, text: str, style: WatermarkStyle) -> tuple[float, float]:
    """Return the baseline origin that centres ``text`` on ``box``."""

    text_width = stringWidth(text, style.font_name, style.font_size)
    x = box.left + box.width / 2 - text_width / 2
    y = box.bottom + box.height / 2 - style.font_size / 2
    return x, y


def build_overlay(box: PageBox, text: str, style: WatermarkStyle) -> PageObject:
    """Render ``text`` onto a transparent single-page PDF matching ``box``."""

    buffer = BytesIO()
    canvas = Canvas(buffer, pagesize=(box.left + box.width, box.bottom + box.height))
    canvas.setFont(style.font_name, style.font_size)
    red, green, blue = style.color
    canvas.setFillColorRGB(red, green, blue)
    canvas.setFillAlpha(style.opacity)
    x, y = text_origin(box, text, style)
    canvas.drawString(x, y, text)
    canvas.showPage()
    canvas.save()
    return PdfReader(BytesIO(buffer.getvalue())).pages[0]


def watermark_document(
    document: PdfDocument,
    text: str | None,
    *,
    style: WatermarkStyle | None = None,
) -> PdfDocument:
    """Stamp ``text`` over every page of ``document`` in place and return it."""

    if text is None or not text.strip():
        raise ValidationError("Watermark text is required")

    style = style or WatermarkStyle()
    overlays: dict[PageBox, PageObject] = {}
    for index in range(document.page_count):
        box = document.page_box(index)
        overlay = overlays.get(box)
        if overlay is None:
            overlay = overlays[box] = build_overlay(box, text, style)
        document.stamp(index, overlay)

    LOGGER.debug(
        "Watermarked %d page(s) using %s at %spt",
        document.page_count,
        style.font_name,
        style.font_size,
    )
    return document


__all__ = ["build_overlay", "text_origin", "watermark_document"]
