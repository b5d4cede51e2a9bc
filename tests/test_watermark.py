from __future__ import annotations

from io import BytesIO

import pytest
from pypdf import PdfReader
from reportlab.pdfbase.pdfmetrics import stringWidth

from conftest import PdfFactory, page_rotations, page_widths
from pdfsuite import PdfDocument, Settings, ValidationError, WatermarkStyle, watermark_document, watermark_pdf
from pdfsuite.core.document import PageBox
from pdfsuite.editor.watermark import text_origin


def test_text_origin_centres_using_rendered_width() -> None:
    style = WatermarkStyle()
    box = PageBox(left=0, bottom=0, width=600, height=800)

    x, y = text_origin(box, "DRAFT", style)

    expected_width = stringWidth("DRAFT", "Helvetica-Bold", 50)
    assert x == pytest.approx(300 - expected_width / 2)
    assert y == pytest.approx(400 - 25)


def test_text_origin_honours_box_offset() -> None:
    style = WatermarkStyle(font_size=20)
    box = PageBox(left=10, bottom=30, width=200, height=100)

    x, y = text_origin(box, "A", style)

    assert x == pytest.approx(10 + 100 - stringWidth("A", "Helvetica-Bold", 20) / 2)
    assert y == pytest.approx(30 + 50 - 10)


def test_default_style_matches_fixed_appearance() -> None:
    style = Settings().watermark_style()

    assert style == WatermarkStyle("Helvetica-Bold", 50, (0.5, 0.5, 0.5), 0.3)


def test_watermark_stamps_every_page(pdf_factory: PdfFactory) -> None:
    result = watermark_pdf(pdf_factory([400, 500], rotations=[0, 90]), "CONFIDENTIAL")

    reader = PdfReader(BytesIO(result))
    assert len(reader.pages) == 2
    for page in reader.pages:
        assert "CONFIDENTIAL" in page.extract_text()
    assert page_widths(result) == [400, 500]
    assert page_rotations(result) == [0, 90]


def test_watermark_applies_opacity(pdf_factory: PdfFactory) -> None:
    result = watermark_pdf(pdf_factory([400]), "DRAFT")

    page = PdfReader(BytesIO(result)).pages[0]
    states = page["/Resources"].get_object()["/ExtGState"].get_object()
    alphas = [float(state.get_object().get("/ca", 1)) for state in states.values()]
    assert any(alpha == pytest.approx(0.3) for alpha in alphas)


@pytest.mark.parametrize("text", [None, "", "   "])
def test_watermark_rejects_blank_text(sample_pdf: bytes, text: str | None) -> None:
    with pytest.raises(ValidationError):
        watermark_document(PdfDocument.from_bytes(sample_pdf), text)
