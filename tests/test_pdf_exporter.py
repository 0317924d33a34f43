import fitz  # PyMuPDF
import pytest

from inkmark.core.annotations import FreehandAnnotation, HighlightAnnotation, TextAnnotation
from inkmark.core.document import PDFDocumentReader, PDFExporter
from inkmark.core.errors import InvalidGeometry, ParseFailure
from inkmark.core.geometry import Point


def _drawings(data: bytes):
    doc = fitz.open(stream=data, filetype="pdf")
    try:
        return doc[0].get_drawings()
    finally:
        doc.close()


def _highlight(start, end, color="#FFFF00"):
    return HighlightAnnotation(page=1, start=Point(*start), end=Point(*end), color=color)


class TestHighlightExport:

    def test_rectangle_position_and_style(self, square_pdf):
        data = PDFExporter().export(square_pdf, [_highlight((10, 10), (50, 40))], 100, 100)

        (drawing,) = _drawings(data)
        assert tuple(drawing["rect"]) == pytest.approx((10, 10, 50, 40))
        assert drawing["fill"] == pytest.approx((1.0, 1.0, 0.0))
        assert drawing["fill_opacity"] == pytest.approx(0.35, abs=0.01)

    def test_corner_order_does_not_matter(self, square_pdf):
        exporter = PDFExporter()
        forward = _drawings(exporter.export(square_pdf, [_highlight((10, 10), (50, 40))], 100, 100))
        backward = _drawings(exporter.export(square_pdf, [_highlight((50, 40), (10, 10))], 100, 100))

        assert tuple(forward[0]["rect"]) == pytest.approx(tuple(backward[0]["rect"]))
        assert forward[0]["fill"] == backward[0]["fill"]

    def test_letterboxed_viewport(self, square_pdf):
        # Page is shown 100 wide, centered in a 200 wide viewport
        data = PDFExporter().export(square_pdf, [_highlight((50, 0), (150, 100))], 200, 100)

        (drawing,) = _drawings(data)
        assert tuple(drawing["rect"]) == pytest.approx((0, 0, 100, 100))

    def test_custom_opacity(self, square_pdf):
        exporter = PDFExporter(highlight_opacity=0.8)
        (drawing,) = _drawings(exporter.export(square_pdf, [_highlight((0, 0), (5, 5))], 100, 100))
        assert drawing["fill_opacity"] == pytest.approx(0.8, abs=0.01)


class TestFreehandExport:

    def test_single_point_draws_nothing(self, square_pdf):
        ann = FreehandAnnotation(page=1, points=(Point(20, 20),), color="#000000")
        data = PDFExporter().export(square_pdf, [ann], 100, 100)
        assert _drawings(data) == []

    def test_segments_and_scaled_thickness(self, square_pdf):
        ann = FreehandAnnotation(
            page=1,
            points=(Point(60, 10), Point(80, 30), Point(140, 90)),
            color="#FF0000",
            stroke_width=2.0,
        )
        data = PDFExporter().export(square_pdf, [ann], 200, 100)

        (drawing,) = _drawings(data)
        lines = [item for item in drawing["items"] if item[0] == "l"]
        assert len(lines) == 2
        assert tuple(drawing["rect"]) == pytest.approx((10, 10, 90, 90))
        assert drawing["color"] == pytest.approx((1.0, 0.0, 0.0))
        # 2 * page width / viewport width
        assert drawing["width"] == pytest.approx(1.0)


class TestTextExport:

    def test_text_position_and_size(self, square_pdf):
        ann = TextAnnotation(page=1, position=Point(60, 50), text="Hello", color="#0000FF")
        data = PDFExporter().export(square_pdf, [ann], 200, 100)

        doc = fitz.open(stream=data, filetype="pdf")
        try:
            page = doc[0]
            assert "Hello" in page.get_text()
            spans = [
                span
                for block in page.get_text("dict")["blocks"]
                for line in block.get("lines", [])
                for span in line["spans"]
            ]
        finally:
            doc.close()

        (span,) = spans
        assert span["size"] == pytest.approx(6.0)
        assert tuple(span["origin"]) == pytest.approx((10, 50), abs=0.5)


class TestExportDocument:

    def test_no_annotations_returns_source_unchanged(self, square_pdf):
        assert PDFExporter().export(square_pdf, [], 100, 100) == square_pdf

    def test_other_pages_are_skipped(self, square_pdf):
        ann = HighlightAnnotation(page=2, start=Point(0, 0), end=Point(5, 5), color="#FF0000")
        assert PDFExporter().export(square_pdf, [ann], 100, 100) == square_pdf

    def test_stacking_follows_sequence_order(self, square_pdf):
        annotations = [
            _highlight((10, 10), (50, 40)),
            FreehandAnnotation(page=1, points=(Point(0, 0), Point(90, 90)), color="#000000"),
        ]
        drawings = _drawings(PDFExporter().export(square_pdf, annotations, 100, 100))
        assert [d["fill"] is not None for d in drawings] == [True, False]

    def test_output_keeps_pages(self, letter_pdf):
        data = PDFExporter().export(letter_pdf, [_highlight((0, 0), (10, 10))], 612, 792)
        reader = PDFDocumentReader()
        assert reader.load_bytes(data) == 1
        assert reader.get_page_size(1) == pytest.approx((612, 792))
        reader.close_document()

    def test_invalid_bytes_raise_parse_failure(self):
        with pytest.raises(ParseFailure):
            PDFExporter().export(b"not a pdf", [], 100, 100)

    def test_zero_viewport_raises_invalid_geometry(self, square_pdf):
        with pytest.raises(InvalidGeometry):
            PDFExporter().export(square_pdf, [_highlight((0, 0), (1, 1))], 0, 100)
