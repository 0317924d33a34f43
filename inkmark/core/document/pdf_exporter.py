import logging
from typing import Sequence

import fitz  # PyMuPDF

from inkmark.core.annotations import (
    Annotation,
    AnnotationType,
    FreehandAnnotation,
    HighlightAnnotation,
    TextAnnotation,
)
from inkmark.core.errors import SerializeFailure
from inkmark.core.geometry import Point, hex_to_rgb
from inkmark.core.projection import FitTransform, fit_scale

from .pdf_reader import open_pdf_bytes, page_size

logger = logging.getLogger(__name__)


class PDFExporter:
    """Burns viewport-space annotations into a copy of a PDF."""

    def __init__(self, highlight_opacity: float = 0.35, base_font_size: float = 12.0,
                 target_page: int = 1):
        self.highlight_opacity = highlight_opacity
        self.base_font_size = base_font_size
        self.target_page = target_page

    def export(self, source_bytes: bytes, annotations: Sequence[Annotation],
               viewport_width: float, viewport_height: float) -> bytes:
        """
        Render annotations onto the target page and serialize the result.

        Args:
            source_bytes: Original PDF file contents
            annotations: Annotations in stacking order (last drawn on top)
            viewport_width: Overlay width at export time
            viewport_height: Overlay height at export time

        Returns:
            Bytes of the annotated PDF. With nothing to draw the source bytes
            are returned unchanged.

        Raises:
            ParseFailure: If the source is not a readable PDF
            InvalidGeometry: If the viewport or page size is degenerate
            SerializeFailure: If the modified document cannot be written
        """
        doc = open_pdf_bytes(source_bytes)
        try:
            page = doc[self.target_page - 1]
            page_width, page_height = page_size(page)

            scale = fit_scale(viewport_width, viewport_height, page_width, page_height)
            transform = FitTransform.fit(viewport_width, viewport_height,
                                         page_width, page_height, scale)
            width_ratio = page_width / viewport_width

            drawn = 0
            for ann in annotations:
                if ann.page != self.target_page:
                    logger.warning("Skipping %s annotation on page %d; only page %d is exported",
                                   ann.annotation_type.value, ann.page, self.target_page)
                    continue
                self._add_annotation_to_page(page, ann, transform, width_ratio)
                drawn += 1

            if drawn == 0:
                return source_bytes

            try:
                data = doc.tobytes(garbage=4, deflate=True)
            except Exception as e:
                raise SerializeFailure(f"Could not write annotated PDF: {e}") from e

            logger.info("Exported %d annotation(s) onto page %d", drawn, self.target_page)
            return data
        finally:
            doc.close()

    def _add_annotation_to_page(self, page: fitz.Page, annotation: Annotation,
                                transform: FitTransform, width_ratio: float) -> None:
        """Draw a single annotation on the page."""
        color = hex_to_rgb(annotation.color)

        if annotation.annotation_type == AnnotationType.HIGHLIGHT:
            self._draw_highlight(page, annotation, transform, color)
        elif annotation.annotation_type == AnnotationType.TEXT:
            self._draw_text(page, annotation, transform, color, width_ratio)
        elif annotation.annotation_type == AnnotationType.FREEHAND:
            self._draw_path(page, annotation, transform, color, width_ratio)
        else:
            raise TypeError(f"Unhandled annotation type: {annotation.annotation_type!r}")

    def _draw_highlight(self, page: fitz.Page, annotation: HighlightAnnotation,
                        transform: FitTransform, color) -> None:
        start = transform.project(annotation.start)
        end = transform.project(annotation.end)

        x0, y0 = min(start.x, end.x), min(start.y, end.y)
        x1, y1 = x0 + abs(end.x - start.x), y0 + abs(end.y - start.y)

        rect = fitz.Rect(_to_page(page, Point(x0, y0)), _to_page(page, Point(x1, y1)))
        rect.normalize()

        shape = page.new_shape()
        shape.draw_rect(rect)
        shape.finish(color=None, fill=color, fill_opacity=self.highlight_opacity, width=0)
        shape.commit()

    def _draw_text(self, page: fitz.Page, annotation: TextAnnotation,
                   transform: FitTransform, color, width_ratio: float) -> None:
        position = _to_page(page, transform.project(annotation.position))
        page.insert_text(position, annotation.text,
                         fontsize=self.base_font_size * width_ratio,
                         color=color)

    def _draw_path(self, page: fitz.Page, annotation: FreehandAnnotation,
                   transform: FitTransform, color, width_ratio: float) -> None:
        # A lone point has no segment to draw
        if len(annotation.points) < 2:
            return

        points = [_to_page(page, transform.project(p)) for p in annotation.points]

        shape = page.new_shape()
        for start, end in zip(points, points[1:]):
            shape.draw_line(start, end)
        shape.finish(color=color, width=annotation.stroke_width * width_ratio,
                     closePath=False)
        shape.commit()


def _to_page(page: fitz.Page, point: Point) -> fitz.Point:
    """PDF space (origin bottom-left) to PyMuPDF page space (origin top-left)."""
    return fitz.Point(point.x, point.y) * page.transformation_matrix
