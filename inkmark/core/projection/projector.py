"""
Viewport to PDF coordinate projection.

The page is assumed to be shown inside the viewport with "contain" semantics:
scaled to the largest size that fits while preserving its aspect ratio, and
centered. Viewport space has its origin at the top-left; PDF space has its
origin at the bottom-left.
"""
import math
from dataclasses import dataclass

from inkmark.core.errors import InvalidGeometry
from inkmark.core.geometry import Point


def _check_dimensions(**dims: float) -> None:
    for name, value in dims.items():
        if not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
            raise InvalidGeometry(f"{name} must be a positive finite number, got {value!r}")


@dataclass(frozen=True)
class FitTransform:
    """
    Letterbox fit of a document page inside a viewport.

    Build with ``FitTransform.fit``; the rendered size and centering offsets
    are computed once and reused for every projected point.
    """
    viewport_width: float
    viewport_height: float
    document_width: float
    document_height: float
    rendered_width: float
    rendered_height: float
    offset_x: float
    offset_y: float
    scale: float = 1.0

    @classmethod
    def fit(cls, viewport_width: float, viewport_height: float,
            document_width: float, document_height: float,
            scale: float = 1.0) -> "FitTransform":
        """
        Compute the contain-fit of a page inside a viewport.

        Args:
            viewport_width: Overlay width in screen units
            viewport_height: Overlay height in screen units
            document_width: Page width in PDF units
            document_height: Page height in PDF units
            scale: Extra multiplier applied to projected coordinates

        Raises:
            InvalidGeometry: If any dimension is zero, negative or not finite
        """
        _check_dimensions(viewport_width=viewport_width,
                          viewport_height=viewport_height,
                          document_width=document_width,
                          document_height=document_height)
        if not math.isfinite(scale):
            raise InvalidGeometry(f"scale must be finite, got {scale!r}")

        viewport_aspect = viewport_width / viewport_height
        document_aspect = document_width / document_height

        if viewport_aspect > document_aspect:
            # Viewport is relatively wider: height constrains the page
            rendered_width = viewport_height * document_aspect
            rendered_height = viewport_height
        else:
            rendered_width = viewport_width
            rendered_height = viewport_width / document_aspect

        if rendered_width <= 0 or rendered_height <= 0:
            raise InvalidGeometry(
                f"Rendered page size collapsed to {rendered_width}x{rendered_height}")

        return cls(
            viewport_width=viewport_width,
            viewport_height=viewport_height,
            document_width=document_width,
            document_height=document_height,
            rendered_width=rendered_width,
            rendered_height=rendered_height,
            offset_x=(viewport_width - rendered_width) / 2,
            offset_y=(viewport_height - rendered_height) / 2,
            scale=scale,
        )

    def project(self, point: Point) -> Point:
        """
        Map a viewport point to PDF space.

        Args:
            point: Point relative to the overlay's top-left corner

        Returns:
            Point in PDF space (origin bottom-left)
        """
        adjusted_x = point.x - self.offset_x
        adjusted_y = point.y - self.offset_y

        x = (adjusted_x / self.rendered_width) * self.document_width * self.scale
        y = self.document_height - (adjusted_y / self.rendered_height) * self.document_height * self.scale
        return Point(x, y)


def project_point(point: Point, viewport_width: float, viewport_height: float,
                  document_width: float, document_height: float,
                  scale: float = 1.0) -> Point:
    """Project a single viewport point into PDF space."""
    transform = FitTransform.fit(viewport_width, viewport_height,
                                 document_width, document_height, scale)
    return transform.project(point)


def fit_scale(viewport_width: float, viewport_height: float,
              page_width: float, page_height: float) -> float:
    """Uniform factor that fits the page inside the viewport."""
    _check_dimensions(viewport_width=viewport_width,
                      viewport_height=viewport_height,
                      page_width=page_width,
                      page_height=page_height)
    return min(viewport_width / page_width, viewport_height / page_height)
