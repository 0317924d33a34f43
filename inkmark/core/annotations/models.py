"""
Annotation records captured on the overlay surface.

Every annotation stores its geometry in the viewport space that was active
when it was created. Records are immutable once committed.
"""
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Tuple, Union

from inkmark.core.geometry import Point


class AnnotationType(Enum):
    HIGHLIGHT = "highlight"
    FREEHAND = "draw"
    TEXT = "text"


@dataclass(frozen=True)
class HighlightAnnotation:
    """Translucent rectangle spanned by two opposite corners."""
    page: int  # 1-based page index
    start: Point
    end: Point
    color: str  # "#RRGGBB"

    annotation_type: ClassVar[AnnotationType] = AnnotationType.HIGHLIGHT

    def bounds(self) -> Tuple[float, float, float, float]:
        """
        Get the normalized on-screen rectangle.

        Returns:
            Tuple of (left, top, width, height) in viewport space
        """
        left = min(self.start.x, self.end.x)
        top = min(self.start.y, self.end.y)
        width = abs(self.end.x - self.start.x)
        height = abs(self.end.y - self.start.y)
        return (left, top, width, height)


@dataclass(frozen=True)
class FreehandAnnotation:
    """Polyline sampled at pointer-move resolution."""
    page: int
    points: Tuple[Point, ...]
    color: str
    stroke_width: float = 2.0

    annotation_type: ClassVar[AnnotationType] = AnnotationType.FREEHAND

    def __post_init__(self):
        if not self.points:
            raise ValueError("A freehand path needs at least one point")
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "points", tuple(self.points))


@dataclass(frozen=True)
class TextAnnotation:
    """A text note anchored at a single point."""
    page: int
    position: Point
    text: str
    color: str

    annotation_type: ClassVar[AnnotationType] = AnnotationType.TEXT

    def __post_init__(self):
        if not self.text:
            raise ValueError("A text note cannot be empty")


Annotation = Union[HighlightAnnotation, FreehandAnnotation, TextAnnotation]
