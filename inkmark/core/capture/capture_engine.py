"""
Turns pointer gestures into committed annotations.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from inkmark.core.annotations import (
    AnnotationManager,
    FreehandAnnotation,
    HighlightAnnotation,
    TextAnnotation,
)
from inkmark.core.geometry import Point, normalize_hex_color

from .tools import ToolMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextRequest:
    """Ask the UI for note text at a clicked point."""
    page: int
    position: Point
    color: str


@dataclass
class _PathInProgress:
    color: str
    points: List[Point]


@dataclass
class _HighlightInProgress:
    color: str
    start: Point
    current: Point


class CaptureEngine:
    """
    Gesture state machine for the annotation overlay.

    One gesture is active at a time. Tool and color are passed in when a
    gesture starts and are fixed for that gesture.
    """

    def __init__(self, manager: AnnotationManager, page: int = 1,
                 stroke_width: float = 2.0):
        self.manager = manager
        self.page = page
        self.stroke_width = stroke_width
        self._active: Optional[Union[_PathInProgress, _HighlightInProgress]] = None

    @property
    def is_capturing(self) -> bool:
        return self._active is not None

    def begin_gesture(self, point: Point, tool: ToolMode,
                      color: str) -> Optional[TextRequest]:
        """
        Handle pointer-down.

        Args:
            point: Overlay-local point
            tool: Active tool mode
            color: Active annotation color

        Returns:
            A TextRequest for the text tool, otherwise None
        """
        # A press while a gesture never saw its release finalizes that gesture
        if self._active is not None:
            self.end_gesture()

        if tool == ToolMode.DRAW:
            self._active = _PathInProgress(color=color, points=[point])
        elif tool == ToolMode.HIGHLIGHT:
            self._active = _HighlightInProgress(color=color, start=point, current=point)
        elif tool == ToolMode.TEXT:
            return TextRequest(page=self.page, position=point, color=color)
        elif tool == ToolMode.SELECT:
            pass
        else:
            raise ValueError(f"Unknown tool: {tool!r}")
        return None

    def move_gesture(self, point: Point) -> None:
        """Handle pointer-move; raw samples are kept as-is."""
        active = self._active
        if isinstance(active, _PathInProgress):
            active.points.append(point)
        elif isinstance(active, _HighlightInProgress):
            active.current = point

    def end_gesture(self) -> bool:
        """
        Handle pointer-up and commit the gesture.

        Returns:
            True if an annotation was committed
        """
        active, self._active = self._active, None
        if active is None:
            return False

        try:
            color = normalize_hex_color(active.color)
            if isinstance(active, _PathInProgress):
                if not active.points:
                    return False
                annotation = FreehandAnnotation(
                    page=self.page,
                    points=tuple(active.points),
                    color=color,
                    stroke_width=self.stroke_width,
                )
            else:
                annotation = HighlightAnnotation(
                    page=self.page,
                    start=active.start,
                    end=active.current,
                    color=color,
                )
        except ValueError as e:
            logger.warning("Discarding gesture: %s", e)
            return False

        self.manager.add_annotation(annotation)
        return True

    def abort_gesture(self) -> bool:
        """Pointer left the surface; finalize whatever was captured."""
        return self.end_gesture()

    def confirm_text(self, request: TextRequest, text: Optional[str]) -> bool:
        """
        Commit a text note for a pending request.

        Args:
            request: Request returned by ``begin_gesture``
            text: Entered text, or None if the dialog was cancelled

        Returns:
            True if a note was committed
        """
        if not text:
            return False

        try:
            annotation = TextAnnotation(
                page=request.page,
                position=request.position,
                text=text,
                color=normalize_hex_color(request.color),
            )
        except ValueError as e:
            logger.warning("Discarding text note: %s", e)
            return False

        self.manager.add_annotation(annotation)
        return True

    def preview(self) -> Optional[Union[FreehandAnnotation, HighlightAnnotation]]:
        """In-progress geometry for live drawing, not part of the set."""
        active = self._active
        if isinstance(active, _PathInProgress):
            return FreehandAnnotation(page=self.page, points=tuple(active.points),
                                      color=active.color, stroke_width=self.stroke_width)
        if isinstance(active, _HighlightInProgress):
            return HighlightAnnotation(page=self.page, start=active.start,
                                       end=active.current, color=active.color)
        return None
