"""
Controller for managing annotation operations.
"""
import logging
from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

from inkmark.core.annotations import AnnotationManager
from inkmark.core.capture import CaptureEngine, TextRequest, ToolMode
from inkmark.core.document import DocumentSource
from inkmark.core.geometry import normalize_hex_color
from inkmark.core.projection import ViewportGeometry
from inkmark.utils.settings import ExportSettings

from .export_controller import ExportController

logger = logging.getLogger(__name__)


class AnnotationController(QObject):
    """Handles pointer input on the overlay and export requests."""

    # Signals
    annotations_changed = pyqtSignal()  # Emitted when the committed set changes
    preview_changed = pyqtSignal()  # Emitted while a gesture is in progress
    text_input_requested = pyqtSignal(object)  # TextRequest
    viewport_changed = pyqtSignal(object)  # ViewportGeometry

    def __init__(self, settings: Optional[ExportSettings] = None,
                 annotation_manager: Optional[AnnotationManager] = None,
                 export_controller: Optional[ExportController] = None):
        super().__init__()
        self.settings = settings or ExportSettings()
        self.annotation_manager = annotation_manager or AnnotationManager()
        self.capture = CaptureEngine(
            self.annotation_manager,
            page=self.settings.target_page,
            stroke_width=self.settings.default_stroke_width,
        )
        self.export_controller = export_controller or ExportController(self.settings)

        self.viewport = ViewportGeometry()
        self.tool = ToolMode.HIGHLIGHT
        self.color = normalize_hex_color(self.settings.default_color)
        self.pending_text: Optional[TextRequest] = None

    def update_viewport(self, width: float, height: float,
                        top: float = 0.0, left: float = 0.0) -> None:
        """
        Record the renderer's on-screen box after load or resize.

        Existing annotations keep the coordinates they were drawn with.
        """
        self.viewport = ViewportGeometry(width=width, height=height, top=top, left=left)
        self.viewport_changed.emit(self.viewport)

    def set_tool(self, tool: ToolMode) -> None:
        self.tool = ToolMode(tool)

    def set_color(self, color: str) -> bool:
        """
        Change the annotation color.

        Returns:
            False if the color is not a valid hex color
        """
        try:
            self.color = normalize_hex_color(color)
        except ValueError as e:
            logger.warning("Rejected color: %s", e)
            return False
        return True

    def mouse_press(self, client_x: float, client_y: float) -> None:
        point = self.viewport.to_local(client_x, client_y)
        count = self.annotation_manager.get_annotation_count()
        request = self.capture.begin_gesture(point, self.tool, self.color)
        if self.annotation_manager.get_annotation_count() != count:
            self.annotations_changed.emit()
        if request is not None:
            self.pending_text = request
            self.text_input_requested.emit(request)
        elif self.capture.is_capturing:
            self.preview_changed.emit()

    def mouse_move(self, client_x: float, client_y: float) -> None:
        if not self.capture.is_capturing:
            return
        self.capture.move_gesture(self.viewport.to_local(client_x, client_y))
        self.preview_changed.emit()

    def mouse_release(self) -> None:
        if self.capture.end_gesture():
            self.annotations_changed.emit()

    def mouse_leave(self) -> None:
        if self.capture.abort_gesture():
            self.annotations_changed.emit()

    def submit_text(self, text: str) -> bool:
        """
        Confirm the pending text note.

        Returns:
            True if a note was added
        """
        if self.pending_text is None:
            return False

        added = self.capture.confirm_text(self.pending_text, text)
        if added:
            self.pending_text = None
            self.annotations_changed.emit()
        return added

    def cancel_text(self) -> None:
        self.pending_text = None

    def clear_all(self) -> None:
        """Remove every annotation."""
        self.annotation_manager.clear_all()
        self.annotations_changed.emit()

    def download(self, source: DocumentSource) -> bool:
        """
        Export the current annotations over the given source document.

        Returns:
            False if an export is already running
        """
        return self.export_controller.request_export(
            source, self.annotation_manager.snapshot(), self.viewport)
