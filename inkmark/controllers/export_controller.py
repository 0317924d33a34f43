"""
Controller that runs one export at a time and hands the result to the writer.
"""
import logging
from pathlib import Path
from typing import Optional, Sequence

from PyQt5.QtCore import QObject, pyqtSignal

from inkmark.core.annotations import Annotation
from inkmark.core.document import DocumentSource
from inkmark.core.export import ExportWorker, OutputWriter
from inkmark.core.projection import ViewportGeometry
from inkmark.utils.settings import ExportSettings

logger = logging.getLogger(__name__)


class ExportController(QObject):
    """Starts export workers and saves their output."""

    # Signals
    export_started = pyqtSignal()
    export_finished = pyqtSignal(bool, str)  # success, message
    export_saved = pyqtSignal(str)  # path of the saved file
    export_progress = pyqtSignal(str)  # status message from the worker

    def __init__(self, settings: ExportSettings, writer: Optional[OutputWriter] = None):
        super().__init__()
        self.settings = settings
        self.writer = writer or OutputWriter(settings.output_dir)
        self.worker: Optional[ExportWorker] = None
        self.last_saved_path: Optional[Path] = None
        self._saved = False

    @property
    def is_busy(self) -> bool:
        return self.worker is not None

    def request_export(self, source: DocumentSource, annotations: Sequence[Annotation],
                       viewport: ViewportGeometry) -> bool:
        """
        Start exporting a snapshot of the annotations.

        Args:
            source: URL, file path or bytes of the original PDF
            annotations: Current annotation sequence
            viewport: Overlay geometry at the time of the request

        Returns:
            False if another export is still running
        """
        if self.is_busy:
            logger.info("Export already in progress; request ignored")
            return False

        self._saved = False
        self.worker = ExportWorker(source, tuple(annotations), viewport, self.settings)
        self.worker.progress.connect(self.export_progress)
        self.worker.exported.connect(self._on_exported)
        self.worker.export_finished.connect(self._on_finished)
        self.worker.start()
        self.export_started.emit()
        return True

    def wait(self, msecs: int = 30000) -> bool:
        """Block until the running worker thread exits."""
        if self.worker is None:
            return True
        return self.worker.wait(msecs)

    def _on_exported(self, data: bytes) -> None:
        path = self.writer.save(data, self.settings.output_filename)
        self._saved = path is not None
        if self._saved:
            self.last_saved_path = path
            self.export_saved.emit(str(path))

    def _on_finished(self, success: bool, message: str) -> None:
        if self.worker is not None:
            self.worker.wait()
            self.worker.deleteLater()
        self.worker = None
        if success and not self._saved:
            success, message = False, "Failed to save annotated PDF."
        self.export_finished.emit(success, message)
