from typing import Sequence

from PyQt5.QtCore import QThread, pyqtSignal

from inkmark.core.annotations import Annotation
from inkmark.core.document import DocumentSource
from inkmark.core.projection import ViewportGeometry
from inkmark.utils.settings import ExportSettings

from .pipeline import export_annotated_pdf


class ExportWorker(QThread):
    """Worker thread for exporting annotations to PDF without freezing the UI."""

    # Signals
    export_finished = pyqtSignal(bool, str)  # success, message
    exported = pyqtSignal(object)  # annotated document bytes
    progress = pyqtSignal(str)  # status message

    def __init__(self, source: DocumentSource, annotations: Sequence[Annotation],
                 viewport: ViewportGeometry, settings: ExportSettings):
        super().__init__()
        self.source = source
        self.annotations = tuple(annotations)
        self.viewport = viewport
        self.settings = settings

    def run(self):
        """Execute the export in a background thread."""
        self.progress.emit("Exporting annotations...")

        data = export_annotated_pdf(self.source, self.annotations,
                                    self.viewport, self.settings)

        if data is None:
            self.export_finished.emit(False, "Failed to export annotated PDF.")
            return

        self.exported.emit(data)
        self.export_finished.emit(True, "Annotated PDF exported.")
