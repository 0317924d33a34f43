"""
All-or-nothing export: fetch, render, serialize.
"""
import logging
from typing import Optional, Sequence

from inkmark.core.annotations import Annotation
from inkmark.core.document import DocumentSource, PDFExporter, fetch_document_bytes
from inkmark.core.errors import InkmarkError
from inkmark.core.projection import ViewportGeometry
from inkmark.utils.settings import ExportSettings

logger = logging.getLogger(__name__)


def export_annotated_pdf(source: DocumentSource, annotations: Sequence[Annotation],
                         viewport: ViewportGeometry,
                         settings: Optional[ExportSettings] = None) -> Optional[bytes]:
    """
    Produce the annotated copy of a document.

    Args:
        source: URL, file path or bytes of the original PDF
        annotations: Annotations to burn in, in stacking order
        viewport: Overlay geometry at export time
        settings: Export settings; defaults are used when omitted

    Returns:
        Annotated PDF bytes, or None if any step failed. Failures are logged
        and never propagate.
    """
    settings = settings or ExportSettings()
    exporter = PDFExporter(
        highlight_opacity=settings.highlight_opacity,
        base_font_size=settings.base_font_size,
        target_page=settings.target_page,
    )

    try:
        source_bytes = fetch_document_bytes(source, timeout=settings.fetch_timeout)
        return exporter.export(source_bytes, annotations, viewport.width, viewport.height)
    except InkmarkError as e:
        logger.error("Export failed (%s): %s", type(e).__name__, e)
        return None
    except Exception:
        logger.exception("Unexpected error while exporting annotated PDF")
        return None
