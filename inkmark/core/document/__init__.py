"""
Source retrieval, reading and annotated export of PDF documents.
"""
from .pdf_exporter import PDFExporter
from .pdf_reader import PDFDocumentReader, open_pdf_bytes, page_size
from .source import DocumentSource, fetch_document_bytes

__all__ = [
    'PDFExporter',
    'PDFDocumentReader',
    'open_pdf_bytes',
    'page_size',
    'DocumentSource',
    'fetch_document_bytes',
]
