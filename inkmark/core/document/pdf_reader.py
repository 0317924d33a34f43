"""
PDF document loading from in-memory bytes.
"""
from typing import Optional, Tuple

import fitz  # PyMuPDF

from inkmark.core.errors import ParseFailure


def open_pdf_bytes(data: bytes) -> fitz.Document:
    """
    Open PDF bytes with PyMuPDF.

    Raises:
        ParseFailure: If the bytes are not a PDF with at least one page
    """
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        raise ParseFailure(f"Not a readable PDF: {e}") from e

    if not doc.is_pdf or doc.page_count == 0:
        doc.close()
        raise ParseFailure("Document has no pages")
    return doc


def page_size(page: fitz.Page) -> Tuple[float, float]:
    """Native (unrotated) width and height of a page in PDF units."""
    box = page.mediabox
    return box.width, box.height


class PDFDocumentReader:
    """Exposes page count and size metadata of a source document."""

    def __init__(self):
        self.doc: Optional[fitz.Document] = None
        self.total_pages: int = 0

    def load_bytes(self, data: bytes) -> int:
        """
        Load a PDF document from bytes.

        Args:
            data: PDF file contents

        Returns:
            Number of pages
        """
        if self.doc:
            self.close_document()

        self.doc = open_pdf_bytes(data)
        self.total_pages = self.doc.page_count
        return self.total_pages

    def get_page_size(self, page_number: int = 1) -> Tuple[float, float]:
        """
        Get the size of a page.

        Args:
            page_number: 1-based page number

        Returns:
            (width, height) in PDF units
        """
        if not self.doc or not 1 <= page_number <= self.total_pages:
            raise IndexError(f"No page {page_number}")
        return page_size(self.doc[page_number - 1])

    def close_document(self) -> None:
        if self.doc:
            self.doc.close()
            self.doc = None
        self.total_pages = 0
