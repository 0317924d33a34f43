import time

import fitz  # PyMuPDF
import pytest
from PyQt5.QtCore import QCoreApplication


@pytest.fixture(scope="session")
def qapp():
    """Headless Qt application for signal delivery between threads."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


def make_pdf(width: float = 100, height: float = 100, pages: int = 1) -> bytes:
    doc = fitz.open()
    for _ in range(pages):
        doc.new_page(width=width, height=height)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def square_pdf() -> bytes:
    """Single 100x100 page."""
    return make_pdf(100, 100)


@pytest.fixture
def letter_pdf() -> bytes:
    return make_pdf(612, 792)


def process_until(app, condition, timeout: float = 10.0) -> bool:
    """Pump the Qt event queue until condition() is true or time runs out."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        app.processEvents()
        if condition():
            return True
        time.sleep(0.01)
    return condition()
