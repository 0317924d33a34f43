import pytest
import requests

from inkmark.core.annotations import AnnotationManager, HighlightAnnotation
from inkmark.core.document import fetch_document_bytes
from inkmark.core.errors import FetchFailure
from inkmark.core.export import OutputWriter, export_annotated_pdf
from inkmark.core.geometry import Point
from inkmark.core.projection import ViewportGeometry

VIEWPORT = ViewportGeometry(width=100, height=100)


class _FakeResponse:

    def __init__(self, content=b"", status_code=200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")


def _manager_with_highlight():
    manager = AnnotationManager()
    manager.add_annotation(
        HighlightAnnotation(page=1, start=Point(10, 10), end=Point(50, 40), color="#FF0000"))
    return manager


class TestFetchDocumentBytes:

    def test_bytes_pass_through(self):
        assert fetch_document_bytes(bytearray(b"abc")) == b"abc"

    def test_reads_local_file(self, tmp_path):
        path = tmp_path / "doc.pdf"
        path.write_bytes(b"%PDF-data")
        assert fetch_document_bytes(path) == b"%PDF-data"
        assert fetch_document_bytes(str(path)) == b"%PDF-data"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FetchFailure):
            fetch_document_bytes(tmp_path / "missing.pdf")

    def test_downloads_url(self, monkeypatch):
        calls = []

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return _FakeResponse(b"%PDF-remote")

        monkeypatch.setattr(requests, "get", fake_get)
        assert fetch_document_bytes("https://example.com/a.pdf", timeout=5) == b"%PDF-remote"
        assert calls == [("https://example.com/a.pdf", 5)]

    def test_http_error(self, monkeypatch):
        monkeypatch.setattr(requests, "get", lambda url, timeout: _FakeResponse(status_code=404))
        with pytest.raises(FetchFailure):
            fetch_document_bytes("http://example.com/missing.pdf")


class TestExportAnnotatedPdf:

    def test_success(self, square_pdf):
        manager = _manager_with_highlight()
        data = export_annotated_pdf(square_pdf, manager.snapshot(), VIEWPORT)
        assert data is not None
        assert data.startswith(b"%PDF")
        assert data != square_pdf

    def test_fetch_failure_is_a_no_op(self, monkeypatch):
        def failing_get(url, timeout):
            raise requests.exceptions.ConnectionError("offline")

        monkeypatch.setattr(requests, "get", failing_get)
        manager = _manager_with_highlight()
        before = manager.snapshot()

        assert export_annotated_pdf("https://example.com/doc.pdf", manager.snapshot(), VIEWPORT) is None
        assert manager.snapshot() == before

    def test_parse_failure_returns_none(self):
        assert export_annotated_pdf(b"garbage", _manager_with_highlight().snapshot(), VIEWPORT) is None

    def test_degenerate_viewport_returns_none(self, square_pdf):
        result = export_annotated_pdf(square_pdf, _manager_with_highlight().snapshot(),
                                      ViewportGeometry(width=0, height=0))
        assert result is None

    def test_clear_all_then_export_matches_source(self, square_pdf):
        manager = _manager_with_highlight()
        manager.clear_all()
        assert manager.snapshot() == ()
        assert export_annotated_pdf(square_pdf, manager.snapshot(), VIEWPORT) == square_pdf


class TestOutputWriter:

    def test_save(self, tmp_path):
        writer = OutputWriter(tmp_path / "out")
        path = writer.save(b"%PDF-1.7", "annotated-document.pdf")
        assert path == tmp_path / "out" / "annotated-document.pdf"
        assert path.read_bytes() == b"%PDF-1.7"
        assert list((tmp_path / "out").iterdir()) == [path]

    def test_unwritable_directory(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        assert OutputWriter(blocker).save(b"data", "a.pdf") is None
