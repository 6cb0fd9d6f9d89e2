"""
Test Configuration and Fixtures
"""
import io
import json

import docx
import pytest
from reportlab.pdfgen import canvas

from portfolio import create_app
from portfolio.services import gemini_service


UPSTREAM_BODY = json.dumps({
    "candidates": [
        {"content": {"parts": [{"text": "{\"name\": \"Jane Doe\", \"title\": \"Backend Engineer\"}"}]}}
    ]
}).encode("utf-8")


class FakeUpstreamResponse:
    """Stands in for a streamed requests.Response"""

    def __init__(self, status_code=200, reason="OK", body=UPSTREAM_BODY, read_error=None):
        self.status_code = status_code
        self.reason = reason
        self._body = body
        self._read_error = read_error

    @property
    def content(self):
        if self._read_error is not None:
            raise self._read_error
        return self._body

    @property
    def text(self):
        return self.content.decode("utf-8")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeUpstream:
    """Records outbound calls and answers with a canned response or error"""

    def __init__(self):
        self.calls = []
        self.response = FakeUpstreamResponse()
        self.error = None

    def __call__(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def upstream(monkeypatch):
    """Replace the outbound POST with a FakeUpstream"""
    fake = FakeUpstream()
    monkeypatch.setattr(gemini_service.requests, "post", fake)
    return fake


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def app(upload_dir):
    """Create application for testing"""
    return create_app("testing", UPLOAD_TMP_DIR=str(upload_dir))


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def pdf_bytes():
    """A one-page PDF with two lines of text"""
    buf = io.BytesIO()
    pdf = canvas.Canvas(buf)
    pdf.drawString(72, 720, "Jane Doe")
    pdf.drawString(72, 700, "Backend Engineer")
    pdf.save()
    return buf.getvalue()


@pytest.fixture
def blank_pdf_bytes():
    """A valid PDF whose only page has no text"""
    buf = io.BytesIO()
    pdf = canvas.Canvas(buf)
    pdf.showPage()
    pdf.save()
    return buf.getvalue()


DOCX_PARAGRAPHS = ["Jane Doe", "Backend Engineer", "Built payment APIs in Go and Python"]


@pytest.fixture
def docx_bytes():
    document = docx.Document()
    for text in DOCX_PARAGRAPHS:
        document.add_paragraph(text)
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


def resume_form(data: bytes, filename: str):
    return {"resume": (io.BytesIO(data), filename)}
