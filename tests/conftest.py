"""
Test Configuration and Fixtures
"""
import io

import pytest
from PIL import Image

from docscan import create_app, db


SAMPLE_TEXT = (
    "Quarterly revenue grew twelve percent while operating costs fell. "
    "The board approved a new product line for the coming year."
)


class FakeGenerationClient:
    """Stands in for the Gemini client; answers by prompt kind."""

    def __init__(self, fail_on=None):
        self.prompts = []
        self.fail_on = fail_on

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.fail_on and prompt.startswith(self.fail_on):
            raise RuntimeError("quota exceeded")
        if prompt.startswith("Extract 5-7 key points"):
            return "- Revenue grew\n* Costs fell\n• New product line\n\n"
        if "2-3 sentences" in prompt:
            return "Short summary."
        if "1 paragraph" in prompt:
            return "Medium summary."
        return "Long summary."


def make_pdf(text=SAMPLE_TEXT):
    """Build a one-page PDF with ``text`` set in Helvetica."""
    content = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length " + str(len(content)).encode() + b" >>\nstream\n" + content + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = io.BytesIO()
    out.write(b"%PDF-1.4\n")
    offsets = []
    for i, body in enumerate(objects, start=1):
        offsets.append(out.tell())
        out.write(f"{i} 0 obj\n".encode() + body + b"\nendobj\n")
    xref = out.tell()
    out.write(f"xref\n0 {len(objects) + 1}\n".encode())
    out.write(b"0000000000 65535 f \n")
    for off in offsets:
        out.write(f"{off:010d} 00000 n \n".encode())
    out.write(f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref}\n%%EOF\n".encode())
    return out.getvalue()


def make_png():
    buf = io.BytesIO()
    Image.new("RGB", (40, 20), "white").save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def make_app(upload_dir):
    """Build an app for testing; keyword overrides go into app.config"""
    def _make(**overrides):
        test_config = {'UPLOAD_DIR': str(upload_dir)}
        test_config.update(overrides)
        return create_app('testing', test_config=test_config)
    return _make


@pytest.fixture
def fake_client():
    return FakeGenerationClient()


@pytest.fixture
def app(make_app, fake_client):
    """Create application for testing"""
    app = make_app()
    app.extensions['docscan']['summarizer']._client = fake_client
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def pdf_bytes():
    return make_pdf()


@pytest.fixture
def png_bytes():
    return make_png()
