"""
Unit tests for serving.converter_api module.
"""
import base64

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_optimizer
from core.errors import ErrorKind
from serving.converter_api import app
from serving.logic import build_optimizer


@pytest.fixture
def client_with_renderer():
    """Test client whose optimizer uses a fake renderer."""
    def create(renderer):
        app.dependency_overrides[get_optimizer] = lambda: build_optimizer(renderer)
        return TestClient(app)

    yield create
    app.dependency_overrides.clear()


class TestMarkdownEndpoints:
    """Tests for Markdown conversion endpoints."""

    def test_markdown_to_pdf(self):
        """Test PDF conversion returns base64 data."""
        client = TestClient(app)

        response = client.post("/convert/markdown-to-pdf", json={"markdown": "# Hi\n\nBody"})

        assert response.status_code == 200
        body = response.json()
        assert body['error'] is None
        assert base64.b64decode(body['data']).startswith(b"%PDF")

    def test_markdown_to_docx(self):
        """Test DOCX conversion returns a zip package."""
        client = TestClient(app)

        response = client.post("/convert/markdown-to-docx", json={"markdown": "# Hi"})

        body = response.json()
        assert body['error'] is None
        assert base64.b64decode(body['data']).startswith(b"PK")

    def test_missing_field(self):
        """Test malformed request bodies are rejected by validation."""
        client = TestClient(app)

        response = client.post("/convert/markdown-to-pdf", json={})

        assert response.status_code == 422


class TestOptimizeEndpoints:
    """Tests for PDF optimization endpoints."""

    def test_optimize_trivial(self, client_with_renderer, make_renderer, sample_pdf_bytes):
        """Test errors are reported in the body with a 200 status."""
        renderer = make_renderer()
        client = client_with_renderer(renderer)

        response = client.post(
            "/optimize-pdf",
            json={"data": base64.b64encode(sample_pdf_bytes).decode()}
        )

        assert response.status_code == 200
        body = response.json()
        assert body['error_kind'] == ErrorKind.MINIMAL_GAIN.value
        assert body['original_size'] == len(sample_pdf_bytes)
        assert body['data'] is None
        assert renderer.calls == []

    def test_optimize_upload_parse_error(self, client_with_renderer, make_renderer):
        """Test uploaded garbage is reported as a parse error."""
        client = client_with_renderer(make_renderer())

        response = client.post(
            "/optimize-pdf/upload",
            files={"file": ("broken.pdf", b"not a pdf", "application/pdf")}
        )

        assert response.status_code == 200
        body = response.json()
        assert body['error_kind'] == ErrorKind.PARSE_ERROR.value
        assert body['original_size'] == len(b"not a pdf")


class TestMetaEndpoints:
    """Tests for root and health endpoints."""

    def test_health(self):
        """Test health check."""
        response = TestClient(app).get("/health")

        assert response.json() == {"status": "ok"}

    def test_root_lists_endpoints(self):
        """Test the root endpoint describes the API."""
        body = TestClient(app).get("/").json()

        assert "markdown_to_pdf" in body['endpoints']
        assert "optimize_pdf" in body['endpoints']
