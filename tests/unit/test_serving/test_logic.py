"""
Unit tests for serving.logic module.
"""
import asyncio
import base64
from io import BytesIO

import pytest
from docx import Document

from core.constants import ERROR_MESSAGES
from core.errors import ErrorKind
from config.settings import settings
from services.browser_renderer import BrowserPdfRenderer
from serving.logic import (
    build_optimizer,
    build_renderer,
    convert_markdown_to_docx,
    convert_markdown_to_pdf,
    decode_pdf_payload,
    optimize_pdf
)
from utils.pdf_utils import extract_pdf_content


FIVE_MIB = 5 * 1024 * 1024
EIGHT_MIB = 8 * 1024 * 1024


class TestConvertMarkdownToPdf:
    """Tests for convert_markdown_to_pdf function."""

    def test_success(self, pdf_page_count):
        """Test a small document converts to a readable PDF."""
        result = convert_markdown_to_pdf("# Title\n\nHello **world**, see https://example.com")

        assert result.error is None
        pdf_bytes = base64.b64decode(result.data)
        assert pdf_page_count(pdf_bytes) == 1
        text = extract_pdf_content(pdf_bytes).text
        assert "Title" in text
        assert "Hello" in text

    def test_draws_plain_text(self):
        """Test Markdown syntax is not drawn into the PDF."""
        markdown = (
            "# Title\n\n"
            "Some *italic* and **bold** text, see [docs](https://x.org).\n\n"
            "1. first\n2. second\n\n- item"
        )

        result = convert_markdown_to_pdf(markdown)
        text = extract_pdf_content(base64.b64decode(result.data)).text

        assert "**" not in text
        assert "_italic_" not in text
        assert "# " not in text
        assert "](" not in text
        assert "italic" in text
        assert "bold" in text
        assert "https://x.org" in text
        assert "first" in text
        assert "item" in text

    def test_metadata(self, pdf_metadata):
        """Test title, creator and producer are set."""
        result = convert_markdown_to_pdf("text")

        metadata = pdf_metadata(base64.b64decode(result.data))

        assert metadata['title'] == "Document converted from Markdown"
        assert metadata['producer'] == "mdconvert"

    def test_multi_page(self, pdf_page_count):
        """Test long documents span several pages."""
        markdown = "\n\n".join(f"Paragraph number {i} with some words." for i in range(120))

        result = convert_markdown_to_pdf(markdown)

        assert pdf_page_count(base64.b64decode(result.data)) > 1

    @pytest.mark.parametrize("markdown", ["", "plain", "# H\n- a\n- b\n\n1. x", "`code`\n\n> quote"])
    def test_exactly_one_of_data_or_error(self, markdown):
        """Test results always carry data or error, never both."""
        result = convert_markdown_to_pdf(markdown)

        assert (result.data is None) != (result.error is None)

    def test_too_large(self):
        """Test input one byte over 5 MiB is rejected."""
        result = convert_markdown_to_pdf("a" * (FIVE_MIB + 1))

        assert result.data is None
        assert result.error == ERROR_MESSAGES['input_too_large_markdown']
        assert result.error_kind == ErrorKind.INPUT_TOO_LARGE.value

    def test_unexpected_failure(self, monkeypatch):
        """Test unexpected exceptions become the generic message."""
        import serving.logic as logic

        def boom(text):
            raise RuntimeError("font metrics unavailable")

        monkeypatch.setattr(logic, "markdown_to_text", boom)

        result = logic.convert_markdown_to_pdf("x")

        assert result.data is None
        assert result.error == ERROR_MESSAGES['unknown_pdf']
        assert result.error_kind == ErrorKind.UNKNOWN.value


class TestConvertMarkdownToDocx:
    """Tests for convert_markdown_to_docx function."""

    def test_success(self):
        """Test output reopens as a DOCX with the mapped structure."""
        result = convert_markdown_to_docx("# Title\n\n- item\n\nSome *italic* text")

        assert result.error is None
        doc = Document(BytesIO(base64.b64decode(result.data)))
        assert [p.text for p in doc.paragraphs] == ["Title", "", "item", "", "Some italic text"]

    def test_too_large(self):
        """Test input one byte over 5 MiB is rejected."""
        result = convert_markdown_to_docx("a" * (FIVE_MIB + 1))

        assert result.data is None
        assert result.error_kind == ErrorKind.INPUT_TOO_LARGE.value


class TestDecodePdfPayload:
    """Tests for decode_pdf_payload function."""

    def test_plain_base64(self):
        """Test plain base64 decodes."""
        assert decode_pdf_payload(base64.b64encode(b"%PDF").decode()) == b"%PDF"

    def test_data_url(self):
        """Test data URL prefix is stripped."""
        payload = "data:application/pdf;base64," + base64.b64encode(b"%PDF").decode()

        assert decode_pdf_payload(payload) == b"%PDF"


class TestOptimizePdf:
    """Tests for optimize_pdf function."""

    def test_invalid_base64(self):
        """Test undecodable payloads are parse errors."""
        result = asyncio.run(optimize_pdf("abc"))

        assert result.error_kind == ErrorKind.PARSE_ERROR.value
        assert result.original_size == 0
        assert result.data is None

    def test_too_large(self, make_renderer):
        """Test input one byte over 8 MiB is rejected."""
        renderer = make_renderer()
        payload = base64.b64encode(b"\0" * (EIGHT_MIB + 1)).decode()

        result = asyncio.run(optimize_pdf(payload, optimizer=build_optimizer(renderer)))

        assert result.error_kind == ErrorKind.INPUT_TOO_LARGE.value
        assert result.error == ERROR_MESSAGES['input_too_large_pdf']
        assert result.original_size == EIGHT_MIB + 1
        assert renderer.calls == []

    def test_trivial_pdf(self, make_renderer, sample_pdf_bytes):
        """Test small PDFs come back as minimal gain with original size."""
        payload = base64.b64encode(sample_pdf_bytes).decode()

        result = asyncio.run(optimize_pdf(payload, optimizer=build_optimizer(make_renderer())))

        assert result.error_kind == ErrorKind.MINIMAL_GAIN.value
        assert result.original_size == len(sample_pdf_bytes)

    def test_unexpected_failure(self, make_renderer, sample_pdf_bytes):
        """Test unexpected exceptions become the generic message."""
        optimizer = build_optimizer(make_renderer())
        optimizer.extractor = lambda data: 1 / 0

        result = asyncio.run(optimize_pdf(base64.b64encode(sample_pdf_bytes).decode(), optimizer=optimizer))

        assert result.error == ERROR_MESSAGES['unknown_optimize']
        assert result.error_kind == ErrorKind.UNKNOWN.value
        assert result.original_size == len(sample_pdf_bytes)
        assert result.data is None


class TestBuildOptimizer:
    """Tests for build_renderer and build_optimizer functions."""

    def test_renderer_from_settings(self, monkeypatch):
        """Test the renderer takes its timeout and mode from settings."""
        monkeypatch.setattr(settings, "browser_timeout_ms", 1234)
        monkeypatch.setattr(settings, "browser_headless", False)

        renderer = build_renderer()

        assert renderer.timeout_ms == 1234
        assert renderer.headless is False

    def test_default_renderer(self):
        """Test the optimizer gets a browser renderer when none is given."""
        optimizer = build_optimizer()

        assert isinstance(optimizer.renderer, BrowserPdfRenderer)
        assert optimizer.max_bytes == EIGHT_MIB
