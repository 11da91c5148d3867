"""
Pytest configuration and global fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


class FakeRenderer:
    """Stands in for the headless browser; returns canned PDF bytes."""

    def __init__(self, output: bytes = b"", error: Exception = None):
        self.output = output
        self.error = error
        self.calls = []

    async def render(self, html: str) -> bytes:
        self.calls.append(html)
        if self.error is not None:
            raise self.error
        return self.output


def build_pdf(pages: int = 1, text: str = "Hello world") -> bytes:
    """Build a small text-only PDF with PyMuPDF."""
    import fitz

    doc = fitz.open()
    for page_num in range(pages):
        page = doc.new_page(width=595, height=842)
        y = 72
        for line in text.split('\n'):
            page.insert_text((72, y), line, fontname="helv", fontsize=11)
            y += 14
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def make_renderer():
    """Factory for fake renderers."""
    return FakeRenderer


@pytest.fixture
def make_pdf():
    """Factory for sample PDFs."""
    return build_pdf


@pytest.fixture
def sample_pdf_bytes():
    """Provide a one-page PDF with a little text."""
    return build_pdf(pages=1, text="SAMPLE REPORT\nThis is the first paragraph.")


@pytest.fixture
def encrypted_pdf_bytes():
    """Provide a password-protected PDF."""
    import fitz

    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "Secret", fontname="helv", fontsize=11)
    data = doc.tobytes(
        encryption=fitz.PDF_ENCRYPT_RC4_128,
        owner_pw="owner",
        user_pw="user"
    )
    doc.close()
    return data


@pytest.fixture
def monospace_measure():
    """Width function: every character is 5pt wide regardless of font."""
    def measure(text, font_name, font_size):
        return len(text) * 5.0
    return measure


def read_pdf_metadata(data: bytes) -> dict:
    """Read the info dictionary of a PDF."""
    import fitz

    doc = fitz.open(stream=data, filetype="pdf")
    try:
        return dict(doc.metadata or {})
    finally:
        doc.close()


def count_pdf_pages(data: bytes) -> int:
    """Count pages of a PDF."""
    import fitz

    doc = fitz.open(stream=data, filetype="pdf")
    try:
        return doc.page_count
    finally:
        doc.close()


@pytest.fixture
def pdf_metadata():
    """Reader for PDF info dictionaries."""
    return read_pdf_metadata


@pytest.fixture
def pdf_page_count():
    """Page counter for PDF bytes."""
    return count_pdf_pages
