"""
PDF utilities for the conversion pipelines.

Handles font metrics, drawing, metadata and text extraction.
"""
from io import BytesIO
from typing import Dict, Optional

import fitz  # PyMuPDF
from PyPDF2 import PdfReader
from PyPDF2.errors import FileNotDecryptedError, PdfReadError

from core.constants import ERROR_MESSAGES, PAGE_LAYOUT
from core.errors import ParseError
from core.models import ExtractedPdfContent, LayoutResult


def text_width(text: str, font_name: str, font_size: float) -> float:
    """
    Measure the rendered width of text in a base-14 font.

    Args:
        text: Text to measure
        font_name: PyMuPDF font alias ('helv', 'hebo', ...)
        font_size: Font size in points

    Returns:
        Width in points
    """
    return fitz.get_text_length(text, fontname=font_name, fontsize=font_size)


def render_layout_to_pdf(
    layout: LayoutResult,
    metadata: Optional[Dict[str, str]] = None,
    page_width: float = PAGE_LAYOUT['page_width'],
    page_height: float = PAGE_LAYOUT['page_height']
) -> bytes:
    """
    Draw laid-out text onto new pages and serialize the document.

    Draw command y coordinates use PDF space (origin bottom-left); PyMuPDF
    places text by baseline from the top, so y is flipped here.

    Args:
        layout: Draw commands and page count
        metadata: Optional title/creator/producer
        page_width: Page width in points
        page_height: Page height in points

    Returns:
        PDF bytes
    """
    doc = fitz.open()
    try:
        for page_index in range(layout.page_count):
            page = doc.new_page(width=page_width, height=page_height)
            for cmd in layout.commands_on_page(page_index):
                page.insert_text(
                    (cmd.x, page_height - cmd.y),
                    cmd.text,
                    fontname=cmd.font_name,
                    fontsize=cmd.font_size,
                    color=(0, 0, 0)
                )

        if metadata:
            now = fitz.get_pdf_now()
            doc.set_metadata({
                'title': metadata.get('title', ''),
                'creator': metadata.get('creator', ''),
                'producer': metadata.get('producer', ''),
                'creationDate': now,
                'modDate': now
            })

        return doc.tobytes(garbage=3, deflate=True, use_objstms=1)
    finally:
        doc.close()


def extract_pdf_content(data: bytes) -> ExtractedPdfContent:
    """
    Extract page count and text from a PDF.

    Args:
        data: PDF bytes

    Returns:
        ExtractedPdfContent

    Raises:
        ParseError: If the PDF is encrypted, corrupt or has no pages
    """
    try:
        reader = PdfReader(BytesIO(data))

        if reader.is_encrypted and not reader.decrypt(""):
            raise ParseError(
                ERROR_MESSAGES['parse_error_encrypted'],
                detail="document requires a password"
            )

        page_count = len(reader.pages)
        text = "\n".join(page.extract_text() or "" for page in reader.pages)
    except ParseError:
        raise
    except FileNotDecryptedError as e:
        raise ParseError(ERROR_MESSAGES['parse_error_encrypted'], detail=str(e)) from e
    except (PdfReadError, ValueError) as e:
        raise ParseError(ERROR_MESSAGES['parse_error'], detail=str(e)) from e
    except Exception as e:
        # PyPDF2 surfaces some malformed-stream failures as generic errors
        if 'password' in str(e).lower() or 'encrypt' in str(e).lower():
            raise ParseError(ERROR_MESSAGES['parse_error_encrypted'], detail=str(e)) from e
        raise ParseError(ERROR_MESSAGES['parse_error'], detail=str(e)) from e

    if page_count == 0:
        raise ParseError(ERROR_MESSAGES['parse_error'], detail="document has no pages")

    return ExtractedPdfContent(page_count=page_count, text=text)


def rewrite_metadata(data: bytes, producer: str, creator: str) -> bytes:
    """
    Replace document metadata and re-serialize with object-stream compression.

    Producer and creator are overwritten, creation/modification dates are
    set to now, every other info field is cleared.

    Args:
        data: PDF bytes
        producer: Producer string
        creator: Creator string

    Returns:
        Re-serialized PDF bytes

    Raises:
        ParseError: If PyMuPDF cannot open or save the document
    """
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        raise ParseError(ERROR_MESSAGES['parse_error'], detail=str(e)) from e

    try:
        now = fitz.get_pdf_now()
        doc.set_metadata({
            'title': '',
            'author': '',
            'subject': '',
            'keywords': '',
            'producer': producer,
            'creator': creator,
            'creationDate': now,
            'modDate': now
        })
        return doc.tobytes(garbage=3, deflate=True, use_objstms=1)
    except Exception as e:
        raise ParseError(ERROR_MESSAGES['parse_error'], detail=str(e)) from e
    finally:
        doc.close()
