"""
Conversion entry points.

Each function handles one request end to end and always returns a result
object; no exception escapes to the caller.
"""
import base64
import binascii
import logging
from typing import Optional

from config.settings import settings
from core.constants import ERROR_MESSAGES
from core.errors import ConversionError, ErrorKind, InputTooLarge, ParseError
from core.models import ConversionResult, OptimizationResult
from services.browser_renderer import BrowserPdfRenderer
from services.docx_mapper import build_docx, map_markdown_to_blocks
from services.layout_engine import TextLayoutEngine
from services.pdf_optimizer import PdfOptimizer
from utils.markdown_utils import markdown_to_text
from utils.pdf_utils import render_layout_to_pdf


logger = logging.getLogger(__name__)

DATA_URL_MARKER = ';base64,'


def _check_markdown_size(markdown: str) -> None:
    if len(markdown) > settings.max_markdown_chars:
        raise InputTooLarge(
            ERROR_MESSAGES['input_too_large_markdown'],
            detail=f"{len(markdown)} > {settings.max_markdown_chars} chars"
        )


def _error_result(error: ConversionError) -> ConversionResult:
    return ConversionResult(error=error.message, error_kind=error.kind.value)


def convert_markdown_to_pdf(markdown: str) -> ConversionResult:
    """
    Convert Markdown to a laid-out PDF.

    Args:
        markdown: Markdown source

    Returns:
        ConversionResult with base64 PDF data or an error message
    """
    try:
        _check_markdown_size(markdown)

        text = markdown_to_text(markdown)
        layout = TextLayoutEngine().layout(text)
        pdf_bytes = render_layout_to_pdf(layout, metadata=settings.get_pdf_metadata())

        return ConversionResult(data=base64.b64encode(pdf_bytes).decode())
    except ConversionError as e:
        return _error_result(e)
    except Exception:
        logger.exception("Error converting markdown to PDF")
        return ConversionResult(
            error=ERROR_MESSAGES['unknown_pdf'],
            error_kind=ErrorKind.UNKNOWN.value
        )


def convert_markdown_to_docx(markdown: str) -> ConversionResult:
    """
    Convert Markdown to DOCX.

    Supports headings, bullet and numbered lists, and basic bold/italic.

    Args:
        markdown: Markdown source

    Returns:
        ConversionResult with base64 DOCX data or an error message
    """
    try:
        _check_markdown_size(markdown)

        blocks = map_markdown_to_blocks(markdown)
        docx_bytes = build_docx(blocks)

        return ConversionResult(data=base64.b64encode(docx_bytes).decode())
    except ConversionError as e:
        return _error_result(e)
    except Exception:
        logger.exception("Error converting markdown to DOCX")
        return ConversionResult(
            error=ERROR_MESSAGES['unknown_docx'],
            error_kind=ErrorKind.UNKNOWN.value
        )


def decode_pdf_payload(payload: str) -> bytes:
    """
    Decode a base64 PDF, accepting an optional ``data:`` URL prefix.

    Raises:
        ParseError: If the payload is not valid base64
    """
    if payload.startswith('data:') and DATA_URL_MARKER in payload:
        payload = payload.split(DATA_URL_MARKER, 1)[1]
    try:
        return base64.b64decode(payload)
    except (binascii.Error, ValueError) as e:
        raise ParseError(ERROR_MESSAGES['parse_error'], detail=str(e)) from e


def build_renderer() -> BrowserPdfRenderer:
    """Create a headless-browser renderer wired from settings."""
    return BrowserPdfRenderer(**settings.get_browser_config())


def build_optimizer(renderer=None) -> PdfOptimizer:
    """Create an optimizer wired from settings."""
    if renderer is None:
        renderer = build_renderer()
    return PdfOptimizer(
        renderer=renderer,
        max_bytes=settings.max_pdf_bytes,
        producer=settings.pdf_producer,
        creator=settings.pdf_creator
    )


async def optimize_pdf(
    base64_pdf: str,
    optimizer: Optional[PdfOptimizer] = None
) -> OptimizationResult:
    """
    Optimize a base64-encoded PDF.

    Args:
        base64_pdf: Source PDF as base64 (or a base64 data URL)
        optimizer: Optimizer to use (default: browser re-render from settings)

    Returns:
        OptimizationResult; ``original_size`` is always set
    """
    try:
        pdf_bytes = decode_pdf_payload(base64_pdf)
    except ConversionError as e:
        return OptimizationResult(
            original_size=0,
            error=e.message,
            error_kind=e.kind.value
        )

    if optimizer is None:
        optimizer = build_optimizer()

    try:
        return await optimizer.optimize(pdf_bytes)
    except Exception:
        logger.exception("Error optimizing PDF")
        return OptimizationResult(
            original_size=len(pdf_bytes),
            error=ERROR_MESSAGES['unknown_optimize'],
            error_kind=ErrorKind.UNKNOWN.value
        )
