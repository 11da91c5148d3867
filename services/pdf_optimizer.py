"""
PDF Optimizer - Shrinks PDFs by re-rendering their text.

Pipeline stages run strictly in order:

    size check -> extract text -> trivial check -> generate HTML
    -> render PDF -> gain check -> metadata rewrite

Any stage may end the run early; the result then carries an error
message instead of data. Images and forms of the source are not carried
over.
"""
import base64
import logging
from typing import Callable

from core.constants import (
    ERROR_MESSAGES,
    MAX_PDF_BYTES,
    METHOD_RERENDER,
    METHOD_SKIPPED,
    MIN_REDUCTION_PERCENT,
    TRIVIAL_BYTES_PER_PAGE,
    TRIVIAL_CHARS_PER_PAGE
)
from core.errors import ConversionError, InputTooLarge, MinimalGain
from core.models import ExtractedPdfContent, OptimizationResult
from utils.html_utils import generate_html
from utils.pdf_utils import extract_pdf_content, rewrite_metadata
from utils.text_utils import reduction_percent


logger = logging.getLogger(__name__)


def is_trivial(original_size: int, content: ExtractedPdfContent) -> bool:
    """
    Check whether a PDF looks already optimized.

    Both the bytes per page and the characters per page must be under
    their thresholds.
    """
    pages = content.page_count
    return (
        original_size / pages < TRIVIAL_BYTES_PER_PAGE
        and len(content.text) < TRIVIAL_CHARS_PER_PAGE * pages
    )


class PdfOptimizer:
    """Runs the re-render optimization pipeline for one PDF at a time."""

    def __init__(
        self,
        renderer,
        max_bytes: int = MAX_PDF_BYTES,
        producer: str = "mdconvert",
        creator: str = "mdconvert",
        extractor: Callable[[bytes], ExtractedPdfContent] = extract_pdf_content,
        metadata_writer: Callable[[bytes, str, str], bytes] = rewrite_metadata
    ):
        """
        Initialize optimizer.

        Args:
            renderer: Object with ``async render(html) -> bytes``
            max_bytes: Input ceiling in bytes
            producer: Producer written to the output metadata
            creator: Creator written to the output metadata
            extractor: PDF text extractor
            metadata_writer: Metadata rewrite function
        """
        self.renderer = renderer
        self.max_bytes = max_bytes
        self.producer = producer
        self.creator = creator
        self.extractor = extractor
        self.metadata_writer = metadata_writer

    async def optimize(self, pdf_bytes: bytes) -> OptimizationResult:
        """
        Optimize a PDF.

        Args:
            pdf_bytes: Source PDF

        Returns:
            OptimizationResult. ``data`` (base64) is only set on success;
            ``size``/``reduction_percent`` are also set when the rendered
            output was not small enough.
        """
        result = OptimizationResult(original_size=len(pdf_bytes))

        try:
            rendered = await self._run(pdf_bytes, result)
            final = self.metadata_writer(rendered, self.producer, self.creator)
            self._check_gain(result, len(final))
        except ConversionError as e:
            logger.info(f"Optimization stopped ({e.kind.value}): {e.detail or e.message}")
            if not isinstance(e, MinimalGain):
                result.size = None
                result.reduction_percent = None
            result.data = None
            result.error = e.message
            result.error_kind = e.kind.value
            return result

        result.data = base64.b64encode(final).decode()

        logger.info(
            f"Optimized PDF {result.original_size} -> {result.size} bytes "
            f"({result.reduction_percent}%)"
        )
        return result

    async def _run(self, pdf_bytes: bytes, result: OptimizationResult) -> bytes:
        """Run the stages up to and including the gain check."""
        original_size = result.original_size

        if original_size > self.max_bytes:
            raise InputTooLarge(
                ERROR_MESSAGES['input_too_large_pdf'],
                detail=f"{original_size} > {self.max_bytes} bytes"
            )

        content = self.extractor(pdf_bytes)
        logger.info(
            f"Extracted {len(content.text)} chars from {content.page_count} page(s)"
        )

        if is_trivial(original_size, content):
            result.method = METHOD_SKIPPED
            raise MinimalGain(
                ERROR_MESSAGES['minimal_gain'],
                detail=f"{original_size // content.page_count} bytes/page"
            )

        html = generate_html(content.text)

        result.method = METHOD_RERENDER
        rendered = await self.renderer.render(html)

        self._check_gain(result, len(rendered))
        return rendered

    @staticmethod
    def _check_gain(result: OptimizationResult, size: int) -> None:
        """Record the new size and stop if the reduction is too small."""
        result.size = size
        result.reduction_percent = reduction_percent(result.original_size, size)
        if result.reduction_percent < MIN_REDUCTION_PERCENT:
            raise MinimalGain(
                ERROR_MESSAGES['minimal_gain'],
                detail=f"only {result.reduction_percent}% smaller"
            )
