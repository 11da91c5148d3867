"""Core package - Domain models, constants and error taxonomy."""

from .models import (
    PageCursor,
    DrawCommand,
    LayoutResult,
    ExtractedPdfContent,
    TextRun,
    BlockKind,
    DocxBlock,
    ConversionResult,
    OptimizationResult
)
from .constants import (
    MAX_MARKDOWN_CHARS,
    MAX_PDF_BYTES,
    PAGE_LAYOUT,
    PRINT_OPTIONS,
    ERROR_MESSAGES
)
from .errors import (
    ErrorKind,
    ConversionError,
    InputTooLarge,
    ParseError,
    RenderError,
    MinimalGain
)

__all__ = [
    'PageCursor',
    'DrawCommand',
    'LayoutResult',
    'ExtractedPdfContent',
    'TextRun',
    'BlockKind',
    'DocxBlock',
    'ConversionResult',
    'OptimizationResult',
    'MAX_MARKDOWN_CHARS',
    'MAX_PDF_BYTES',
    'PAGE_LAYOUT',
    'PRINT_OPTIONS',
    'ERROR_MESSAGES',
    'ErrorKind',
    'ConversionError',
    'InputTooLarge',
    'ParseError',
    'RenderError',
    'MinimalGain'
]
