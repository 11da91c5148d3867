"""
Error taxonomy for conversion pipelines.

Collaborator wrappers raise these; entry points turn them into result
objects so nothing propagates past the public API.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Kinds of failures reported to callers."""
    INPUT_TOO_LARGE = 'input_too_large'
    PARSE_ERROR = 'parse_error'
    RENDER_ERROR = 'render_error'
    MINIMAL_GAIN = 'minimal_gain'
    UNKNOWN = 'unknown'


class ConversionError(Exception):
    """Base class for failures carrying a user-facing message."""

    kind = ErrorKind.UNKNOWN

    def __init__(self, message: str, detail: Optional[str] = None):
        """
        Args:
            message: Message shown to the user
            detail: Underlying collaborator error, for logs only
        """
        super().__init__(message)
        self.message = message
        self.detail = detail


class InputTooLarge(ConversionError):
    kind = ErrorKind.INPUT_TOO_LARGE


class ParseError(ConversionError):
    """Source document is malformed, encrypted or corrupt."""
    kind = ErrorKind.PARSE_ERROR


class RenderError(ConversionError):
    """Rendering collaborator timed out, crashed or ran out of memory."""
    kind = ErrorKind.RENDER_ERROR


class MinimalGain(ConversionError):
    """Policy refusal: optimization would not produce a meaningfully smaller file."""
    kind = ErrorKind.MINIMAL_GAIN
