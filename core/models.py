"""
Core domain models for the conversion pipelines.

These are pure data structures without business logic. Every instance is
scoped to a single conversion call.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .constants import FONT_BOLD


@dataclass
class PageCursor:
    """Current page and baseline position (PDF coordinates, origin bottom-left)."""
    page_index: int
    vertical_position: float


@dataclass
class DrawCommand:
    """A single line of text to draw on a page."""
    text: str
    x: float
    y: float
    font_name: str
    font_size: float
    page_index: int
    is_heading: bool = False

    @property
    def bold(self) -> bool:
        """Whether the command uses the bold face."""
        return self.font_name == FONT_BOLD


@dataclass
class LayoutResult:
    """Ordered draw commands plus the number of allocated pages."""
    commands: List[DrawCommand] = field(default_factory=list)
    page_count: int = 1

    def commands_on_page(self, page_index: int) -> List[DrawCommand]:
        """Get the draw commands for one page."""
        return [cmd for cmd in self.commands if cmd.page_index == page_index]


@dataclass
class ExtractedPdfContent:
    """Text pulled out of a source PDF."""
    page_count: int
    text: str


@dataclass
class TextRun:
    """A run of text with inline styling."""
    text: str
    bold: bool = False
    italic: bool = False


class BlockKind(str, Enum):
    """Structural block types for DOCX output."""
    HEADING_1 = 'heading_1'
    HEADING_2 = 'heading_2'
    HEADING_3 = 'heading_3'
    BULLET = 'bullet'
    NUMBERED = 'numbered'
    PARAGRAPH = 'paragraph'


@dataclass
class DocxBlock:
    """One markdown source line mapped to a document block."""
    kind: BlockKind
    runs: List[TextRun] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Concatenated text of all runs."""
        return ''.join(run.text for run in self.runs)

    @property
    def heading_level(self) -> Optional[int]:
        """Heading level 1-3, or None for non-heading blocks."""
        levels = {
            BlockKind.HEADING_1: 1,
            BlockKind.HEADING_2: 2,
            BlockKind.HEADING_3: 3
        }
        return levels.get(self.kind)


@dataclass
class ConversionResult:
    """Result of a Markdown conversion: exactly one of data or error is set."""
    data: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'data': self.data,
            'error': self.error,
            'error_kind': self.error_kind
        }


@dataclass
class OptimizationResult:
    """Outcome of one optimize call."""
    original_size: int
    size: Optional[int] = None
    reduction_percent: Optional[int] = None
    method: Optional[str] = None
    data: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'data': self.data,
            'size': self.size,
            'original_size': self.original_size,
            'reduction_percent': self.reduction_percent,
            'method': self.method,
            'error': self.error,
            'error_kind': self.error_kind
        }
