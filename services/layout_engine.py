"""
Text Layout Engine - Lays plain text out onto fixed-size pages.

Performs heading detection, greedy word-wrap and manual pagination,
producing draw commands for the PDF writer.
"""
import logging
from typing import Callable, List

from core.constants import FONT_BOLD, FONT_REGULAR, PAGE_LAYOUT
from core.models import DrawCommand, LayoutResult, PageCursor
from utils.pdf_utils import text_width
from utils.text_utils import is_layout_heading


logger = logging.getLogger(__name__)

# (text, font_name, font_size) -> width in points
MeasureFn = Callable[[str, str, float], float]


class TextLayoutEngine:
    """Lays out text on A4 pages with a single left-aligned column."""

    def __init__(
        self,
        page_width: float = PAGE_LAYOUT['page_width'],
        page_height: float = PAGE_LAYOUT['page_height'],
        margin: float = PAGE_LAYOUT['margin'],
        font_size: float = PAGE_LAYOUT['font_size'],
        line_height_ratio: float = PAGE_LAYOUT['line_height_ratio'],
        heading_size_delta: float = PAGE_LAYOUT['heading_size_delta'],
        measure: MeasureFn = text_width
    ):
        """
        Initialize layout engine.

        Args:
            page_width: Page width in points
            page_height: Page height in points
            margin: Margin on every side in points
            font_size: Base font size
            line_height_ratio: Line height as a multiple of the base font size
            heading_size_delta: Extra points for heading lines
            measure: Text width function (defaults to PyMuPDF base-14 metrics)
        """
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin
        self.font_size = font_size
        self.heading_size = font_size + heading_size_delta
        self.line_height = font_size * line_height_ratio
        self.measure = measure

    @property
    def content_width(self) -> float:
        """Horizontal budget for word-wrap."""
        return self.page_width - 2 * self.margin

    @property
    def top(self) -> float:
        """Baseline of the first line on a fresh page."""
        return self.page_height - self.margin

    def layout(self, text: str) -> LayoutResult:
        """
        Lay out text across as many pages as needed.

        Args:
            text: Plain text, lines separated by newlines

        Returns:
            LayoutResult with draw commands in emission order
        """
        result = LayoutResult(page_count=1)
        cursor = PageCursor(page_index=0, vertical_position=self.top)

        for line in text.split('\n'):
            heading = is_layout_heading(line)
            font_name = FONT_BOLD if heading else FONT_REGULAR
            font_size = self.heading_size if heading else self.font_size

            if line.strip():
                segments = self.wrap(line, font_name, font_size)
                for index, segment in enumerate(segments):
                    if index:
                        cursor.vertical_position -= self.line_height
                    self._ensure_room(cursor, result)
                    result.commands.append(DrawCommand(
                        text=segment,
                        x=self.margin,
                        y=cursor.vertical_position,
                        font_name=font_name,
                        font_size=font_size,
                        page_index=cursor.page_index,
                        is_heading=heading
                    ))

            # Blank lines still take up a line
            cursor.vertical_position -= self.line_height

        logger.info(
            f"Laid out {len(result.commands)} lines on {result.page_count} page(s)"
        )
        return result

    def wrap(self, line: str, font_name: str, font_size: float) -> List[str]:
        """
        Greedy word-wrap against the content width.

        A word wider than the content width is emitted alone, unclipped.

        Args:
            line: Source line
            font_name: Font used for measuring
            font_size: Font size used for measuring

        Returns:
            Wrapped sub-lines
        """
        segments = []
        current = ''

        for word in line.split(' '):
            candidate = f"{current} {word}" if current else word
            if current and self.measure(candidate, font_name, font_size) > self.content_width:
                segments.append(current)
                current = word
            else:
                current = candidate

        if current:
            segments.append(current)

        return segments

    def _ensure_room(self, cursor: PageCursor, result: LayoutResult) -> None:
        """Start a new page when the cursor is within one line of the bottom margin."""
        if cursor.vertical_position < self.margin + self.line_height:
            cursor.page_index += 1
            cursor.vertical_position = self.top
            result.page_count += 1
