"""
Text utilities for the conversion pipelines.

Handles heading classification, HTML escaping and size reporting.
"""
import html
import math
import os
import re
from typing import Optional

from core.constants import (
    HEADING_MAX_LENGTH,
    HEADING_MARKER_PATTERN,
    TITLE_CASE_PATTERN,
    EMPHASIS_MARKER_PATTERN
)


def is_heading(
    line: str,
    max_length: int = HEADING_MAX_LENGTH,
    marker_pattern: Optional[str] = None,
    allow_title_case: bool = False
) -> bool:
    """
    Classify a line of plain text as a heading.

    A line matching ``marker_pattern`` is always a heading. Otherwise it must
    be shorter than ``max_length`` and either entirely uppercase or, when
    ``allow_title_case`` is set, start with a capital and contain no
    sentence punctuation.

    Note that any short all-caps line (including blank or numeric lines)
    is treated as a heading.

    Args:
        line: Line of text
        max_length: Exclusive length limit for the uppercase/title-case tests
        marker_pattern: Optional regex for explicit heading markers
        allow_title_case: Also accept ``^[A-Z][^.!?]*$`` lines

    Returns:
        True if the line is a heading
    """
    if marker_pattern and re.match(marker_pattern, line):
        return True

    if len(line) >= max_length:
        return False

    if line.upper() == line:
        return True

    return allow_title_case and re.match(TITLE_CASE_PATTERN, line) is not None


def is_layout_heading(line: str) -> bool:
    """Heading rule used by the Markdown->PDF layout engine."""
    return is_heading(line, marker_pattern=HEADING_MARKER_PATTERN)


def is_html_heading(line: str) -> bool:
    """Heading rule used when regenerating HTML from extracted PDF text."""
    return is_heading(line, allow_title_case=True)


def has_emphasis_markers(line: str) -> bool:
    """Check whether a line contains bold/italic delimiters."""
    return re.search(EMPHASIS_MARKER_PATTERN, line) is not None


def escape_html(text: str) -> str:
    """Escape text for safe inclusion in generated HTML."""
    return html.escape(text, quote=True)


def reduction_percent(original_size: int, final_size: int) -> int:
    """
    Percentage saved, rounded half up.

    Args:
        original_size: Size before optimization in bytes
        final_size: Size after optimization in bytes

    Returns:
        round((original - final) / original * 100); negative when the output grew
    """
    if original_size <= 0:
        return 0
    return math.floor((original_size - final_size) / original_size * 100 + 0.5)


def format_bytes(size: int) -> str:
    """Human-readable size: Bytes, KB or MB with up to two decimals."""
    if size == 0:
        return '0 Bytes'

    units = ['Bytes', 'KB', 'MB']
    index = 0
    while index < len(units) - 1 and size >= 1024 ** (index + 1):
        index += 1
    value = round(size / 1024 ** index, 2)
    return f"{value:g} {units[index]}"


def output_filename(input_name: str, extension: str) -> str:
    """
    Derive an output file name from an input file name.

    ``notes.md`` -> ``notes.pdf``; a PDF going back to PDF gets an
    ``.optimized`` infix so the source is never overwritten.
    """
    stem, ext = os.path.splitext(input_name)
    if ext.lower() == extension.lower():
        return f"{stem}.optimized{extension}"
    return f"{stem}{extension}"
