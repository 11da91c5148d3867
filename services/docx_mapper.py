"""
DOCX Structural Mapper - Maps raw markdown lines to document blocks.

Each source line becomes exactly one block, in order. Inline bold/italic
is split with a single regex; nested emphasis is not supported.
"""
import re
from io import BytesIO
from typing import List

from docx import Document

from core.constants import EMPHASIS_SPLIT_PATTERN, NUMBERED_ITEM_PATTERN
from core.models import BlockKind, DocxBlock, TextRun
from utils.text_utils import has_emphasis_markers


HEADING_PREFIXES = [
    ('# ', BlockKind.HEADING_1),
    ('## ', BlockKind.HEADING_2),
    ('### ', BlockKind.HEADING_3),
]

BULLET_PREFIXES = ('- ', '* ')


def split_emphasis(line: str) -> List[TextRun]:
    """
    Split a line into literal and bold/italic runs.

    ``**x**`` and ``__x__`` are bold, ``*x*`` and ``_x_`` italic. The first
    alternative that matches at a position wins.

    Args:
        line: Paragraph text

    Returns:
        List of TextRun in source order
    """
    runs = []
    for part in re.split(EMPHASIS_SPLIT_PATTERN, line):
        if part.startswith('**') and part.endswith('**'):
            runs.append(TextRun(part[2:-2], bold=True))
        elif part.startswith('*') and part.endswith('*'):
            runs.append(TextRun(part[1:-1], italic=True))
        elif part.startswith('__') and part.endswith('__'):
            runs.append(TextRun(part[2:-2], bold=True))
        elif part.startswith('_') and part.endswith('_'):
            runs.append(TextRun(part[1:-1], italic=True))
        elif part:
            runs.append(TextRun(part))
    return runs


def map_line(line: str) -> DocxBlock:
    """Map one markdown line to a block."""
    if not line.strip():
        return DocxBlock(BlockKind.PARAGRAPH)

    for prefix, kind in HEADING_PREFIXES:
        if line.startswith(prefix):
            return DocxBlock(kind, [TextRun(line[len(prefix):])])

    if line.startswith(BULLET_PREFIXES):
        return DocxBlock(BlockKind.BULLET, [TextRun(line[2:])])

    if re.match(NUMBERED_ITEM_PATTERN, line):
        return DocxBlock(
            BlockKind.NUMBERED,
            [TextRun(re.sub(NUMBERED_ITEM_PATTERN, '', line, count=1))]
        )

    if has_emphasis_markers(line):
        return DocxBlock(BlockKind.PARAGRAPH, split_emphasis(line))

    return DocxBlock(BlockKind.PARAGRAPH, [TextRun(line)])


def map_markdown_to_blocks(markdown: str) -> List[DocxBlock]:
    """
    Map raw markdown to structural blocks, one per line.

    Args:
        markdown: Markdown source

    Returns:
        Blocks in input line order
    """
    return [map_line(line) for line in markdown.split('\n')]


def build_docx(blocks: List[DocxBlock]) -> bytes:
    """
    Assemble blocks into a DOCX package.

    Args:
        blocks: Mapped blocks

    Returns:
        DOCX bytes
    """
    doc = Document()

    for block in blocks:
        if block.heading_level:
            doc.add_heading(block.text, level=block.heading_level)
        elif block.kind == BlockKind.BULLET:
            doc.add_paragraph(block.text, style='List Bullet')
        elif block.kind == BlockKind.NUMBERED:
            doc.add_paragraph(block.text, style='List Number')
        else:
            paragraph = doc.add_paragraph()
            for run in block.runs:
                docx_run = paragraph.add_run(run.text)
                if run.bold:
                    docx_run.bold = True
                if run.italic:
                    docx_run.italic = True

    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()
