"""
HTML utilities for the PDF re-render pipeline.

Turns extracted PDF text into a small semantic HTML document.
"""
from typing import List

from core.constants import REGENERATED_HTML_STYLE
from utils.text_utils import escape_html, is_html_heading


def text_to_html_blocks(text: str) -> List[str]:
    """
    Convert extracted text to HTML block elements.

    Blank lines are dropped; heading-like lines become ``<h2>``, everything
    else ``<p>``. All text is escaped.

    Args:
        text: Extracted text

    Returns:
        List of HTML element strings
    """
    blocks = []
    for raw_line in text.split('\n'):
        line = raw_line.strip()
        if not line:
            continue
        tag = 'h2' if is_html_heading(line) else 'p'
        blocks.append(f"<{tag}>{escape_html(line)}</{tag}>")
    return blocks


def generate_html(text: str, title: str = "Document") -> str:
    """
    Build a standalone HTML document from extracted text.

    Args:
        text: Extracted text
        title: Document title

    Returns:
        HTML string
    """
    body = "\n".join(text_to_html_blocks(text))
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape_html(title)}</title>\n"
        f"<style>\n{REGENERATED_HTML_STYLE}\n</style>\n"
        "</head>\n"
        f"<body>\n{body}\n</body>\n"
        "</html>\n"
    )
