"""
Markdown utilities.

Wraps markdown-it-py (Markdown -> HTML) and html2text (HTML -> plain text).
"""
import re

import html2text
from markdown_it import MarkdownIt

from core.constants import TEXT_WORDWRAP


# html2text emits Markdown; these turn its residual syntax into plain text
HEADING_MARKER_RE = re.compile(r'^#{1,6}[ \t]+', re.MULTILINE)
INLINE_LINK_RE = re.compile(r'\[([^\]\n]*)\]\(([^)\s]+)(?:[ \t]+"[^"\n]*")?\)')
AUTO_LINK_RE = re.compile(r'<((?:https?|ftp|mailto):[^>\s]+)>')
ESCAPED_CHAR_RE = re.compile(r'\\([\\`*_{}\[\]()#+\-.!])')


def build_markdown_parser() -> MarkdownIt:
    """
    Create a CommonMark parser with raw HTML, link auto-detection and
    typographic replacements enabled.
    """
    md = MarkdownIt("commonmark", {"html": True, "linkify": True, "typographer": True})
    md.enable(["linkify", "replacements", "smartquotes"])
    return md


def markdown_to_html(markdown: str) -> str:
    """
    Render markdown to HTML.

    Args:
        markdown: Markdown source

    Returns:
        HTML fragment
    """
    return build_markdown_parser().render(markdown)


def _link_text(match) -> str:
    text, url = match.group(1), match.group(2)
    if not text or text == url:
        return url
    return f"{text} [{url}]"


def html_to_text(html: str, wordwrap: int = TEXT_WORDWRAP) -> str:
    """
    Convert HTML to formatted plain text.

    Emphasis and heading markers are dropped, headings keep their original
    case, links become ``text [url]`` and list items keep ``-`` / ``1.``
    prefixes.

    Args:
        html: HTML fragment
        wordwrap: Column to wrap paragraphs at

    Returns:
        Plain text
    """
    converter = html2text.HTML2Text()
    converter.body_width = wordwrap
    converter.ignore_links = False
    converter.ignore_images = True
    converter.ignore_emphasis = True
    converter.wrap_links = False
    converter.ul_item_mark = '-'
    converter.unicode_snob = True

    text = converter.handle(html)
    text = HEADING_MARKER_RE.sub('', text)
    text = INLINE_LINK_RE.sub(_link_text, text)
    text = AUTO_LINK_RE.sub(r'\1', text)
    return ESCAPED_CHAR_RE.sub(r'\1', text)


def markdown_to_text(markdown: str, wordwrap: int = TEXT_WORDWRAP) -> str:
    """Render markdown to HTML and flatten it to plain text."""
    return html_to_text(markdown_to_html(markdown), wordwrap=wordwrap)
