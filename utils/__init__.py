"""Utilities package - Helper functions for text, markdown, HTML and PDF processing."""

from .text_utils import (
    is_heading,
    is_layout_heading,
    is_html_heading,
    has_emphasis_markers,
    escape_html,
    reduction_percent,
    format_bytes,
    output_filename
)

from .markdown_utils import (
    markdown_to_html,
    html_to_text,
    markdown_to_text
)

from .html_utils import (
    text_to_html_blocks,
    generate_html
)

from .pdf_utils import (
    text_width,
    render_layout_to_pdf,
    extract_pdf_content,
    rewrite_metadata
)

__all__ = [
    # Text utils
    'is_heading',
    'is_layout_heading',
    'is_html_heading',
    'has_emphasis_markers',
    'escape_html',
    'reduction_percent',
    'format_bytes',
    'output_filename',

    # Markdown utils
    'markdown_to_html',
    'html_to_text',
    'markdown_to_text',

    # HTML utils
    'text_to_html_blocks',
    'generate_html',

    # PDF utils
    'text_width',
    'render_layout_to_pdf',
    'extract_pdf_content',
    'rewrite_metadata'
]
