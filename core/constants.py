"""
Constants and configuration values for the conversion pipelines.
"""

# Input ceilings
MAX_MARKDOWN_CHARS = 5 * 1024 * 1024   # 5 MiB of text
MAX_PDF_BYTES = 8 * 1024 * 1024        # 8 MiB decoded

# A4 page geometry for the text layout engine (points)
PAGE_LAYOUT = {
    'page_width': 595,
    'page_height': 842,
    'margin': 50,
    'font_size': 11,
    'line_height_ratio': 1.5,
    'heading_size_delta': 2,
}

# PyMuPDF base-14 font aliases
FONT_REGULAR = 'helv'   # Helvetica
FONT_BOLD = 'hebo'      # Helvetica-Bold

# Heading heuristics
HEADING_MAX_LENGTH = 60
HEADING_MARKER_PATTERN = r'^[=#*]{1,3}\s'
TITLE_CASE_PATTERN = r'^[A-Z][^.!?]*$'

# DOCX structural patterns
NUMBERED_ITEM_PATTERN = r'^\d+\.\s'
EMPHASIS_SPLIT_PATTERN = r'(\*\*.*?\*\*|\*.*?\*|__.*?__|_.*?_)'
EMPHASIS_MARKER_PATTERN = r'\*\*|\*|__|_'

# Markdown -> text conversion
TEXT_WORDWRAP = 80

# Optimization heuristics
TRIVIAL_BYTES_PER_PAGE = 30000
TRIVIAL_CHARS_PER_PAGE = 1000
MIN_REDUCTION_PERCENT = 5

# Optimization methods reported in results
METHOD_RERENDER = 'browser-rerender'
METHOD_SKIPPED = 'skipped'

# Browser print parameters for the re-render stage
PRINT_OPTIONS = {
    'format': 'A4',
    'print_background': False,
    'scale': 0.9,
    'margin': {
        'top': '10mm',
        'right': '10mm',
        'bottom': '10mm',
        'left': '10mm'
    },
    'display_header_footer': False,
}

# Chromium flags for a single-use headless instance
BROWSER_ARGS = [
    '--disable-dev-shm-usage',
    '--disable-gpu',
    '--no-sandbox',
]

# Stylesheet for regenerated HTML
REGENERATED_HTML_STYLE = (
    "body { font-family: Helvetica, Arial, sans-serif; font-size: 11pt; "
    "line-height: 1.4; color: #000; }\n"
    "h2 { font-size: 13pt; margin: 12pt 0 6pt 0; }\n"
    "p { margin: 0 0 6pt 0; }"
)

# User-facing messages, one per error kind
ERROR_MESSAGES = {
    'input_too_large_markdown': 'The file is too large (maximum 5MB of text)',
    'input_too_large_pdf': 'The PDF is too large (maximum 8MB)',
    'parse_error': 'The PDF is corrupt or not valid',
    'parse_error_encrypted': 'The PDF is password protected. Please use an unprotected PDF.',
    'render_error': 'The PDF could not be re-rendered. Try again with another file.',
    'minimal_gain': 'The PDF is already optimized, minimal gain expected',
    'unknown_pdf': 'Error converting the markdown to PDF',
    'unknown_docx': 'Error converting the markdown to DOCX',
    'unknown_optimize': 'Error optimizing the PDF. Try again with another file.',
}
