"""Render pipeline: code block extraction, block conversion, and HTML assembly"""

import logging

from mdpreview.config import Settings
from mdpreview.core.contrast import apply_heading_contrast
from mdpreview.core.convert.blocks import convert_blocks
from mdpreview.core.convert.codeblocks import extract_code_blocks
from mdpreview.core.models import RenderResult
from mdpreview.core.utils.escape import escape_html


logger = logging.getLogger(__name__)


def render_document(markdown: str, settings: Settings = None, contrast: bool = False) -> RenderResult:
    """Convert a markdown snapshot to preview HTML plus code block metadata.

    Code blocks are swapped for placeholders before the per-line passes and
    restored afterwards, so block conversion never sees fence syntax or code.
    """
    settings = settings or Settings()
    extraction = extract_code_blocks(markdown, settings, placeholders=True)

    text = extraction.text
    if settings.escape_text:
        text = escape_html(text)
    html = extraction.restore(convert_blocks(text))

    if contrast:
        html = apply_heading_contrast(html, settings.contrast_class)
    logger.debug("Rendered %d chars of markdown (%d code block(s))", len(markdown), extraction.total)
    return RenderResult(html=html, code_blocks=extraction.blocks)


def render(markdown: str, settings: Settings = None) -> str:
    """Convert a markdown snapshot to preview HTML."""
    return render_document(markdown, settings).html
