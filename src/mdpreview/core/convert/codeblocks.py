"""Fenced code block extraction, escaping, and detection"""

import logging
import re

from mdpreview.config import Settings
from mdpreview.core.models import CodeBlock, CodeDetection, CodeExtraction
from mdpreview.core.utils.escape import escape_html


logger = logging.getLogger(__name__)

# Opening fence, optional bare language token, then content up to a closing fence or end of input.
CODE_BLOCK_RE = re.compile(r"```(\w+)?\n?(.*?)(```|\Z)", re.DOTALL)
PLACEHOLDER = "\x00CODEBLOCK{index}\x00"
PLACEHOLDER_RE = re.compile(r"\x00CODEBLOCK\d+\x00")


def _to_block(m: re.Match, index: int, settings: Settings) -> CodeBlock:
    """Build a CodeBlock (including its final HTML) from a fence match."""
    language = m.group(1)
    content = m.group(2).strip()
    escaped = escape_html(content)
    css_language = language.lower() if language else settings.default_language
    html = (
        f'<pre class="{settings.pre_class}">'
        f'<code class="{settings.code_class} language-{css_language}">{escaped}</code>'
        f"</pre>"
    )
    return CodeBlock(
        index=index,
        original=m.group(0),
        language=language,
        content=content,
        escaped=escaped,
        start=m.start(),
        end=m.end(),
        is_complete=bool(m.group(3)),
        css_language=css_language,
        html=html,
    )


def find_code_blocks(text: str, settings: Settings = None) -> list[CodeBlock]:
    """Return every fenced region in text, in source order."""
    settings = settings or Settings()
    return [_to_block(m, i, settings) for i, m in enumerate(CODE_BLOCK_RE.finditer(text))]


def extract_code_blocks(text: str, settings: Settings = None, placeholders: bool = False) -> CodeExtraction:
    """Replace each fenced block in text with its HTML, or with a placeholder token.

    With placeholders=True the returned text carries opaque tokens and
    CodeExtraction.restore() puts the block HTML back after other passes ran.
    """
    blocks = find_code_blocks(text, settings)
    if not blocks:
        return CodeExtraction(text=text)

    parts = []
    tokens: dict[str, str] = {}
    cursor = 0
    for block in blocks:
        parts.append(text[cursor:block.start])
        if placeholders:
            token = PLACEHOLDER.format(index=block.index)
            tokens[token] = block.html
            parts.append(token)
        else:
            parts.append(block.html)
        cursor = block.end
    parts.append(text[cursor:])

    for block in blocks:
        if not block.is_complete:
            logger.warning("Unterminated code fence at offset %d", block.start)
    logger.debug("Processed %d code block(s)", len(blocks))
    return CodeExtraction(text="".join(parts), blocks=blocks, placeholders=tokens)


def detect_code_blocks(text: str, settings: Settings = None) -> CodeDetection:
    """Summarize code blocks in text for an indicator; produces no merged output."""
    blocks = find_code_blocks(text, settings)
    return CodeDetection(
        blocks=blocks,
        count=len(blocks),
        has_incomplete=any(not b.is_complete for b in blocks),
    )
