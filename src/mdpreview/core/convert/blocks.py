"""Line-anchored block conversion: headings, lists, and paragraphs"""

import re

from mdpreview.core.convert.codeblocks import PLACEHOLDER_RE
from mdpreview.core.convert.lists import classify_line, group_list_items, split_lines


# Longest prefix first so '###' is never read as level 1 with leftover '#'.
HEADING_PATTERNS: list[tuple[int, re.Pattern]] = [
    (level, re.compile(r"^#{%d}\s+(\S.*?)\s*$" % level)) for level in range(6, 0, -1)
]
BLOCK_TAG_RE = re.compile(r"^(<h[1-6]>|<[uo]l>|<li[ >])")
EMPTY_PARAGRAPH_RE = re.compile(r"^<p>\s*</p>$")


def convert_heading(line: str) -> str:
    """Return line as an <hN> element, or unchanged if it is not a heading."""
    for level, pattern in HEADING_PATTERNS:
        if m := pattern.match(line):
            return f"<h{level}>{m.group(1)}</h{level}>"
    return line


def wrap_paragraph(line: str) -> str:
    """Wrap a non-empty line in <p> unless it already starts with a block tag.

    A code placeholder stands alone even when indented (fences inside list items).
    """
    if PLACEHOLDER_RE.fullmatch(line.strip()):
        return line.strip()
    if not line or BLOCK_TAG_RE.match(line):
        return line
    return f"<p>{line}</p>"


def convert_blocks(text: str) -> str:
    """Convert code-free markdown text to a flat sequence of block elements.

    Passes run in a fixed order over every line: headings, list grouping,
    paragraph wrapping, then empty-paragraph and blank-line cleanup.
    """
    lines = [convert_heading(line) for line in split_lines(text)]
    lines = group_list_items([classify_line(line) for line in lines])
    lines = [wrap_paragraph(line) for line in lines]
    return "\n".join(
        line for line in lines
        if line.strip() and not EMPTY_PARAGRAPH_RE.match(line)
    )
