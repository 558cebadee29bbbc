"""List line classification and run grouping into <ol>/<ul> containers"""

import re
from itertools import groupby

from mdpreview.core.models import ClassifiedLine, ListKind


ORDERED_ITEM_RE = re.compile(r"^(\d+)\.\s+(.+)$")
UNORDERED_ITEM_RE = re.compile(r"^([-*+])\s+(.+)$")
LINE_BREAK_RE = re.compile(r"\r?\n")
DATA_NUMBER_RE = re.compile(r'^<li data-number="\d+">')

CONTAINER_TAGS: dict[ListKind, str] = {
    ListKind.ordered:   "ol",
    ListKind.unordered: "ul",
}


def classify_line(line: str) -> ClassifiedLine:
    """Classify one line as an ordered item, unordered item, or plain text."""
    stripped = line.strip()
    if m := ORDERED_ITEM_RE.match(stripped):
        return ClassifiedLine(ListKind.ordered, line, content=m.group(2), number=m.group(1))
    if m := UNORDERED_ITEM_RE.match(stripped):
        return ClassifiedLine(ListKind.unordered, line, content=m.group(2), marker=m.group(1))
    return ClassifiedLine(ListKind.plain, line)


def split_lines(text: str) -> list[str]:
    """Split text on LF or CRLF line breaks."""
    return LINE_BREAK_RE.split(text)


def classify_lines(text: str) -> list[ClassifiedLine]:
    return [classify_line(line) for line in split_lines(text)]


def _wrap_run(kind: ListKind, run: list[ClassifiedLine]) -> str:
    """Wrap one run of item markers in its container, dropping data-number attributes."""
    tag = CONTAINER_TAGS[kind]
    items = "".join(DATA_NUMBER_RE.sub("<li>", item.markup, count=1) for item in run)
    return f"<{tag}>{items}</{tag}>"


def group_list_items(lines: list[ClassifiedLine]) -> list[str]:
    """Return output lines with each maximal same-kind run collapsed into one container line.

    A plain line or a change of kind ends the current run.
    """
    out: list[str] = []
    for kind, run in groupby(lines, key=lambda c: c.kind):
        if kind is ListKind.plain:
            out.extend(c.line for c in run)
        else:
            out.append(_wrap_run(kind, list(run)))
    return out


def process_lists(text: str) -> str:
    """Classify and group list lines in text; text without list lines is returned unchanged."""
    lines = classify_lines(text)
    if not any(c.is_item for c in lines):
        return text
    return "\n".join(group_list_items(lines))
