"""List continuation on Enter: continue, increment, or terminate the current list"""

import re

from mdpreview.core.models import ContinuationAction, ContinuationResult


ORDERED_LINE_RE = re.compile(r"^(\s*)(\d+)\.\s+(.*)$")
UNORDERED_LINE_RE = re.compile(r"^(\s*)([-*+])\s+(.*)$")


def current_line(text: str, offset: int) -> str:
    """Return the text between the last newline before offset and offset."""
    return text[:offset].rsplit("\n", 1)[-1]


def _terminate(text: str, offset: int, line: str) -> ContinuationResult:
    """Delete the empty item line; the cursor lands where it began."""
    start = offset - len(line)
    return ContinuationResult(
        intercepted=True,
        text=text[:start] + text[offset:],
        offset=start,
        action=ContinuationAction.terminated,
    )


def _insert(text: str, offset: int, item: str) -> ContinuationResult:
    insertion = f"\n{item}"
    return ContinuationResult(
        intercepted=True,
        text=text[:offset] + insertion + text[offset:],
        offset=offset + len(insertion),
        action=ContinuationAction.continued,
    )


def continue_list(text: str, offset: int) -> ContinuationResult:
    """Decide what an Enter keystroke at offset does to a list item line.

    Ordered items continue with the next number, unordered items with the same
    bullet; an item with blank content ends the list instead. Any other line
    is left to the default newline behaviour.
    """
    if not 0 <= offset <= len(text):
        raise ValueError(f"Cursor offset {offset} outside document of length {len(text)}")

    line = current_line(text, offset)

    if m := ORDERED_LINE_RE.match(line):
        indent, number, content = m.groups()
        if not content.strip():
            return _terminate(text, offset, line)
        return _insert(text, offset, f"{indent}{int(number) + 1}. ")

    if m := UNORDERED_LINE_RE.match(line):
        indent, bullet, content = m.groups()
        if not content.strip():
            return _terminate(text, offset, line)
        return _insert(text, offset, f"{indent}{bullet} ")

    return ContinuationResult(intercepted=False, text=text, offset=offset)
