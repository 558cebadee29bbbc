"""Inline bold/italic toggling and code block insertion on the editor buffer"""

from mdpreview.core.models import FormatEdit, FormatKind, FormatResult, FormatSpan


BOLD = "**"
ITALIC = "*"
CODE_PLACEHOLDER = "// Your code here"


class EmptySelectionError(ValueError):
    """Raised when a format command is issued without selected text."""


def _check_range(text: str, start: int, end: int) -> None:
    if not 0 <= start <= end <= len(text):
        raise ValueError(f"Selection [{start}, {end}) outside document of length {len(text)}")


def toggle_format(selected: str, kind: FormatKind) -> FormatResult:
    """Strip the kind's delimiters if selected is already wrapped in them, else add them."""
    if not selected:
        raise EmptySelectionError("Select some text to apply formatting")

    kind = FormatKind(kind)
    if kind is FormatKind.bold:
        if selected.startswith(BOLD) and selected.endswith(BOLD) and len(selected) > 4:
            return FormatResult(text=selected[2:-2], kind=kind, removed=True)
        return FormatResult(text=f"{BOLD}{selected}{BOLD}", kind=kind)

    # A leading '**' is bold, never italic.
    if (selected.startswith(ITALIC) and selected.endswith(ITALIC)
            and not selected.startswith(BOLD) and len(selected) > 2):
        return FormatResult(text=selected[1:-1], kind=kind, removed=True)
    return FormatResult(text=f"{ITALIC}{selected}{ITALIC}", kind=kind)


def next_format(kind: FormatKind) -> FormatKind:
    """Alternate bold and italic."""
    return FormatKind.italic if FormatKind(kind) is FormatKind.bold else FormatKind.bold


def selection(text: str, start: int, end: int) -> FormatSpan:
    _check_range(text, start, end)
    return FormatSpan(start=start, end=end, text=text[start:end])


def apply_format(text: str, start: int, end: int, kind: FormatKind) -> FormatEdit:
    """Toggle kind on text[start:end] and splice the result back into text.

    The returned [start, end) spans the replacement so a caller can reselect it.
    Raises EmptySelectionError (text untouched) when start == end.
    """
    span = selection(text, start, end)
    result = toggle_format(span.text, kind)
    return FormatEdit(
        text=text[:span.start] + result.text + text[span.end:],
        start=span.start,
        end=span.start + len(result.text),
        result=result,
    )


def insert_code_block(text: str, start: int, end: int, language: str = "javascript") -> FormatEdit:
    """Insert a fenced code block at the selection.

    A non-empty selection is wrapped in a bare fence and the cursor goes after
    the opening fence; otherwise a language fence with a placeholder line is
    inserted and the cursor goes to the start of that line.
    """
    span = selection(text, start, end)
    if span.text:
        block = f"```\n{span.text}\n```"
        cursor = start + len("```\n")
    else:
        block = f"```{language}\n{CODE_PLACEHOLDER}\n```"
        cursor = start + len(f"```{language}\n")
    return FormatEdit(text=text[:start] + block + text[end:], start=cursor, end=cursor)
