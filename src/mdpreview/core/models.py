"""Intermediate data models for the conversion pipeline and editor actions"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ListKind(str, Enum):
    """Classification of a single source line for list grouping"""
    ordered = "ordered"
    unordered = "unordered"
    plain = "plain"


class FormatKind(str, Enum):
    """Inline delimiter pairs the formatter can toggle"""
    bold = "bold"
    italic = "italic"


class ContinuationAction(str, Enum):
    continued = "continued"
    terminated = "terminated"
    none = "none"


@dataclass(frozen=True)
class ClassifiedLine:
    """One source line after list classification; kind depends only on the line itself."""
    kind:    ListKind
    line:    str                    # original source line
    content: str = ""
    number:  Optional[str] = None   # literal number token (ordered only)
    marker:  Optional[str] = None   # bullet character (unordered only)

    @property
    def is_item(self) -> bool:
        return self.kind is not ListKind.plain

    @property
    def markup(self) -> str:
        """Item marker HTML; ordered items carry their number until grouping strips it."""
        if self.kind is ListKind.ordered:
            return f'<li data-number="{self.number}">{self.content}</li>'
        if self.kind is ListKind.unordered:
            return f"<li>{self.content}</li>"
        return self.line


class CodeBlock(BaseModel):
    """A fenced code region found in a document snapshot."""
    index: int
    original: str                   # full matched source, fences included
    language: Optional[str] = None  # as written after the opening fence
    content: str                    # trimmed raw content
    escaped: str                    # HTML-escaped content
    start: int                      # offset of the opening fence in the source
    end: int
    is_complete: bool = True
    css_language: str = "plaintext"
    html: str = ""


class CodeExtraction(BaseModel):
    """Result of replacing every code block in a text."""
    text: str
    blocks: list[CodeBlock] = []
    placeholders: dict[str, str] = {}   # placeholder token -> final block HTML

    @property
    def total(self) -> int:
        return len(self.blocks)

    @property
    def has_incomplete(self) -> bool:
        return any(not b.is_complete for b in self.blocks)

    def restore(self, html: str) -> str:
        """Substitute final code block HTML for every placeholder in html."""
        for token, block_html in self.placeholders.items():
            html = html.replace(token, block_html)
        return html


class CodeDetection(BaseModel):
    """Code block summary used by editor indicators."""
    blocks: list[CodeBlock] = []
    count: int = 0
    has_incomplete: bool = False


class ListDetection(BaseModel):
    has_ordered: bool = False
    has_unordered: bool = False


class RenderResult(BaseModel):
    """Rendered preview HTML plus the code blocks processed to produce it."""
    html: str
    code_blocks: list[CodeBlock] = []

    @property
    def blocks_processed(self) -> int:
        return len(self.code_blocks)


@dataclass(frozen=True)
class FormatSpan:
    """A selection in the document: [start, end) and the selected text."""
    start: int
    end:   int
    text:  str


class FormatResult(BaseModel):
    text: str
    kind: FormatKind
    removed: bool = False           # True when existing delimiters were stripped

    @property
    def action(self) -> str:
        return "removed" if self.removed else "applied"


class FormatEdit(BaseModel):
    """A document after a splice; [start, end) spans the replacement text."""
    text: str
    start: int
    end: int
    result: Optional[FormatResult] = None


class ContinuationResult(BaseModel):
    """Outcome of a newline keystroke; text and offset are unchanged when not intercepted."""
    intercepted: bool
    text: str
    offset: int
    action: ContinuationAction = ContinuationAction.none
