"""Structured editor events and the observer interface that receives them"""

from typing import Literal, Protocol, Union

from pydantic import BaseModel

from mdpreview.core.models import FormatKind


class CodeBlocksDetected(BaseModel):
    kind: Literal["codeBlocksDetected"] = "codeBlocksDetected"
    count: int
    has_incomplete: bool = False


class ListsDetected(BaseModel):
    kind: Literal["listsDetected"] = "listsDetected"
    has_ordered: bool = False
    has_unordered: bool = False


class FormatApplied(BaseModel):
    kind: Literal["formatApplied"] = "formatApplied"
    format: FormatKind
    action: str                     # "applied" or "removed"
    next_format: FormatKind


class PreviewRendered(BaseModel):
    kind: Literal["previewRendered"] = "previewRendered"
    blocks_processed: int = 0


class ContrastToggled(BaseModel):
    kind: Literal["contrastToggled"] = "contrastToggled"
    active: bool


class CodeBlockInserted(BaseModel):
    kind: Literal["codeBlockInserted"] = "codeBlockInserted"
    language: str = ""              # empty when a selection was wrapped


EditorEvent = Union[
    CodeBlocksDetected, ListsDetected, FormatApplied,
    PreviewRendered, ContrastToggled, CodeBlockInserted,
]


class EditorObserver(Protocol):
    """Receives editor events; the UI layer decides how to present them."""

    def notify(self, event: EditorEvent) -> None: ...
