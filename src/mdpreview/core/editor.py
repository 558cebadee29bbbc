"""Editor session: owns the buffer and dispatches edit actions to the core"""

import logging
from typing import Optional

from mdpreview.config import Settings
from mdpreview.core.contrast import apply_heading_contrast, remove_heading_contrast
from mdpreview.core.continuation import continue_list
from mdpreview.core.detect import detection_events
from mdpreview.core.events import (
    CodeBlockInserted,
    ContrastToggled,
    EditorEvent,
    EditorObserver,
    FormatApplied,
    PreviewRendered,
)
from mdpreview.core.formatting import apply_format, insert_code_block, next_format
from mdpreview.core.models import ContinuationResult, FormatEdit, FormatKind
from mdpreview.core.pipeline import render_document


logger = logging.getLogger(__name__)


class EditorSession:
    """The state a preview editor keeps between user actions.

    Each method runs one action to completion: it reads the buffer, computes
    the change, stores the new buffer, and notifies observers.
    """

    def __init__(self, text: str = "", settings: Settings = None):
        self.text = text
        self.settings = settings or Settings()
        self.format_kind = FormatKind.bold
        self.contrast_active = False
        self.preview = ""
        self._observers: list[EditorObserver] = []

    def subscribe(self, observer: EditorObserver) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: EditorObserver) -> None:
        self._observers.remove(observer)

    def _publish(self, event: EditorEvent) -> None:
        for observer in self._observers:
            observer.notify(event)

    def on_input(self, text: str) -> None:
        """Replace the buffer after a direct keystroke and refresh indicators."""
        self.text = text
        for event in detection_events(text, self.settings):
            self._publish(event)

    def render(self) -> str:
        result = render_document(self.text, self.settings, contrast=self.contrast_active)
        self.preview = result.html
        self._publish(PreviewRendered(blocks_processed=result.blocks_processed))
        return self.preview

    def toggle_contrast(self) -> bool:
        """Flip heading contrast and re-apply it to the current preview."""
        self.contrast_active = not self.contrast_active
        if self.contrast_active:
            self.preview = apply_heading_contrast(self.preview, self.settings.contrast_class)
        else:
            self.preview = remove_heading_contrast(self.preview, self.settings.contrast_class)
        self._publish(ContrastToggled(active=self.contrast_active))
        return self.contrast_active

    def on_format_command(self, start: int, end: int, kind: Optional[FormatKind] = None) -> FormatEdit:
        """Toggle a format on the selection.

        Without an explicit kind the session's current format is used and then
        advanced to the other one. EmptySelectionError leaves everything as is.
        """
        use = FormatKind(kind) if kind is not None else self.format_kind
        edit = apply_format(self.text, start, end, use)
        self.text = edit.text
        if kind is None:
            self.format_kind = next_format(self.format_kind)
        logger.debug("Format %s %s on [%d, %d)", use.value, edit.result.action, start, end)
        self._publish(FormatApplied(format=use, action=edit.result.action, next_format=self.format_kind))
        return edit

    def on_newline_key(self, offset: int) -> ContinuationResult:
        """Handle Enter at offset; when not intercepted the caller inserts the newline."""
        result = continue_list(self.text, offset)
        if result.intercepted:
            self.text = result.text
        return result

    def insert_code_block(self, start: int, end: int, language: str = "javascript") -> FormatEdit:
        wrapped = start != end
        edit = insert_code_block(self.text, start, end, language)
        self.text = edit.text
        self._publish(CodeBlockInserted(language="" if wrapped else language))
        return edit
