"""Live detection of lists and code blocks for editor indicators"""

import logging

from mdpreview.config import Settings
from mdpreview.core.convert.codeblocks import detect_code_blocks
from mdpreview.core.convert.lists import classify_lines
from mdpreview.core.events import CodeBlocksDetected, EditorEvent, ListsDetected
from mdpreview.core.models import ListDetection, ListKind


logger = logging.getLogger(__name__)


def detect_lists(text: str) -> ListDetection:
    """Report whether text contains ordered and/or unordered list lines."""
    kinds = {c.kind for c in classify_lines(text)}
    return ListDetection(
        has_ordered=ListKind.ordered in kinds,
        has_unordered=ListKind.unordered in kinds,
    )


def detection_events(text: str, settings: Settings = None) -> list[EditorEvent]:
    """Build the indicator events for a buffer snapshot."""
    lists = detect_lists(text)
    code = detect_code_blocks(text, settings)
    if code.count:
        logger.debug("Detected %d code block(s), incomplete=%s", code.count, code.has_incomplete)
    return [
        ListsDetected(has_ordered=lists.has_ordered, has_unordered=lists.has_unordered),
        CodeBlocksDetected(count=code.count, has_incomplete=code.has_incomplete),
    ]
