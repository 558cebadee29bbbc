"""Unit tests for core/detect.py"""

import pytest

from mdpreview.core.detect import detect_lists, detection_events


@pytest.mark.parametrize("text,ordered,unordered", [
    ("",                      False, False),
    ("1. a",                  True,  False),
    ("  - a",                 False, True),
    ("text\n1. a\n* b",       True,  True),
    ("1.no\n-no",             False, False),
])
def test_detect_lists(text, ordered, unordered):
    """Ordered and unordered items are detected independently."""
    detection = detect_lists(text)
    assert detection.has_ordered is ordered
    assert detection.has_unordered is unordered


def test_detection_events_shape():
    """Indicators are structured events, lists first then code blocks."""
    lists, code = detection_events("- a\n```js\nx")
    assert lists.kind == "listsDetected"
    assert lists.has_unordered and not lists.has_ordered
    assert code.kind == "codeBlocksDetected"
    assert code.count == 1
    assert code.has_incomplete


def test_detection_events_empty_document():
    """An empty document still yields both events, each reporting nothing found."""
    lists, code = detection_events("")
    assert not lists.has_ordered and not lists.has_unordered
    assert code.count == 0
