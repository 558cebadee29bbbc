"""Shared fixtures for core unit tests"""

import pytest

from mdpreview.config import Settings


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- item two

```python
print("hello")
```

1. first
2. second

Closing paragraph.
"""


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings()


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


class RecordingObserver:
    """Collects every event it is notified of."""

    def __init__(self):
        self.events = []

    def notify(self, event):
        self.events.append(event)

    def kinds(self):
        return [e.kind for e in self.events]


@pytest.fixture(name="observer")
def observer_fixture():
    return RecordingObserver()
