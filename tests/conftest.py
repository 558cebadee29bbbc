"""Root test configuration: isolate tests from host MDPREVIEW_* settings"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Drop MDPREVIEW_* env vars and run from an empty directory so no config.yaml is picked up."""
    for name in list(os.environ):
        if name.startswith("MDPREVIEW_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
