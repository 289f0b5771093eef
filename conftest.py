"""
Root-level shared test fixtures.

Inherited by the rbw adapter tests and the top-level tests/ suite.
"""

from __future__ import annotations

import pytest

from bwenv.config import reset_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove env vars that leak between tests and reset the config singleton."""
    for key in [
        "BWENV_FOLDER",
        "BWENV_RBW_BIN",
        "BWENV_SPINNER",
        "RBW_TTY",
    ]:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()
