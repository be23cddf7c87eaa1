"""Pytest configuration for zipstamp tests."""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep logs and configuration lookups inside the test's tmp dir."""
    monkeypatch.setenv("ZIPSTAMP_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("ZIPSTAMP_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    # CLI tests wire handlers onto streams that are closed afterwards.
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
