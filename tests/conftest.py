import os

import pytest

# Widget tests run without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from yanta.app import config  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the global config file at a per-test location."""
    path = tmp_path / "config" / "yanta" / "config.json"
    monkeypatch.setattr(config, "GLOBAL_CONFIG", path)
    return path
