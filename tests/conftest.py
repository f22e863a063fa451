from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from adder.infrastructure import logging_setup
from adder.infrastructure.config import reload_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test with default LOG_LEVEL/DEBUG settings and unconfigured logging."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.setattr(logging_setup, "_configured", False)
    root = logging.getLogger()
    root_level = root.level
    reload_config()
    yield
    monkeypatch.undo()
    root.setLevel(root_level)
    reload_config()
