from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _fresh_current_version(monkeypatch):
    from toolchain_version import config

    monkeypatch.setattr(config, "load_env", lambda: None)
    monkeypatch.delenv("TOOLCHAIN_VERSION", raising=False)
    monkeypatch.delenv("TOOLCHAIN_VERSION_STRICT", raising=False)
    config.reset_current_version()
    yield
    config.reset_current_version()
