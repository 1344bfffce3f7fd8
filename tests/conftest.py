"""Shared pytest fixtures."""

import os
from pathlib import Path
from typing import Callable, Iterator

import pytest

from dupscan.config.settings import Settings, reset_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Keep DUPSCAN_* variables and stray .env files out of tests."""
    for key in list(os.environ):
        if key.startswith("DUPSCAN_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Create an empty directory to scan."""
    root = tmp_path / "tree"
    root.mkdir()
    return root


@pytest.fixture
def make_file(tree: Path) -> Callable[[str, bytes], Path]:
    """Return a helper that writes a file relative to the scan tree."""

    def _make(relative: str, content: bytes) -> Path:
        path = tree / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def settings() -> Settings:
    """Create default settings."""
    return Settings()
