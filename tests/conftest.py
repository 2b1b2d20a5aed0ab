"""Pytest configuration for devcontainer_init tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture
def script_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A workspace with an empty .devcontainer directory; restores cwd afterwards."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DEVCONTAINER_SCRIPT_DIR", raising=False)
    monkeypatch.delenv("DEVCONTAINER_INIT_LOG_LEVEL", raising=False)
    directory = tmp_path / ".devcontainer"
    directory.mkdir()
    return directory
