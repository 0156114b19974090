from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests.helpers import set_mtime


@pytest.fixture
def server_root(tmp_path: Path) -> Path:
    root = tmp_path / "servers"
    root.mkdir()
    return root


@pytest.fixture
def make_version(server_root: Path):
    def _make(name: str, mtime: float, with_worlds: bool = True) -> Path:
        version_dir = server_root / name
        version_dir.mkdir()
        if with_worlds:
            (version_dir / "worlds").mkdir()
        set_mtime(version_dir, mtime)
        return version_dir

    return _make


@pytest.fixture(autouse=True)
def reset_root_logger():
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    yield
    root_logger.setLevel(original_level)
    for handler in root_logger.handlers[:]:
        if handler in original_handlers:
            continue
        root_logger.removeHandler(handler)
        handler.close()
