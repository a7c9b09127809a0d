from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for directory trees used across unit and e2e tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from qtree.domain.tree_models import Node  # noqa: E402
from qtree.infra.logging import reset_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """
    Create a small directory hierarchy on disk.

    Structure:
    /project
      README.md
      /src
        main.py
        /pkg
          util.py
      /empty
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / "README.md").write_text("# Docs", encoding="utf-8")

    src = root / "src"
    src.mkdir()
    (src / "main.py").write_text("print('hi')", encoding="utf-8")

    pkg = src / "pkg"
    pkg.mkdir()
    (pkg / "util.py").write_text("", encoding="utf-8")

    (root / "empty").mkdir()
    return root


@pytest.fixture
def two_level_tree() -> Node:
    """root/ -> [fileA, dirB/ -> [fileC]], fixed order."""
    return Node.directory("root", [
        Node.file("fileA"),
        Node.directory("dirB", [Node.file("fileC")]),
    ])


@pytest.fixture(autouse=True)
def clean_logging():
    """Detach qtree handlers so each test starts from an unconfigured root logger."""
    reset_logging()
    yield
    reset_logging()
