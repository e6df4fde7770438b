"""
Test configuration: add project root to sys.path for package imports,
and provide a small on-disk document set.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """Write two documents, a docs file and a noise words file to tmp_path."""
    (tmp_path / "doc1.txt").write_text("Ant bee cat.\n", encoding="utf-8")
    (tmp_path / "doc2.txt").write_text("Bee bee dog!\nThe dog, the end.\n", encoding="utf-8")
    (tmp_path / "docs.txt").write_text("doc1.txt\ndoc2.txt\n", encoding="utf-8")
    (tmp_path / "noisewords.txt").write_text("the\na\n", encoding="utf-8")
    return tmp_path
