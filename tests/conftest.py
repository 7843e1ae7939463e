from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict

import pytest


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """Write {relative_path: source} under a fresh directory and return it."""

    def _make(files: Dict[str, str]) -> Path:
        root = tmp_path / "src_tree"
        root.mkdir()
        for rel, text in files.items():
            p = root / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text(text, encoding="utf-8")
        return root

    return _make


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "GHERKIN_HARVEST_EXT",
        "GHERKIN_HARVEST_KEEP_DELIMITERS",
        "GHERKIN_HARVEST_WORKERS",
        "GHERKIN_HARVEST_SKIP_DIRS",
    ):
        monkeypatch.delenv(name, raising=False)
