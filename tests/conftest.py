from __future__ import annotations

from pathlib import Path
from typing import Callable
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture()
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture()
def kitchen(tmp_path: Path, temp_home: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    root = tmp_path / "kitchen"
    root.mkdir()
    monkeypatch.chdir(root)
    monkeypatch.setenv("SHELL", "/bin/sh")
    return root


@pytest.fixture()
def write_cookbook(kitchen: Path) -> Callable[[str], Path]:
    def _write(text: str) -> Path:
        path = kitchen / "cookbook"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
