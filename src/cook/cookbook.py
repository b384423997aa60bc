from __future__ import annotations

from pathlib import Path

from .domain import Cookbook, parse_cookbook
from .errors import MissingFileError


def normalize_text(text: str) -> str:
    return text.strip() + "\n"


def read_cookbook(path: str | Path) -> str:
    cookbook_path = Path(path)
    try:
        text = cookbook_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise MissingFileError(f"Cookbook not found: {cookbook_path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise MissingFileError(f"Failed to read cookbook: {cookbook_path}") from exc
    return normalize_text(text)


def load_cookbook(path: str | Path) -> Cookbook:
    return parse_cookbook(read_cookbook(path))
