from __future__ import annotations

import sys
from typing import TextIO

from .domain import Recipe


ECHO_PREFIX = "> "


def body_indentation(body: str) -> int:
    return len(body) - len(body.lstrip(" "))


def format_body(recipe: Recipe) -> list[str]:
    # One offset for the whole body, taken from its first line. Shallower
    # lines further down lose characters, not just spaces.
    offset = body_indentation(recipe.body)
    return [f"{ECHO_PREFIX}{line[offset:]}" for line in recipe.body.split("\n")]


def print_body(recipe: Recipe, stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stdout
    for line in format_body(recipe):
        print(line, file=out)
    out.flush()
