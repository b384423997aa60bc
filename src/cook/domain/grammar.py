"""Line-oriented cookbook grammar.

A cookbook is a sequence of recipes followed by optional comment or blank
lines. Each recipe is optional comment/blank lines, one unindented signature
line, then body lines that are blank or start with a space. A comment line
closes the current body.
"""

from __future__ import annotations

from enum import Enum

from ..errors import MalformedCookbookError
from .models import VARIADIC_MARKER, Cookbook, Recipe


class LineKind(str, Enum):
    COMMENT = "comment"
    BLANK = "blank"
    INDENTED = "indented"
    SIGNATURE = "signature"


class _State(str, Enum):
    SEEKING_SIGNATURE = "seeking-signature"
    IN_BODY = "in-body"


def classify_line(line: str) -> LineKind:
    if line.startswith("#"):
        return LineKind.COMMENT
    if not line.strip():
        return LineKind.BLANK
    if line.startswith(" "):
        return LineKind.INDENTED
    return LineKind.SIGNATURE


def validate_cookbook(text: str) -> bool:
    if text and not text.endswith("\n"):
        return False

    state = _State.SEEKING_SIGNATURE
    for line in _split_lines(text):
        kind = classify_line(line)
        if kind is LineKind.SIGNATURE:
            state = _State.IN_BODY
        elif kind is LineKind.COMMENT:
            state = _State.SEEKING_SIGNATURE
        elif kind is LineKind.INDENTED and state is _State.SEEKING_SIGNATURE:
            return False
    return True


def parse_cookbook(text: str) -> Cookbook:
    if not validate_cookbook(text):
        raise MalformedCookbookError()

    recipes: list[Recipe] = []
    signature: str | None = None
    body: list[str] = []

    for line in _split_lines(text):
        kind = classify_line(line)
        if kind is LineKind.SIGNATURE:
            if signature is not None:
                recipes.append(_build_recipe(signature, body))
            signature, body = line, []
        elif kind is LineKind.COMMENT:
            if signature is not None:
                recipes.append(_build_recipe(signature, body))
            signature, body = None, []
        elif signature is not None:
            body.append(line)

    if signature is not None:
        recipes.append(_build_recipe(signature, body))
    return tuple(recipes)


def parse_signature(line: str) -> tuple[str, tuple[str, ...], bool]:
    name, *parameters = line.split()
    variadic = False
    if parameters and parameters[-1] == VARIADIC_MARKER:
        parameters.pop()
        variadic = True
    return name, tuple(parameters), variadic


def _build_recipe(signature_line: str, body_lines: list[str]) -> Recipe:
    signature = signature_line.rstrip()
    name, parameters, variadic = parse_signature(signature)
    return Recipe(
        name=name,
        parameters=parameters,
        variadic=variadic,
        signature=signature,
        body="\n".join(body_lines).rstrip(),
    )


def _split_lines(text: str) -> list[str]:
    # Every line is newline-terminated; drop the empty tail after the last one.
    return text.split("\n")[:-1]
