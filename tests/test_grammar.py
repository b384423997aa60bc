from __future__ import annotations

import pytest

from cook.domain import LineKind, Recipe, classify_line, parse_cookbook, parse_signature, validate_cookbook
from cook.errors import MalformedCookbookError


SAMPLE = """\
# Greets someone
greet name
  echo hello $name

# Build everything
build target ...
  echo building $target
  echo extra "$@"

clean
  rm -rf build
"""


def test_classify_line() -> None:
    assert classify_line("# note") is LineKind.COMMENT
    assert classify_line("") is LineKind.BLANK
    assert classify_line("    ") is LineKind.BLANK
    assert classify_line("  echo hi") is LineKind.INDENTED
    assert classify_line("greet name") is LineKind.SIGNATURE


def test_validate_sample() -> None:
    assert validate_cookbook(SAMPLE)


def test_validate_empty() -> None:
    assert validate_cookbook("\n")
    assert validate_cookbook("")


def test_validate_only_comments() -> None:
    assert validate_cookbook("# one\n\n# two\n")


def test_validate_indented_without_signature() -> None:
    assert not validate_cookbook("  echo orphan\n")


def test_validate_indented_after_comment() -> None:
    text = "greet\n  echo hi\n# comment\n  echo orphan\n"
    assert not validate_cookbook(text)


def test_validate_requires_trailing_newline() -> None:
    assert not validate_cookbook("greet\n  echo hi")


def test_validate_bare_signature() -> None:
    assert validate_cookbook("not a recipe\n")


def test_parse_sample() -> None:
    cookbook = parse_cookbook(SAMPLE)
    assert [recipe.name for recipe in cookbook] == ["greet", "build", "clean"]

    greet, build, clean = cookbook
    assert greet == Recipe(
        name="greet",
        parameters=("name",),
        variadic=False,
        signature="greet name",
        body="  echo hello $name",
    )
    assert build.parameters == ("target",)
    assert build.variadic is True
    assert build.signature == "build target ..."
    assert build.body == '  echo building $target\n  echo extra "$@"'
    assert clean.parameters == ()
    assert clean.body == "  rm -rf build"


def test_parse_comment_closes_body() -> None:
    cookbook = parse_cookbook("a\n  echo a\n# about b\nb\n  echo b\n")
    assert [recipe.body for recipe in cookbook] == ["  echo a", "  echo b"]


def test_parse_keeps_internal_blank_lines() -> None:
    (recipe,) = parse_cookbook("a\n  echo one\n\n    echo two\n\n\n")
    assert recipe.body == "  echo one\n\n    echo two"


def test_parse_trims_signature_trailing_whitespace() -> None:
    (recipe,) = parse_cookbook("greet   name   \n  echo hi\n")
    assert recipe.signature == "greet   name"
    assert recipe.parameters == ("name",)


def test_parse_recipe_without_body() -> None:
    (first, second) = parse_cookbook("first\nsecond\n  echo 2\n")
    assert first.body == ""
    assert second.body == "  echo 2"


def test_parse_duplicates_kept_in_order() -> None:
    cookbook = parse_cookbook("x\n  echo 1\nx a\n  echo 2\nx\n  echo 3\n")
    assert [recipe.body for recipe in cookbook] == ["  echo 1", "  echo 2", "  echo 3"]


def test_parse_malformed_raises() -> None:
    with pytest.raises(MalformedCookbookError, match="malformed cookbook"):
        parse_cookbook("  echo orphan\n")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("greet", ("greet", (), False)),
        ("greet name", ("greet", ("name",), False)),
        ("copy src dst", ("copy", ("src", "dst"), False)),
        ("build ...", ("build", (), True)),
        ("run a b ...", ("run", ("a", "b"), True)),
        ("odd ... a", ("odd", ("...", "a"), False)),
        ("...", ("...", (), False)),
        ("tabbed\tname", ("tabbed", ("name",), False)),
    ],
)
def test_parse_signature(line: str, expected: tuple[str, tuple[str, ...], bool]) -> None:
    assert parse_signature(line) == expected


def test_canonical_signature_matches_tokens() -> None:
    cookbook = parse_cookbook("run   a  b   ...\n  true\ngreet\tname\n  true\nplain\n")
    for recipe in cookbook:
        assert recipe.canonical_signature().split() == recipe.signature.split()
    assert cookbook[0].canonical_signature() == "run a b ..."
    assert cookbook[0].arity == 2
