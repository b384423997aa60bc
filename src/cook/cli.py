from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NoReturn, Optional

from . import __version__
from .config import EffectiveConfig, resolve_config
from .cookbook import load_cookbook
from .errors import CookError, UsageError
from .executor import run_recipe
from .matcher import find_recipe
from .printer import print_body


HELP = """\
Run recipes defined in a cookbook

Usage:
  cook [OPTIONS] [RECIPE] [ARGUMENTS]

Options:
  -l, --list     List all recipes along with their parameters
  -v, --version  Print version and exit
  -h, --help     Print this help message"""


@dataclass(frozen=True)
class CliOptions:
    show_help: bool = False
    show_version: bool = False
    list_recipes: bool = False
    recipe: Optional[str] = None
    arguments: tuple[str, ...] = ()


FLAGS = (("-l", "--list"), ("-v", "--version"), ("-h", "--help"))


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def main(argv: Sequence[str] | None = None) -> int:
    raw = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_options(raw)
        if options.show_help or not raw:
            return _cmd_help(options)
        if options.show_version:
            return _cmd_version(options)

        if options.list_recipes:
            return _cmd_list(options, resolve_config())
        if options.recipe is None:
            return _cmd_help(options)
        return _cmd_run(options, resolve_config())
    except CookError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


def parse_options(argv: Sequence[str]) -> CliOptions:
    parser = _build_parser()
    try:
        args, unknown = parser.parse_known_args(list(argv))
    except UsageError as exc:
        raise UsageError(f"unknown option: {_rejected_option(argv)}") from exc
    if unknown:
        raise UsageError(f"unknown option: {unknown[0]}")
    return CliOptions(
        show_help=args.help,
        show_version=args.version,
        list_recipes=args.list,
        recipe=args.recipe,
        arguments=tuple(args.arguments),
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="cook", add_help=False, allow_abbrev=False)
    for short, long in FLAGS:
        parser.add_argument(short, long, action="store_true")
    # Options are only recognised before the recipe name.
    parser.add_argument("recipe", nargs="?")
    parser.add_argument("arguments", nargs=argparse.REMAINDER)
    return parser


def _rejected_option(argv: Sequence[str]) -> str:
    # argparse only fails on a flag given a value, as in "--list=1" or "-lx".
    known = {flag for pair in FLAGS for flag in pair}
    short_letters = {short[1] for short, _ in FLAGS}
    for token in argv:
        if not token.startswith("-"):
            break
        if token in known:
            continue
        if not token.startswith("--") and set(token[1:]) <= short_letters:
            continue
        return token
    return " ".join(argv)


def _cmd_help(options: CliOptions) -> int:
    print(HELP)
    return 0


def _cmd_version(options: CliOptions) -> int:
    print(f"cook {__version__}")
    return 0


def _cmd_list(options: CliOptions, cfg: EffectiveConfig) -> int:
    for recipe in load_cookbook(cfg.cookbook_path):
        print(recipe.signature)
    return 0


def _cmd_run(options: CliOptions, cfg: EffectiveConfig) -> int:
    cookbook = load_cookbook(cfg.cookbook_path)
    recipe = find_recipe(cookbook, options.recipe or "", options.arguments)
    print_body(recipe)
    return run_recipe(recipe, options.arguments, cfg)
