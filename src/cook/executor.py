from __future__ import annotations

import os
import sys
from typing import Mapping, Optional, Sequence

from .config import DEFAULT_SHELL, EffectiveConfig
from .domain import Recipe
from .errors import ShellError
from .infra import spawn_process


def bind_parameters(recipe: Recipe, arguments: Sequence[str]) -> dict[str, str]:
    return {name: arguments[index] for index, name in enumerate(recipe.parameters)}


def child_environment(parent: Mapping[str, str], bindings: Mapping[str, str]) -> dict[str, str]:
    env = dict(parent)
    env.update(bindings)
    return env


def resolve_shell(environ: Mapping[str, str], default: Optional[str] = None) -> str:
    shell = environ.get("SHELL")
    if shell:
        return shell
    return default or DEFAULT_SHELL


def build_shell_command(shell: str, recipe: Recipe, arguments: Sequence[str]) -> list[str]:
    # $0 is the recipe name; arguments past the declared parameters become $1..$n.
    return [shell, "-c", recipe.body, recipe.name, *arguments[recipe.arity :]]


def exit_status(returncode: int) -> int:
    if returncode < 0:
        return 128 - returncode
    return returncode


def run_recipe(
    recipe: Recipe,
    arguments: Sequence[str],
    cfg: EffectiveConfig,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    parent = os.environ if environ is None else environ
    shell = resolve_shell(parent, cfg.default_shell)
    cmd = build_shell_command(shell, recipe, arguments)
    env = child_environment(parent, bind_parameters(recipe, arguments))

    sys.stdout.flush()
    try:
        returncode = spawn_process(cmd, env=env)
    except FileNotFoundError as exc:
        raise ShellError(f"shell not found: {shell}") from exc
    except PermissionError as exc:
        raise ShellError(f"shell is not executable: {shell}") from exc
    except OSError as exc:
        raise ShellError(f"failed to start shell: {shell}: {exc.strerror}") from exc
    except ValueError as exc:
        # Raised for parameter names the environment cannot hold, e.g. "key=value".
        raise ShellError(f"failed to start shell: {shell}: {exc}") from exc
    return exit_status(returncode)
