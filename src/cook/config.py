from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import tomllib
from typing import Any, Mapping, Optional

from .errors import ConfigError


DEFAULT_COOKBOOK = "cookbook"
DEFAULT_SHELL = "/bin/sh"


@dataclass(frozen=True)
class EffectiveConfig:
    cookbook_path: str
    default_shell: str = DEFAULT_SHELL


def _config_root() -> Path:
    return Path(os.path.expanduser("~/.config/cook"))


def load_global_config() -> dict[str, Any]:
    path = _config_root() / "config.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Failed to read config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config: {path}") from exc


def resolve_config(cwd: Optional[str] = None) -> EffectiveConfig:
    global_cfg = load_global_config()
    root = Path(cwd or os.getcwd())

    cookbook = _string_setting(global_cfg, "cookbook", DEFAULT_COOKBOOK)
    default_shell = _string_setting(global_cfg, "default_shell", DEFAULT_SHELL)

    return EffectiveConfig(
        cookbook_path=str(root / cookbook),
        default_shell=default_shell,
    )


def _string_setting(cfg: Mapping[str, Any], key: str, default: str) -> str:
    value = cfg.get(key, default)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} must be a non-empty string")
    return value
