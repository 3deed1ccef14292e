from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from viewremote.locator import REPO_MARKERS
from viewremote.repository import DEFAULT_REMOTE

CONFIG_ENV_VAR = "VIEWREMOTE_CONFIG"
REMOTE_ENV_VAR = "VIEWREMOTE_REMOTE"
DEFAULT_CONFIG_PATH = Path("~/.config/viewremote/config.yaml")


class ConfigError(ValueError):
    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


@dataclass(frozen=True)
class Settings:
    remote: str = DEFAULT_REMOTE
    markers: tuple[str, ...] = REPO_MARKERS


def load_settings(
    path: Path | None = None, environ: Mapping[str, str] | None = None
) -> Settings:
    """Load settings from the YAML config file, then apply environment overrides.

    An explicitly given ``path`` (or ``$VIEWREMOTE_CONFIG``) must exist; the
    default location is optional.
    """
    if environ is None:
        environ = os.environ
    config_path, required = _config_path(path, environ)
    metadata: Mapping[str, Any] = {}
    if config_path.exists():
        metadata = _read_config(config_path)
    elif required:
        raise ConfigError(config_path, "Config file does not exist.")

    remote = _optional_str(metadata, "remote", config_path) or DEFAULT_REMOTE
    markers = _optional_markers(metadata, config_path) or REPO_MARKERS
    remote = environ.get(REMOTE_ENV_VAR) or remote
    return Settings(remote=remote, markers=markers)


def _config_path(path: Path | None, environ: Mapping[str, str]) -> tuple[Path, bool]:
    if path is not None:
        return path, True
    env_path = environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser(), True
    return DEFAULT_CONFIG_PATH.expanduser(), False


def _read_config(path: Path) -> Mapping[str, Any]:
    try:
        metadata = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(path, f"Invalid YAML: {exc}") from exc
    if metadata is None:
        return {}
    if not isinstance(metadata, dict):
        raise ConfigError(path, "Config must be a mapping.")
    return metadata


def _optional_str(metadata: Mapping[str, Any], key: str, path: Path) -> str | None:
    value = metadata.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(path, f"Expected '{key}' to be a non-empty string.")
    return value


def _optional_str_list(metadata: Mapping[str, Any], key: str, path: Path) -> tuple[str, ...]:
    value = metadata.get(key)
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(path, f"Expected '{key}' to be a list of strings.")
    return tuple(value)


def _optional_markers(metadata: Mapping[str, Any], path: Path) -> tuple[str, ...]:
    markers = _optional_str_list(metadata, "markers", path)
    for marker in markers:
        # an empty name would match every directory
        if not marker.strip() or "/" in marker or "\\" in marker or marker in {".", ".."}:
            raise ConfigError(path, f"Invalid marker '{marker}': expected a plain file name.")
    return markers
