from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from oui.errors import EnvError
from oui.log import get_logger
from oui.models import Settings

logger = get_logger("config")

CONFIG_NAME = ".oui.toml"
LOCAL_CONFIG_NAME = "oui.toml"
DATA_SUBDIR = Path(".local") / "share" / "oui"
TABLE_FILENAME = "IEEE_OUI.csv"


def _config_paths(environ: Mapping[str, str]) -> list[Path]:
    paths = []
    home = environ.get("HOME")
    if home:
        paths.append(Path(home) / CONFIG_NAME)
    paths.append(Path(LOCAL_CONFIG_NAME))
    return paths


def load_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Load configuration from:
    1. ~/.oui.toml
    2. ./oui.toml

    The local file overrides the global one. Files that cannot be read or
    parsed are skipped with a warning.
    """
    if environ is None:
        environ = os.environ
    config: Dict[str, Any] = {}
    for path in _config_paths(environ):
        if not path.is_file():
            continue
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("failed to load config %s: %s", path, e)
            continue
        _deep_update(config, data)
    return config


def _deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, dict) and key in target and isinstance(target[key], dict):
            _deep_update(target[key], value)
        else:
            target[key] = value


def load_settings(config: Dict[str, Any]) -> Settings:
    """Validate ``config``, dropping only the fields that fail validation."""
    try:
        return Settings.model_validate(config)
    except ValidationError as e:
        invalid = {error["loc"][0] for error in e.errors() if error["loc"]}
        logger.warning("ignoring invalid configuration: %s", e)
    remaining = {key: value for key, value in config.items() if key not in invalid}
    try:
        return Settings.model_validate(remaining)
    except ValidationError as e:
        logger.warning("ignoring invalid configuration: %s", e)
        return Settings()


def resolve_table_path(settings: Settings, environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return the reference table location.

    An explicit ``table`` setting wins; otherwise the table is expected at
    ``$HOME/.local/share/oui/IEEE_OUI.csv``.
    """
    if settings.table:
        return Path(settings.table).expanduser()
    if environ is None:
        environ = os.environ
    home = environ.get("HOME")
    if not home:
        raise EnvError("HOME is not set; cannot locate the reference table")
    return Path(home) / DATA_SUBDIR / TABLE_FILENAME
