"""Config loader: reads keepipe.toml (or YAML) into a validated KeepipeConfig."""

import tomllib
from pathlib import Path

import yaml
from pydantic import ValidationError

from keepipe.config.schema import KeepipeConfig

DEFAULT_CONFIG = "./keepipe.toml"
YAML_SUFFIXES = (".yaml", ".yml")


class ConfigError(Exception):
    """Raised when the config file is missing, unparsable or invalid."""


def load_config(path: str | Path) -> KeepipeConfig:
    """Load and validate config from a TOML file.

    Files ending in .yaml/.yml are parsed as YAML instead.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"configuration file not found: {path}")

    try:
        raw = _read_raw(path)
    except (tomllib.TOMLDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigError(f"can't parse {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"can't read {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a table")

    try:
        return KeepipeConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration in {path}: {e}") from e


def _read_raw(path: Path) -> object:
    if path.suffix.lower() in YAML_SUFFIXES:
        with open(path) as f:
            return yaml.safe_load(f) or {}
    with open(path, "rb") as f:
        return tomllib.load(f)
