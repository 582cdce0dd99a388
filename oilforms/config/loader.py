from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Configuration loader.

Responsibilities:
- Load the YAML config file (``config/forms.yml`` by default)
- Validate it against the bundled JSON schema (unknown keys rejected)
- Apply defaults for every omitted key
"""

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "ConfigError",
    "AppConfig",
    "load_config",
    "load_config_or_default",
]

SCHEMA_PATH = Path(__file__).with_name("schema.json")
DEFAULT_CONFIG_PATH = Path("config/forms.yml")


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class AppConfig:
    header_scan_limit: int = 500
    station_sentinel: str = "unspecified"
    forms_per_page: int = 2
    output_directory: str = "./out"
    log_directory: str = "./logs"


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: schema file missing/invalid, or the data violates it
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> AppConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    defaults = AppConfig()
    return AppConfig(
        header_scan_limit=data.get("header_scan_limit", defaults.header_scan_limit),
        station_sentinel=data.get("station_sentinel", defaults.station_sentinel),
        forms_per_page=data.get("forms_per_page", defaults.forms_per_page),
        output_directory=data.get("output_directory", defaults.output_directory),
        log_directory=data.get("log_directory", defaults.log_directory),
    )


def load_config_or_default(path: Path | None = None) -> AppConfig:
    """Load ``path`` if given; otherwise the default file when present, else defaults.

    An explicitly given path that does not exist is an error.
    """
    if path is not None:
        return load_config(path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return AppConfig()
