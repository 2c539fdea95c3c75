from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError as SchemaValidationError

"""Config loader.

Responsibilities:
- Load YAML config (default: config/cart.yml)
- Validate against the packaged JSON schema (config_schema.json)
- Apply defaults for missing keys
"""

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/cart.yml")
DEFAULT_LOGS_DIRECTORY = "./logs"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class CartConfig:
    source_file: str | None
    logs_directory: str
    write_error_log: bool

    @staticmethod
    def default() -> CartConfig:
        return CartConfig(
            source_file=None,
            logs_directory=DEFAULT_LOGS_DIRECTORY,
            write_error_log=True,
        )


def _validate_config_schema(data: Any) -> None:
    """Validate config data against JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or the
            config data fails schema validation.
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except SchemaValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> CartConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    return CartConfig(
        source_file=data.get("source_file"),
        logs_directory=data.get("logs_directory", DEFAULT_LOGS_DIRECTORY),
        write_error_log=data.get("write_error_log", True),
    )
