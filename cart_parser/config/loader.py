from __future__ import annotations

import codecs
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError as SchemaValidationError

from ..files.reader import DEFAULT_ENCODING
from ..models.schema_config import DEFAULT_DELIMITER

"""Config loader.

Responsibilities:
- Load YAML config (default: config/cart.yml, overridable by CART_PARSER_CONFIG)
- Validate against config_schema.json (unknown keys rejected), encoding must be a known codec
- Apply defaults (delimiter=",", encoding=utf-8, detailed_errors=true)
"""

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "ConfigError",
    "CartParserConfig",
    "resolve_config_path",
    "load_config",
]

CONFIG_ENV_VAR = "CART_PARSER_CONFIG"
DEFAULT_CONFIG_PATH = Path("config/cart.yml")
SCHEMA_PATH = Path(__file__).parent / "config_schema.json"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class CartParserConfig:
    source_directory: str  # *.csv を走査するディレクトリ
    output_directory: str | None = None  # 指定時のみ JSON 出力
    delimiter: str = DEFAULT_DELIMITER
    encoding: str = DEFAULT_ENCODING
    detailed_errors: bool = True  # 行単位エラーをエラーログへ記録


def _validate_config_schema(data: Any) -> None:
    """Validate config data against the JSON schema.

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


def _validate_encoding(encoding: str) -> None:
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ConfigError(f"unknown encoding: {encoding}") from e


def resolve_config_path(explicit: str | Path | None = None) -> Path:
    """Pick the config path: explicit argument > CART_PARSER_CONFIG > default."""
    if explicit is not None:
        return Path(explicit)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def load_config(path: Path) -> CartParserConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)
    _validate_encoding(data.get("encoding", DEFAULT_ENCODING))

    return CartParserConfig(
        source_directory=data["source_directory"],
        output_directory=data.get("output_directory"),
        delimiter=data.get("delimiter", DEFAULT_DELIMITER),
        encoding=data.get("encoding", DEFAULT_ENCODING),
        detailed_errors=data.get("detailed_errors", True),
    )
