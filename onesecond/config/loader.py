from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Benchmark config loader.

Responsibilities:
- Load an optional YAML file (config/bench.yml by default)
- Validate it against bench_schema.json (unknown keys rejected)
- Apply defaults (1000 ms grace, wait for key)

The deadline and the case list are fixed in source and are not config keys.
"""

SCHEMA_PATH = Path(__file__).parent / "bench_schema.json"
DEFAULT_CONFIG_PATH = Path("config/bench.yml")

DEFAULT_GRACE_MS = 1000


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class BenchConfig:
    grace_ms: int = DEFAULT_GRACE_MS
    wait_for_key: bool = True

    @property
    def grace_seconds(self) -> float:
        return self.grace_ms / 1000


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: schema file missing or not JSON, or data violates the schema
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


def load_config(path: Path | None = None) -> BenchConfig:
    """Load the benchmark config.

    Args:
        path: Explicit config path (must exist). None means DEFAULT_CONFIG_PATH
            if present, built-in defaults otherwise.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return BenchConfig()
        path = DEFAULT_CONFIG_PATH
    elif not path.exists():
        raise ConfigError(f"config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    return BenchConfig(
        grace_ms=data.get("grace_ms", DEFAULT_GRACE_MS),
        wait_for_key=data.get("wait_for_key", True),
    )
