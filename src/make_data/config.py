"""Configuration loading and validation."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from make_data.exceptions import ConfigError
from make_data.models import GenerationConfig

_ENV_TO_CONFIG: dict[str, str] = {
    "MAKE_DATA_ROWS": "rows",
    "MAKE_DATA_COLUMNS": "columns",
    "MAKE_DATA_OUTPUT": "output",
    "MAKE_DATA_RANGE": "myrange",
    "MAKE_DATA_OUTPUT_DIR": "output_dir",
    "MAKE_DATA_SEED": "seed",
}

_INT_FIELDS = {"rows", "myrange", "seed"}


def load_config(
    config_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
    dotenv_path: Path | None = None,
) -> GenerationConfig:
    """Load config from defaults, yaml file, .env, env, and explicit overrides."""
    payload: dict[str, Any] = {}
    dotenv_to_load = dotenv_path if dotenv_path is not None else Path(".env")
    load_dotenv(dotenv_path=dotenv_to_load, override=False)

    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Config file does not exist: {config_path}")
        try:
            text = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
        try:
            raw = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Config file is not valid YAML: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError("Config file must contain a top-level mapping.")
        _reject_unknown_keys(raw, config_path)
        payload.update(raw)

    for env_key, config_key in _ENV_TO_CONFIG.items():
        env_value = os.getenv(env_key)
        if env_value is None or env_value == "":
            continue
        payload[config_key] = _coerce_env_value(env_key, config_key, env_value)

    if overrides:
        for key, value in overrides.items():
            if value is not None:
                payload[key] = value

    try:
        return GenerationConfig(**payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def _coerce_env_value(env_key: str, config_key: str, env_value: str) -> Any:
    if config_key in _INT_FIELDS:
        try:
            return int(env_value.strip())
        except ValueError as exc:
            raise ConfigError(f"{env_key} must be an integer, got '{env_value}'.") from exc
    return env_value


def _reject_unknown_keys(raw: dict[str, Any], config_path: Path) -> None:
    # A misspelled key such as "range" would otherwise be dropped silently.
    unknown = sorted(str(key) for key in raw if key not in GenerationConfig.model_fields)
    if unknown:
        known = ", ".join(GenerationConfig.model_fields)
        raise ConfigError(
            f"Unknown keys in config file {config_path}: {', '.join(unknown)}. "
            f"Supported keys: {known}."
        )
