"""Runtime settings and scenario configuration loading."""

from __future__ import annotations

import json
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import ValidationError, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

from kinecalc.constants import SCENARIO_PARAMETERS
from kinecalc.exceptions import ConfigError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# camelCase key -> field name
CONFIG_KEYS: dict[str, str] = {to_camel(field): field for field in SCENARIO_PARAMETERS}


class Settings(BaseSettings):
    """kinecalc runtime settings.

    Values are loaded from ``KINECALC_``-prefixed environment variables,
    falling back to a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="KINECALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Calculation log; no file is written when unset
    log_dir: Path | None = None
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_case_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once.

    Raises:
        ConfigError: If an environment or ``.env`` value is invalid.
    """
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid kinecalc settings: {exc}") from exc


def normalize_config(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Map config keys onto scenario field names.

    Accepts both the camelCase keys (``fuelBurnRate``) and the field names
    (``fuel_burn_rate``).

    Raises:
        ConfigError: If a key is not a recognised scenario option, or two keys
            name the same option.
    """
    normalized: dict[str, Any] = {}
    seen: dict[str, str] = {}
    for key, value in raw.items():
        field = CONFIG_KEYS.get(key, key)
        if field not in SCENARIO_PARAMETERS:
            known = ", ".join(CONFIG_KEYS)
            raise ConfigError(f"Unknown scenario option {key!r}. Expected one of: {known}.")
        if field in seen:
            raise ConfigError(f"Scenario option {key!r} duplicates {seen[field]!r}.")
        seen[field] = key
        normalized[field] = value
    return normalized


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Read a JSON scenario config file and return its normalized options."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object.")
    return normalize_config(data)


def build_config(
    path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge scenario options: overrides win over the config file.

    ``None`` overrides are unset options and leave the file value or default in place.
    """
    config: dict[str, Any] = {}
    if path is not None:
        config.update(load_config_file(path))
    if overrides:
        config.update(normalize_config({k: v for k, v in overrides.items() if v is not None}))
    return config
