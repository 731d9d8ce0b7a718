"""
transcribe_cli.config - YAML config loading and option merging.

An optional YAML file supplies defaults for the engine, language, and path
validation. Command-line flags always take precedence.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from transcribe_cli.exceptions import ConfigError

DEFAULT_PARAKEET_MODEL = "nemo-parakeet-tdt-0.6b-v3"


class EngineKind(str, Enum):
    """Speech-to-text engine families."""

    WHISPER = "whisper"
    PARAKEET = "parakeet"


class TranscribeConfig(BaseModel):
    """Resolved defaults for a transcription run."""

    model_config = ConfigDict(extra="forbid")

    engine: EngineKind = EngineKind.WHISPER
    language: str | None = None
    validate_paths: bool = True
    parakeet_model: str = DEFAULT_PARAKEET_MODEL

    @field_validator("parakeet_model")
    @classmethod
    def validate_parakeet_model(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("parakeet_model must not be empty")
        return v


def load_config(path: Path | None = None) -> TranscribeConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Path to the YAML file, or None for built-in defaults

    Returns:
        Validated TranscribeConfig

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid
    """
    if path is None:
        return TranscribeConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            raw_config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    try:
        return TranscribeConfig(**raw_config)
    except PydanticValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid config file {path}: {errors}") from e


def merge_options(config: TranscribeConfig, **overrides: Any) -> TranscribeConfig:
    """Apply command-line overrides on top of a config. None means 'not given'."""
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return config
    merged = config.model_dump()
    merged.update(updates)
    try:
        return TranscribeConfig(**merged)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid option: {e.errors()[0]['msg']}") from e
