"""
Runtime configuration for the tautology checker.

Sources, later wins:
    1. dataclass defaults
    2. YAML file named by ``TAUT_CONFIG`` (or passed explicitly)
    3. ``TAUT_MAX_VARIABLES`` / ``TAUT_LOG_LEVEL`` environment overrides

Example YAML:

    limits:
      max_variables: 20
    logging:
      level: INFO
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

import yaml

from tautology.varenv import MAX_VARIABLES

DEFAULT_MAX_VARIABLES = 24

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when a configuration file is missing or malformed."""
    pass


@dataclass(frozen=True, slots=True)
class TautologyConfig:
    """Evaluation bound and logging level."""

    max_variables: int = DEFAULT_MAX_VARIABLES
    log_level: str = "WARNING"

    def __post_init__(self):
        if not 1 <= self.max_variables <= MAX_VARIABLES:
            raise ValueError(f"max_variables must be between 1 and {MAX_VARIABLES}")
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_file(cls, path: Path | str) -> "TautologyConfig":
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Config file not found at: {path}")
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML file: {path}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Malformed config file: top level must be a mapping in {path}")

        limits = data.get("limits") or {}
        log_cfg = data.get("logging") or {}
        if not isinstance(limits, dict):
            raise ConfigError(f"Malformed config file: 'limits' must be a mapping in {path}")
        if not isinstance(log_cfg, dict):
            raise ConfigError(f"Malformed config file: 'logging' must be a mapping in {path}")
        try:
            return cls(
                max_variables=int(limits.get("max_variables", DEFAULT_MAX_VARIABLES)),
                log_level=str(log_cfg.get("level", "WARNING")).upper(),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid value in {path}: {e}") from e


def load_config_from_env(path: Optional[Path | str] = None) -> TautologyConfig:
    """Build a config from an optional YAML file plus environment overrides."""
    config_path = path or os.getenv("TAUT_CONFIG")
    config = TautologyConfig.from_file(config_path) if config_path else TautologyConfig()

    max_variables = os.getenv("TAUT_MAX_VARIABLES")
    if max_variables:
        try:
            config = replace(config, max_variables=int(max_variables))
        except ValueError as e:
            raise ConfigError(f"Invalid TAUT_MAX_VARIABLES: {max_variables!r}") from e

    log_level = os.getenv("TAUT_LOG_LEVEL")
    if log_level:
        try:
            config = replace(config, log_level=log_level.upper())
        except ValueError as e:
            raise ConfigError(f"Invalid TAUT_LOG_LEVEL: {log_level!r}") from e

    return config


__all__ = ["DEFAULT_MAX_VARIABLES", "ConfigError", "TautologyConfig", "load_config_from_env"]
