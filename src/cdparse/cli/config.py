# Copyright 2026 cdparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration file for the cdparse command-line interface."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".cdparse.yaml"


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""


class CliConfig(BaseModel):
    """Settings controlling how the CLI dumps parse results.

    Attributes:
        output_format: Serialization used for dumps, ``yaml`` or ``json``.
        include_internal: Keep whitespace, comment and comma tokens in token dumps.
        log_level: Logging level name applied at startup.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    output_format: Literal["yaml", "json"] = Field(alias="output-format", default="yaml")
    include_internal: bool = Field(alias="include-internal", default=False)
    log_level: str = Field(alias="log-level", default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{value}'")
        return level


def load_config(path: Path) -> CliConfig:
    """Load and validate a CLI configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A validated CliConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return CliConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc
