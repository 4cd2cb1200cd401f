"""
Configuration Loader
~~~~~~~~~~~~~~~~~~~~

Reads exporter settings from YAML or a plain dict, layers them over
``DEFAULT_CONFIG`` section by section and validates the result.

Validation failures name the offending setting by its dotted path
(``strings.max_length``), so a bad value in a large file is easy to find.
"""

from __future__ import annotations

import copy
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from value_exporter.config.defaults import DEFAULT_CONFIG
from value_exporter.config.schema import ExporterConfig
from value_exporter.exceptions import (
    ConfigFileNotFoundError,
    ConfigValidationError,
)

__all__ = ["load_config", "load_config_from_dict"]

logger = logging.getLogger(__name__)


def _overlay(settings: dict[str, Any], overrides: Mapping[str, Any]) -> None:
    """Apply overrides onto settings in place, descending into sections."""
    for key, value in overrides.items():
        current = settings.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _overlay(current, value)
        else:
            settings[key] = value


def _describe_errors(exc: ValidationError) -> list[str]:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "(root)"
        problems.append(f"{location}: {error['msg']}")
    return problems


def load_config(path: str | os.PathLike[str]) -> ExporterConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Validated ExporterConfig instance. Settings the file leaves out
        keep their defaults.

    Raises:
        ConfigFileNotFoundError: If the file doesn't exist.
        ConfigValidationError: If the file is not a YAML mapping or a
            setting fails validation.
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigFileNotFoundError(
            f"Configuration file not found: {config_path}",
            details={"path": str(config_path)},
        )

    try:
        settings = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigValidationError(
            f"Invalid YAML in {config_path}: {exc}",
            details={"path": str(config_path)},
        ) from exc

    if settings is None:
        settings = {}
    if not isinstance(settings, Mapping):
        raise ConfigValidationError(
            f"{config_path} must contain a mapping of settings, "
            f"got {type(settings).__name__}",
            details={"path": str(config_path)},
        )

    logger.debug("Loaded exporter configuration from %s", config_path)
    return load_config_from_dict(settings)


def load_config_from_dict(data: Mapping[str, Any]) -> ExporterConfig:
    """
    Build a configuration from a dictionary layered over the defaults.

    Raises:
        ConfigValidationError: If a setting fails validation. The
            ``details["errors"]`` list names each failing setting.
    """
    settings = copy.deepcopy(DEFAULT_CONFIG)
    _overlay(settings, data)

    try:
        return ExporterConfig.model_validate(settings)
    except ValidationError as exc:
        problems = _describe_errors(exc)
        raise ConfigValidationError(
            "Invalid exporter configuration: " + "; ".join(problems),
            details={"errors": problems},
        ) from exc
