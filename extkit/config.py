"""Logging settings for applications using extkit.

The helper modules never read configuration; an application opts in by
calling :func:`configure` once at startup. Settings are resolved from, in
increasing precedence: built-in defaults, a YAML file, and ``EXTKIT_*``
environment variables. :func:`configure` also loads the project's ``.env``
file first, so its values count as environment variables.

Example ``extkit.yaml``::

    log_level: debug
    log_format: "%(levelname)s %(name)s: %(message)s"
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

import yaml

from extkit.exceptions import InvalidArgumentError
from extkit.logging import DEFAULT_FORMAT, LOG_LEVELS, configure_logging, get_logger
from extkit.utils.env import find_project_root, get_env_var, setup_environment

logger = get_logger(__name__)

CONFIG_PATH_VARIABLE = "EXTKIT_CONFIG"
ENV_PREFIX = "EXTKIT_"
CONFIG_FILE_NAMES = ("extkit.yaml", "extkit.yml")


@dataclass(frozen=True)
class ExtkitSettings:
    """Resolved extkit settings."""

    log_level: str = "info"
    log_format: str = DEFAULT_FORMAT

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "ExtkitSettings":
        """Create settings from a dictionary, validating each value.

        Raises:
            InvalidArgumentError: If a key is unknown or a value is invalid
        """
        if not isinstance(config, dict):
            raise InvalidArgumentError(
                "config", "extkit configuration must be a mapping"
            )

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise InvalidArgumentError(
                "config", f"Unknown extkit settings: {', '.join(unknown)}"
            )

        settings = cls(**{k: str(v) for k, v in config.items()})
        settings.validate()
        return settings

    def validate(self) -> None:
        if self.log_level.strip().lower() not in LOG_LEVELS:
            raise InvalidArgumentError(
                "log_level", f"Unknown log level: {self.log_level}"
            )

        try:
            logging.Formatter(self.log_format, validate=True)
        except ValueError as e:
            raise InvalidArgumentError("log_format", f"Invalid log format: {e}")


def _find_config_file() -> Optional[str]:
    explicit = get_env_var(CONFIG_PATH_VARIABLE)
    if explicit:
        return explicit

    project_root = find_project_root()
    if project_root is None:
        return None

    for name in CONFIG_FILE_NAMES:
        candidate = project_root / name
        if candidate.is_file():
            return str(candidate)
    return None


def _read_config_file(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        raise FileNotFoundError(f"extkit config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidArgumentError("config", f"Invalid YAML in '{path}': {e}")

    return data or {}


def _environment_overrides() -> Dict[str, str]:
    overrides = {}
    for field in fields(ExtkitSettings):
        value = get_env_var(f"{ENV_PREFIX}{field.name.upper()}")
        if value:
            overrides[field.name] = value
    return overrides


def load_settings(path: Optional[str] = None) -> ExtkitSettings:
    """Resolve settings from a YAML file and the environment.

    Only reads; ``.env`` files are left alone (see :func:`configure`).

    Args:
        path: Optional YAML file. Falls back to ``$EXTKIT_CONFIG`` and then to
            an ``extkit.yaml`` in the current project.

    Returns:
        ExtkitSettings instance

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist
        InvalidArgumentError: If the file or an override is invalid
    """
    config_path = path or _find_config_file()
    settings = ExtkitSettings()

    if config_path:
        logger.debug(f"Loading extkit settings from '{config_path}'")
        settings = ExtkitSettings.from_dict(_read_config_file(config_path))

    overrides = _environment_overrides()
    if overrides:
        logger.debug(f"Applying environment overrides: {sorted(overrides)}")
        settings = replace(settings, **overrides)
        settings.validate()

    return settings


_settings: Optional[ExtkitSettings] = None


def configure(path: Optional[str] = None, load_env: bool = True) -> ExtkitSettings:
    """Load settings and apply them to logging.

    Args:
        path: Optional YAML file, as for :func:`load_settings`
        load_env: Load the project's ``.env`` file before resolving settings

    Returns:
        The applied settings, also returned by :func:`get_settings` afterwards
    """
    global _settings
    if load_env:
        setup_environment()

    settings = load_settings(path)
    configure_logging(level=settings.log_level, fmt=settings.log_format)
    _settings = settings
    return settings


def get_settings() -> ExtkitSettings:
    """Return the settings applied by :func:`configure`, or resolve them now."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
