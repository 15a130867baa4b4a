"""Python-standard logging configuration for typeparam-lint.

Logging is configured with logging.config.dictConfig() from a YAML file. The
default configuration ships inside the package at typeparam_lint/config/.
"""

from __future__ import annotations

import logging
import logging.config
import os
import sys
from importlib.resources import files
from pathlib import Path
from typing import Any, cast

import yaml

_LOGGER_NAME = "typeparam_lint"
_LOG_CONFIG_ENV = "TYPEPARAM_LINT_LOG_CONFIG"


class LoggingError(Exception):
    """Exception raised for logging configuration errors."""

    pass


def get_config_path() -> Path:
    """Get the path to the logging configuration file.

    The TYPEPARAM_LINT_LOG_CONFIG environment variable takes precedence over
    the packaged default.

    Raises:
        LoggingError: If no configuration file is found

    """
    override = os.getenv(_LOG_CONFIG_ENV)
    if override:
        config_path = Path(override)
    else:
        config_path = Path(str(files(_LOGGER_NAME) / "config" / "logging.yaml"))

    if not config_path.exists():
        raise LoggingError(f"No logging configuration found. Expected at: {config_path}")
    return config_path


def load_config(config_path: Path) -> dict[str, Any]:
    """Load logging configuration from YAML file.

    Raises:
        LoggingError: If configuration cannot be loaded or parsed

    """
    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict):
            raise LoggingError(f"Invalid configuration format in {config_path}")

        return config  # type: ignore[return-value]

    except yaml.YAMLError as e:
        raise LoggingError(f"Failed to parse YAML config {config_path}: {e}") from e
    except OSError as e:
        raise LoggingError(f"Failed to read config file {config_path}: {e}") from e


def apply_level_override(config: dict[str, Any], level: str) -> None:
    """Apply ``level`` to every logger in ``config`` and lower handlers to match.

    Raises:
        LoggingError: If ``level`` is not a valid logging level name

    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise LoggingError(f"Invalid log level: {level}")
    level = level.upper()

    for logger_name in config.get("loggers", {}):
        config["loggers"][logger_name]["level"] = level

    if "root" in config:
        config["root"]["level"] = level

    # Handlers filter out records below their own level
    for handler_name, handler_config in config.get("handlers", {}).items():
        if isinstance(handler_config, dict) and "level" in handler_config:
            handler_level_str = cast(str, handler_config["level"])
            current_handler_level = getattr(logging, handler_level_str, logging.INFO)
            if numeric_level < current_handler_level:
                config["handlers"][handler_name]["level"] = level


def setup_logging(
    config_path: Path | str | None = None,
    level: str | None = None,
    force_basic: bool = False,
) -> None:
    """Configure logging using Python standard dictConfig.

    Falls back to basic stderr logging if the configuration cannot be applied.

    Args:
        config_path: Path to logging configuration file
        level: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        force_basic: Force basic console logging (fallback mode)

    """
    if force_basic:
        _setup_basic_logging(level or "INFO")
        return

    try:
        if isinstance(config_path, str):
            config_path = Path(config_path)
        elif config_path is None:
            config_path = get_config_path()

        config = load_config(config_path)
        if level:
            apply_level_override(config, level)

        logging.config.dictConfig(config)

        logging.getLogger(__name__).debug("Logging configured from: %s", config_path)

    except (LoggingError, ImportError, KeyError, ValueError, TypeError) as e:
        fallback_level = level or "INFO"
        _setup_basic_logging(fallback_level)

        logging.getLogger(__name__).warning(
            "Failed to configure logging from file (%s), using basic console logging at %s level",
            e,
            fallback_level,
        )


def get_cli_logger() -> logging.Logger:
    """Return the logger used by the command-line interface."""
    return logging.getLogger(f"{_LOGGER_NAME}.cli")


def _setup_basic_logging(level: str) -> None:
    """Set up basic console logging as fallback."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
