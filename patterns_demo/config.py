"""Configuration management for the patterns demo.

This module provides utilities for loading and validating configuration
from environment variables, optionally read from a ``.env`` file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from .encryption import DEFAULT_XOR_KEY

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

LOGGER = logging.getLogger(__name__)

_BYTE_UPPER_BOUND = 256
_DEFAULT_LOGGING_LEVEL = "WARNING"
_DEFAULT_DEMO_TEXT = "Hello, World!"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass
class AppConfig:
    """Holds application configuration loaded from environment variables."""

    logging_level: str | None
    show_encryption: bool
    demo_text: str
    xor_key: int


def configure_logging(app_config: AppConfig) -> None:
    """Configure logging based on the application configuration.

    Records go to standard error so they never mix with the demo listing.

    :param app_config: The application configuration instance
    """
    if not app_config.logging_level:
        logging.basicConfig(level=logging.WARNING)
        return

    numeric_level = getattr(logging, app_config.logging_level.upper(), None)
    if not isinstance(numeric_level, int):
        logging.basicConfig(level=logging.WARNING)
        LOGGER.warning(
            "Invalid log level: %s, using WARNING", app_config.logging_level
        )
        return
    logging.basicConfig(level=numeric_level)


def get_env_str(
    var_name: str,
    default: str | None,
    value_checker: Callable[[str], bool] | None = None,
) -> str:
    """Get an environment variable as a string with optional constraints.

    :param var_name: Name of the environment variable
    :param default: Default value if the variable is not set
    :param value_checker: Optional function to validate the value
    :return: The environment variable value
    :raises ValueError: If the value does not meet the constraints
    """
    value = os.getenv(var_name, default)
    if value is None:
        msg = f"Environment variable {var_name} is required"
        raise ValueError(msg)

    if value_checker and not value_checker(value):
        msg = f"Environment variable {var_name} has invalid value: {value}"
        raise ValueError(msg)

    return value


def get_env_int(
    var_name: str,
    default: int,
    value_checker: Callable[[int], bool] | None = None,
) -> int:
    """Get an environment variable as an integer with optional constraints.

    :param var_name: Name of the environment variable
    :param default: Default value if the variable is not set
    :param value_checker: Optional function to validate the value
    :return: The environment variable value as an integer
    :raises ValueError: If the value does not meet the constraints or is not an integer
    """
    value_str = os.getenv(var_name)
    if value_str is None or value_str == "":
        return default

    if not value_str.isdecimal():
        msg = f"Environment variable {var_name} must be an integer, got: {value_str}"
        raise ValueError(msg)

    value = int(value_str)

    if value_checker and not value_checker(value):
        msg = f"Environment variable {var_name} has invalid value: {value}"
        raise ValueError(msg)

    return value


def get_env_bool(var_name: str, default: bool) -> bool:
    """Get an environment variable as a boolean.

    Accepts ``1/true/yes/on`` and ``0/false/no/off``, case-insensitively.

    :param var_name: Name of the environment variable
    :param default: Default value if the variable is not set
    :return: The environment variable value as a boolean
    :raises ValueError: If the value is not a recognised boolean
    """
    value_str = os.getenv(var_name)
    if value_str is None or value_str == "":
        return default

    lowered = value_str.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False

    msg = f"Environment variable {var_name} must be a boolean, got: {value_str}"
    raise ValueError(msg)


def load_config_from_env(env_file: str | Path | None = None) -> AppConfig:
    """Load application configuration from environment variables.

    :param env_file: Optional ``.env`` file loaded before reading variables.
        Variables already set in the environment take precedence.
    :return: An AppConfig instance populated with environment variable values
    """
    if env_file:
        load_dotenv(dotenv_path=env_file)

    return AppConfig(
        logging_level=get_env_str("LOGGING_LEVEL", _DEFAULT_LOGGING_LEVEL),
        show_encryption=get_env_bool("SHOW_ENCRYPTION", False),
        demo_text=get_env_str("DEMO_TEXT", _DEFAULT_DEMO_TEXT),
        xor_key=get_env_int(
            "XOR_KEY",
            DEFAULT_XOR_KEY,
            lambda key: 0 <= key < _BYTE_UPPER_BOUND,
        ),
    )
