from __future__ import annotations

"""Shared helpers for configuration loading and validation."""

import os
from typing import Any, Mapping


def get_section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """Return a mapping section from root config.

    Every section has built-in defaults, so a missing section is an empty
    mapping rather than an error.

    Args:
        raw: Root configuration mapping.
        key: Section name.

    Returns:
        Section mapping, or empty mapping when missing.

    Raises:
        TypeError: If section is not a mapping.
    """
    section = raw.get(key)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise TypeError(f"{key} must be an object")
    return section


def get_value(section: Mapping[str, Any], field: str, default: Any) -> Any:
    """Return field value, treating explicit nulls as missing."""
    value = section.get(field)
    return default if value is None else value


def expect_str(value: Any, config_key: str) -> str:
    """Validate and return string value."""
    if not isinstance(value, str):
        raise TypeError(f"{config_key} must be a string")
    return value


def expect_bool(value: Any, config_key: str) -> bool:
    """Validate and return boolean value."""
    if not isinstance(value, bool):
        raise TypeError(f"{config_key} must be a boolean")
    return value


def expect_float(value: Any, config_key: str) -> float:
    """Validate and return float value from numeric input."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{config_key} must be a number")
    return float(value)


def read_env(name: str) -> str:
    """Read an environment variable, returning an empty string when unset."""
    if not name:
        return ""
    return os.getenv(name, "").strip()


def check_non_empty(value: str, config_key: str) -> None:
    """Validate non-empty string values.

    Raises:
        ValueError: If string is empty or whitespace-only.
    """
    if not value.strip():
        raise ValueError(f"{config_key} must not be empty")
