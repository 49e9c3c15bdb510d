"""
Environment-backed configuration helpers.

Every entry point resolves its settings through these helpers so that a bad
value fails early with a message naming the offending variable.
"""

import os
from typing import Any, Callable, Optional, TypeVar

Number = TypeVar("Number", int, float)


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""


def get_env_or_default(name: str, default: str, description: Optional[str] = None) -> str:
    """Return ``name`` from the environment, or ``default`` when unset or blank.

    ``description`` documents the variable at the call site only.
    """
    return os.getenv(name) or default


def validate_int_env(name: str, default: Optional[int] = None, min_value: Optional[int] = None,
                     max_value: Optional[int] = None) -> int:
    """Read an integer variable, enforcing the optional inclusive bounds.

    Raises:
        ConfigurationError: unset without a default, not an integer, or out of bounds.
    """
    return _read_number(name, int, "an integer", default, min_value, max_value)


def validate_float_env(name: str, default: Optional[float] = None, min_value: Optional[float] = None,
                       max_value: Optional[float] = None) -> float:
    """Read a numeric variable, enforcing the optional inclusive bounds.

    Raises:
        ConfigurationError: unset without a default, not a number, or out of bounds.
    """
    return _read_number(name, float, "a number", default, min_value, max_value)


def _read_number(name: str, cast: Callable[[str], Number], kind: str, default: Optional[Number],
                 min_value: Optional[Number], max_value: Optional[Number]) -> Number:
    raw = os.getenv(name)
    if not raw:
        if default is None:
            raise ConfigurationError(f"Missing required environment variable: {name} (expected {kind})")
        return default

    try:
        value = cast(raw.strip())
    except ValueError:
        raise ConfigurationError(f"Invalid value for {name}: '{raw}'\nExpected {kind}.")

    if min_value is not None and value < min_value:
        raise ConfigurationError(f"{name}={value} is below the minimum of {min_value}")
    if max_value is not None and value > max_value:
        raise ConfigurationError(f"{name}={value} is above the maximum of {max_value}")
    return value


def check_config_override(override: Optional[Any], env_name: str,
                          required: bool = True) -> Optional[Any]:
    """Prefer a programmatic override, falling back to ``env_name``.

    Raises:
        ConfigurationError: ``required`` and neither source provides a value.
    """
    if override is not None:
        return override

    value = os.getenv(env_name)
    if required and not value:
        raise ConfigurationError(
            f"Missing required configuration: {env_name}\n"
            f"Set the environment variable or pass the value explicitly."
        )
    return value
