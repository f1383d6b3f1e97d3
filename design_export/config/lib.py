"""Environment configuration for design-export.

Every setting is an ``EnvVar`` member carrying its own default, type and
description, and is read through ``get_environment()``. Values resolve in
the order explicit override, process environment, declared default.

Example:
    >>> from design_export.config import EnvVar, get_environment
    >>> get_environment(EnvVar.EXPORT_STORAGE_TIMEOUT)
    30.0
    >>> get_environment(EnvVar.EXPORT_STORAGE_BACKEND, override="memory")
    'memory'
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class EnvConfig:
    """Declaration of one environment variable.

    Attributes:
        name: Variable name as read from the environment.
        default: Value used when the variable is unset or unparsable.
        var_type: Target type (str, int, float, bool or Path).
        description: One-line help text.
        category: Group shown by ``list_environment_variables``.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """Settings read by design-export.

    Categories:
        - storage: backend selection, local root, blob-store endpoint
        - logging: CLI log level
    """

    EXPORT_STORAGE_BACKEND = EnvConfig(
        "EXPORT_STORAGE_BACKEND",
        "local",
        str,
        "Storage backend for exported files: local, memory or http",
        "storage",
    )
    EXPORT_STORAGE_DIR = EnvConfig(
        "EXPORT_STORAGE_DIR",
        Path(".exports"),
        Path,
        "Root directory of the local backend",
        "storage",
    )
    EXPORT_PUBLIC_BASE_URL = EnvConfig(
        "EXPORT_PUBLIC_BASE_URL",
        None,
        str,
        "URL prefix for local exports; file:// URIs when unset",
        "storage",
    )
    EXPORT_STORAGE_URL = EnvConfig(
        "EXPORT_STORAGE_URL",
        None,
        str,
        "Blob-store endpoint of the http backend",
        "storage",
    )
    EXPORT_STORAGE_TOKEN = EnvConfig(
        "EXPORT_STORAGE_TOKEN",
        None,
        str,
        "Bearer token for the http backend",
        "storage",
    )
    EXPORT_STORAGE_TIMEOUT = EnvConfig(
        "EXPORT_STORAGE_TIMEOUT",
        30.0,
        float,
        "Upload timeout in seconds for the http backend",
        "storage",
    )
    EXPORT_LOG_LEVEL = EnvConfig(
        "EXPORT_LOG_LEVEL",
        "INFO",
        str,
        "CLI log level (DEBUG, INFO, WARNING, ERROR)",
        "logging",
    )


_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ValueError(f"not a boolean: {value!r}")


_CONVERTERS: dict[type, Callable[[str], Any]] = {
    str: str,
    int: int,
    float: float,
    bool: _parse_bool,
    Path: Path,
}


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert a raw environment string, falling back to ``default``.

    Unparsable numbers and booleans yield the default rather than raising.
    """
    if value is None:
        return default
    converter = _CONVERTERS.get(var_type, str)
    try:
        return converter(value)
    except ValueError:
        return default


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Resolve a setting: override, then environment, then default.

    Args:
        env_var: Setting to read.
        override: Value returned as-is when not None.

    Returns:
        The value converted to the setting's declared type.
    """
    if override is not None:
        return override
    config: EnvConfig = env_var.value
    return _convert_value(os.environ.get(config.name), config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get the declaration of a setting."""
    return env_var.value


def get_storage_dir(override: Path | str | None = None) -> Path:
    """Root of the local backend (override > EXPORT_STORAGE_DIR > .exports)."""
    return Path(get_environment(EnvVar.EXPORT_STORAGE_DIR, override=override))


def get_log_level(override: str | None = None) -> str:
    return str(get_environment(EnvVar.EXPORT_LOG_LEVEL, override=override)).upper()


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List settings, optionally restricted to one category."""
    return [var for var in EnvVar if category in (None, var.value.category)]


__all__ = [
    "EnvConfig",
    "EnvVar",
    "get_environment",
    "get_environment_info",
    "get_storage_dir",
    "get_log_level",
    "list_environment_variables",
]
