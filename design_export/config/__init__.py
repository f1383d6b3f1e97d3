"""Environment configuration for design-export.

Example:
    >>> from design_export.config import EnvVar, get_environment
    >>> get_environment(EnvVar.EXPORT_STORAGE_BACKEND)
    'local'
"""

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    get_log_level,
    get_storage_dir,
    list_environment_variables,
)

__all__ = [
    "EnvConfig",
    "EnvVar",
    "get_environment",
    "get_environment_info",
    "get_storage_dir",
    "get_log_level",
    "list_environment_variables",
]
