"""Utility functions for cloudstab."""

from cloudstab.core.utils.config import (
    ConfigError,
    expand_env_references,
    load_and_resolve_config,
    load_config_from_module,
    load_config_with_fallback,
    resolve_config_inheritance,
)
from cloudstab.core.utils.env import load_env_file_if_present

__all__ = [
    "load_env_file_if_present",
    "load_config_from_module",
    "load_config_with_fallback",
    "load_and_resolve_config",
    "resolve_config_inheritance",
    "expand_env_references",
    "ConfigError",
]
