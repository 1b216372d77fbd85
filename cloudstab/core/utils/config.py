"""Backend configuration loading.

Backend configuration lives in plain Python modules exposing a dict named
``CONFIGURATION`` that maps backend names to settings. Modules are located
with importlib so deployments can point at their own config module.

Entries can inherit from one another with the "__inherits__" key, and string
values may reference environment variables as ``${NAME}``.
"""

from __future__ import annotations

import importlib
import logging
import os
import re
from typing import Any

logger = logging.getLogger(__name__)

INHERITS_KEY = "__inherits__"

_ENV_REFERENCE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


class ConfigError(Exception):
    """Raised when configuration loading or resolution fails."""

    pass


def load_config_from_module(
    module_path: str,
    config_name: str = "CONFIGURATION",
    default: Any | None = None,
) -> Any:
    """Load a configuration object from a Python module.

    Args:
        module_path: Dotted module path (e.g., "configs.container_backends")
        config_name: Attribute holding the configuration
        default: Returned when the module or attribute is missing

    Returns:
        The configuration object, or ``default``
    """
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        logger.warning(f"Could not import config module '{module_path}': {e}")
        return default

    if not hasattr(module, config_name):
        logger.warning(f"Module '{module_path}' does not define '{config_name}'")
        return default

    logger.debug(f"Loaded configuration from {module_path}.{config_name}")
    return getattr(module, config_name)


def load_config_with_fallback(
    primary_module: str,
    fallback_modules: list[str] | None = None,
    config_name: str = "CONFIGURATION",
    default: Any | None = None,
) -> Any:
    """Load configuration from the first module that provides it.

    Examples:
        >>> config = load_config_with_fallback(
        ...     "myapp.container_backends",
        ...     fallback_modules=["configs.container_backends"],
        ... )
    """
    for module_path in [primary_module, *(fallback_modules or [])]:
        config = load_config_from_module(module_path, config_name)
        if config is not None:
            if module_path != primary_module:
                logger.info(f"Using fallback configuration from '{module_path}'")
            return config

    logger.warning(f"No configuration module provided '{config_name}', using default")
    return default


def resolve_config_inheritance(config_dict: dict[str, dict[str, Any]]) -> dict[str, dict[str, Any]]:
    """Resolve "__inherits__" references between configuration entries.

    A child starts from a copy of its fully resolved parent and overrides
    keys it sets itself. The "__inherits__" key is dropped from the result.

    Raises:
        ConfigError: On circular inheritance or a missing parent

    Examples:
        >>> resolved = resolve_config_inheritance({
        ...     "local": {"type": "filesystem", "root_path": "/srv/containers"},
        ...     "archive": {"__inherits__": "local", "root_path": "/srv/archive"},
        ... })
        >>> resolved["archive"]["type"]
        'filesystem'
    """
    resolved: dict[str, dict[str, Any]] = {}

    def _resolve(name: str, chain: tuple[str, ...]) -> dict[str, Any]:
        if name in chain:
            raise ConfigError(f"Circular inheritance detected: {' -> '.join((*chain, name))}")
        if name in resolved:
            return resolved[name]

        entry = config_dict[name]
        parent_name = entry.get(INHERITS_KEY)
        if parent_name is None:
            result = dict(entry)
        else:
            if parent_name not in config_dict:
                raise ConfigError(
                    f"Configuration '{name}' inherits from '{parent_name}', "
                    f"but '{parent_name}' not found"
                )
            result = dict(_resolve(parent_name, (*chain, name)))
            result.update({k: v for k, v in entry.items() if k != INHERITS_KEY})
            logger.debug(f"Resolved '{name}' from parent '{parent_name}'")

        resolved[name] = result
        return result

    for name in config_dict:
        _resolve(name, ())

    return resolved


def expand_env_references(config: dict[str, Any]) -> dict[str, Any]:
    """Replace ``${NAME}`` in string values with environment variables.

    Unset variables expand to an empty string. Non-string values (including
    ready SDK client objects) are left untouched.
    """

    def _expand(value: Any) -> Any:
        if isinstance(value, str):
            return _ENV_REFERENCE.sub(lambda m: os.environ.get(m.group(1), ""), value)
        return value

    return {key: _expand(value) for key, value in config.items()}


def load_and_resolve_config(
    module_path: str,
    config_name: str = "CONFIGURATION",
    default: Any | None = None,
) -> dict[str, dict[str, Any]]:
    """Load a configuration module and resolve inheritance and env references.

    This is the main entry point used by the backend registry.

    Raises:
        ConfigError: If inheritance cannot be resolved
    """
    raw_config = load_config_from_module(module_path, config_name, default)

    if not isinstance(raw_config, dict):
        logger.warning(f"Invalid configuration loaded from {module_path}, using default")
        return default or {}

    resolved = resolve_config_inheritance(raw_config)
    expanded = {name: expand_env_references(entry) for name, entry in resolved.items()}
    logger.info(f"Loaded {len(expanded)} backend configurations from {module_path}")
    return expanded
