"""Registry of named container backends."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from cloudstab.core.storage.backends.azure_backend import AzureBackend
from cloudstab.core.storage.backends.filesystem_backend import FilesystemBackend
from cloudstab.core.storage.backends.memory_backend import MemoryBackend
from cloudstab.core.storage.backends.s3_backend import S3Backend
from cloudstab.core.storage.backends.swift_backend import SwiftBackend
from cloudstab.core.storage.container import ContainerBackend, ContainerManager
from cloudstab.core.utils.config import load_and_resolve_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_MODULE = "configs.container_backends"

# Backends bound to a vendor SDK; the config must carry a ready client.
_CLIENT_BACKENDS: dict[str, type[ContainerBackend]] = {
    "s3": S3Backend,
    "azure": AzureBackend,
    "swift": SwiftBackend,
}


class BackendConfigError(Exception):
    """Raised when backend configuration is invalid."""

    pass


class BackendNotFoundError(Exception):
    """Raised when a named backend is not found in configuration."""

    pass


class ContainerBackendRegistry:
    """Registry resolving backend names to configured container backends.

    SDK clients are never constructed here. Entries for the "s3", "azure" and
    "swift" types carry a ready client under the "client" key, usually added
    at startup with ``register``.

    Examples:
        >>> registry = ContainerBackendRegistry()
        >>> registry.register("uploads", {"type": "s3", "client": minio_client})
        >>> manager = registry.get_manager("uploads")
    """

    def __init__(self, configuration: dict[str, dict[str, Any]] | None = None):
        """Initialize the registry.

        Args:
            configuration: Backend configuration dict. If None, loads and resolves
                          configs/container_backends.py
        """
        if configuration is None:
            configuration = load_and_resolve_config(
                DEFAULT_CONFIG_MODULE,
                config_name="CONFIGURATION",
                default={},
            )

        self._config = configuration
        self._backend_cache: dict[str, ContainerBackend] = {}

    def create_backend(self, config: dict[str, Any]) -> ContainerBackend:
        """Create a backend instance from configuration.

        Args:
            config: Backend configuration dict with "type" and backend-specific params

        Returns:
            Instantiated backend

        Raises:
            BackendConfigError: If configuration is invalid
        """
        backend_type = config.get("type")

        if not backend_type:
            raise BackendConfigError("Backend configuration must specify 'type'")

        if backend_type == "filesystem":
            root_path = config.get("root_path")
            if not root_path:
                raise BackendConfigError("Filesystem backend requires 'root_path'")
            return FilesystemBackend(root_path=Path(root_path).expanduser())

        elif backend_type == "memory":
            return MemoryBackend(store=config.get("store"))

        elif backend_type in _CLIENT_BACKENDS:
            client = config.get("client")
            if client is None:
                raise BackendConfigError(
                    f"{backend_type} backend requires a ready SDK 'client' in its configuration"
                )
            return _CLIENT_BACKENDS[backend_type](client)

        else:
            raise BackendConfigError(f"Unknown backend type: {backend_type}")

    def get_backend(self, name: str, use_cache: bool = True) -> ContainerBackend:
        """Get a backend instance by name.

        Args:
            name: Backend name from configuration
            use_cache: Whether to reuse a previously created instance

        Raises:
            BackendNotFoundError: If the name is not configured
            BackendConfigError: If the backend configuration is invalid
        """
        if use_cache and name in self._backend_cache:
            return self._backend_cache[name]

        if name not in self._config:
            available = ", ".join(self._config.keys())
            raise BackendNotFoundError(
                f"Backend '{name}' not found in configuration. "
                f"Available backends: {available or 'none'}"
            )

        backend = self.create_backend(self._config[name])
        if use_cache:
            self._backend_cache[name] = backend

        logger.info(f"Created backend '{name}' ({self._config[name]['type']})")
        return backend

    def get_manager(self, name: str) -> ContainerManager:
        """Get a ContainerManager bound to the named backend."""
        return ContainerManager(self.get_backend(name))

    def list_backends(self) -> list[str]:
        """List all configured backend names."""
        return list(self._config.keys())

    def register(self, name: str, config: dict[str, Any]) -> None:
        """Register (or replace) a backend configuration.

        Args:
            name: Backend name
            config: Backend configuration dict
        """
        self._config[name] = config
        self._backend_cache.pop(name, None)

    def clear_cache(self) -> None:
        """Clear the backend instance cache."""
        self._backend_cache.clear()


# Global registry instance
_default_registry: ContainerBackendRegistry | None = None


def get_default_registry() -> ContainerBackendRegistry:
    """Get the default global registry instance."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ContainerBackendRegistry()
    return _default_registry


def get_container_manager(name: str) -> ContainerManager:
    """Get a ContainerManager for a named backend from the default registry.

    Examples:
        >>> from cloudstab.core.storage import get_container_manager
        >>> manager = get_container_manager("local")
        >>> manager.create("reports")
    """
    return get_default_registry().get_manager(name)
