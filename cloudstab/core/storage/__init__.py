"""Storage abstractions for container management."""

from cloudstab.core.storage.container import Container, ContainerBackend, ContainerManager
from cloudstab.core.storage.errors import (
    ContainerNotFoundError,
    ContainerSecurityError,
    ContainerStorageError,
    ErrorKind,
    ErrorTranslator,
    InvalidNameError,
)
from cloudstab.core.storage.naming import (
    is_valid_container_name,
    validate_container_name,
    validate_non_empty_name,
)
from cloudstab.core.storage.registry import (
    BackendConfigError,
    BackendNotFoundError,
    ContainerBackendRegistry,
    get_container_manager,
    get_default_registry,
)

__all__ = [
    # Containers
    "Container",
    "ContainerBackend",
    "ContainerManager",
    # Naming
    "validate_container_name",
    "validate_non_empty_name",
    "is_valid_container_name",
    # Errors
    "ErrorKind",
    "ErrorTranslator",
    "ContainerStorageError",
    "ContainerSecurityError",
    "ContainerNotFoundError",
    "InvalidNameError",
    # Registry
    "ContainerBackendRegistry",
    "BackendConfigError",
    "BackendNotFoundError",
    "get_default_registry",
    "get_container_manager",
]
