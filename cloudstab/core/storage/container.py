"""Container abstraction over heterogeneous blob stores.

Provides a uniform list/get/create/delete contract for named containers
(buckets, Azure containers, Swift containers, directories) with support for
various backends (S3, Azure Blob, Swift, local filesystem, in-memory).
"""

from __future__ import annotations

import builtins
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from cloudstab.core.storage.errors import ErrorTranslator
from cloudstab.core.storage.naming import validate_container_name

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Container:
    """A managed container.

    ``handle`` is whatever the producing backend needs to refer back to the
    physical container (a bucket record, a path, response headers). It is
    opaque to everything except that backend and is ignored by equality.
    """

    name: str
    handle: Any = field(default=None, repr=False, compare=False)


class ContainerBackend(ABC):
    """Abstract base class for container backends.

    One implementation exists per storage provider. Backends raise their
    SDK's native exceptions; translation into portable errors is done by
    ContainerManager using ``error_translator``.
    """

    #: Translator for this backend's native exceptions.
    error_translator: ErrorTranslator = ErrorTranslator()

    @abstractmethod
    def list(self) -> builtins.list[Container]:
        """List all containers visible to the bound client.

        Returns:
            Containers in the order the provider returns them
        """
        pass

    @abstractmethod
    def get(self, name: str) -> Container | None:
        """Get a container by name.

        Args:
            name: Container name, already validated

        Returns:
            The container, or None if it does not exist
        """
        pass

    @abstractmethod
    def create(self, name: str) -> Container:
        """Create a container if it doesn't already exist.

        Args:
            name: Container name, already validated

        Returns:
            The newly created container, or the existing one
        """
        pass

    @abstractmethod
    def delete(self, name: str) -> None:
        """Delete a container. Deleting a missing container is a no-op.

        Args:
            name: Container name, already validated
        """
        pass


class ContainerManager:
    """High-level container interface bound to a single backend.

    Every named operation checks the name against the strict container naming
    rule before touching the backend, whichever backend is bound, and every
    backend failure is translated exactly once before it reaches
    the caller.

    Examples:
        >>> from cloudstab.core.storage.backends import MemoryBackend
        >>> manager = ContainerManager(MemoryBackend())
        >>> manager.create("reports")
        Container(name='reports')
        >>> manager.get("missing") is None
        True
    """

    def __init__(self, backend: ContainerBackend, translator: ErrorTranslator | None = None):
        """Initialize the manager.

        Args:
            backend: Backend implementation, fixed for the manager's lifetime
            translator: Error translator; defaults to the backend's own
        """
        self._backend = backend
        self._translator = translator or backend.error_translator

    @property
    def backend(self) -> ContainerBackend:
        return self._backend

    def list(self) -> builtins.list[Container]:
        """List all the containers in the store."""
        containers = self._call(self._backend.list)
        logger.debug(f"Listed {len(containers)} containers")
        return builtins.list(containers)

    def get(self, name: str) -> Container | None:
        """Get the container with the specified name, or None if it doesn't exist."""
        validate_container_name(name)
        container = self._call(self._backend.get, name)
        logger.debug(f"Looked up container {name}: {'found' if container else 'absent'}")
        return container

    def create(self, name: str) -> Container:
        """Create a container, returning the existing one if already present."""
        validate_container_name(name)
        container = self._call(self._backend.create, name)
        logger.info(f"Ensured container: {name}")
        return container

    def delete(self, name: str) -> None:
        """Delete the container with the specified name."""
        validate_container_name(name)
        self._call(self._backend.delete, name)
        logger.info(f"Deleted container: {name}")

    def _call(self, operation: Callable[..., T], *args: Any) -> T:
        """Run a backend operation, translating native backend errors."""
        try:
            return operation(*args)
        except self._translator.native_errors as e:
            raise self._translator.translate(e) from e
