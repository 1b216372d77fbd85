"""In-memory backend implementation for container management."""

from __future__ import annotations

import builtins
import logging
import threading
from collections.abc import Iterator, MutableMapping

from cloudstab.core.storage.container import Container, ContainerBackend
from cloudstab.core.storage.naming import validate_non_empty_name

logger = logging.getLogger(__name__)


class MemoryContainerStore(MutableMapping[str, Container]):
    """Thread-safe name -> Container mapping.

    Wraps ``data`` by reference, so a caller holding the underlying dict sees
    every change. Share one store (not one dict) between backends that must
    see each other's containers.
    """

    def __init__(self, data: MutableMapping[str, Container] | None = None):
        self._data = data if data is not None else {}
        self._lock = threading.RLock()

    def __getitem__(self, name: str) -> Container:
        with self._lock:
            return self._data[name]

    def __setitem__(self, name: str, container: Container) -> None:
        with self._lock:
            self._data[name] = container

    def __delitem__(self, name: str) -> None:
        with self._lock:
            del self._data[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys_snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._data

    def keys_snapshot(self) -> builtins.list[str]:
        with self._lock:
            return builtins.list(self._data.keys())

    def values_snapshot(self) -> builtins.list[Container]:
        with self._lock:
            return builtins.list(self._data.values())

    def setdefault(self, name: str, default: Container) -> Container:  # type: ignore[override]
        """Atomically insert ``default`` unless ``name`` is present."""
        with self._lock:
            if name not in self._data:
                self._data[name] = default
            return self._data[name]

    def discard(self, name: str) -> bool:
        """Remove ``name`` if present. Returns True if something was removed."""
        with self._lock:
            return self._data.pop(name, None) is not None


class MemoryBackend(ContainerBackend):
    """In-memory implementation of the container backend.

    Keeps a name -> Container mapping with no external I/O. Intended for tests
    and deployments with no durability requirement.

    Called directly, it only rejects None/empty names. Through a
    ContainerManager the strict naming rule still applies first.
    """

    def __init__(self, store: MutableMapping[str, Container] | None = None):
        """Initialize memory backend.

        Args:
            store: Existing mapping to use. A MemoryContainerStore is used
                directly; any other mapping is wrapped by reference. If None,
                a fresh store is created.

        Raises:
            TypeError: If ``store`` is not a mutable mapping
        """
        if store is None:
            self._store = MemoryContainerStore()
        elif isinstance(store, MemoryContainerStore):
            self._store = store
        elif isinstance(store, MutableMapping):
            self._store = MemoryContainerStore(store)
        else:
            raise TypeError(f"store must be a mutable mapping, got {type(store).__name__}")

    @property
    def store(self) -> MemoryContainerStore:
        return self._store

    def list(self) -> builtins.list[Container]:
        return self._store.values_snapshot()

    def get(self, name: str) -> Container | None:
        validate_non_empty_name(name)
        return self._store.get(name)

    def create(self, name: str) -> Container:
        validate_non_empty_name(name)
        container = self._store.setdefault(name, Container(name))
        logger.debug(f"Memory container ready: {name}")
        return container

    def delete(self, name: str) -> None:
        validate_non_empty_name(name)
        if self._store.discard(name):
            logger.debug(f"Removed memory container: {name}")
