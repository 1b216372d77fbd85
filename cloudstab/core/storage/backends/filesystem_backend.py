"""Filesystem backend implementation for container management."""

from __future__ import annotations

import builtins
import logging
import shutil
from pathlib import Path

from cloudstab.core.storage.container import Container, ContainerBackend
from cloudstab.core.storage.errors import ErrorTranslator

logger = logging.getLogger(__name__)


class DirectoryOps:
    """Directory operations used by FilesystemBackend.

    Kept as a separate object so tests can substitute the filesystem.
    """

    def exists(self, path: Path) -> bool:
        return path.is_dir()

    def create(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def list_subdirectories(self, path: Path) -> builtins.list[Path]:
        return sorted(child for child in path.iterdir() if child.is_dir())

    def delete_recursively(self, path: Path) -> None:
        shutil.rmtree(path)


class FilesystemBackend(ContainerBackend):
    """Filesystem implementation of the container backend.

    Each container is a directory directly under ``root_path``.
    """

    error_translator = ErrorTranslator(
        native_errors=(OSError,),
        security_types=(PermissionError,),
        not_found_types=(FileNotFoundError,),
    )

    def __init__(self, root_path: str | Path, directory_ops: DirectoryOps | None = None):
        """Initialize filesystem backend.

        Args:
            root_path: Directory holding the containers; created if missing
            directory_ops: Directory operations (default: local filesystem)
        """
        self._root_path = Path(root_path)
        self._ops = directory_ops or DirectoryOps()

        if not self._ops.exists(self._root_path):
            self._ops.create(self._root_path)
            logger.info(f"Created container root: {self._root_path}")
        else:
            logger.info(f"Using existing container root: {self._root_path}")

    @property
    def root_path(self) -> Path:
        return self._root_path

    def _container_path(self, name: str) -> Path:
        return self._root_path / name

    def list(self) -> builtins.list[Container]:
        return [
            Container(Path(path).name, Path(path))
            for path in self._ops.list_subdirectories(self._root_path)
        ]

    def get(self, name: str) -> Container | None:
        path = self._container_path(name)
        if not self._ops.exists(path):
            return None
        return Container(name, path)

    def create(self, name: str) -> Container:
        path = self._container_path(name)
        if not self._ops.exists(path):
            self._ops.create(path)
            logger.info(f"Created directory: {path}")
        return Container(name, path)

    def delete(self, name: str) -> None:
        path = self._container_path(name)
        if self._ops.exists(path):
            self._ops.delete_recursively(path)
            logger.info(f"Removed directory: {path}")
