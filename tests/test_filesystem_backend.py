"""Tests for the filesystem backend."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock

import pytest

from cloudstab.core.storage import (
    ContainerManager,
    ContainerSecurityError,
    ContainerStorageError,
    InvalidNameError,
)
from cloudstab.core.storage.backends import DirectoryOps, FilesystemBackend


def mocked_ops(exists: bool = True) -> Mock:
    ops = Mock(spec=DirectoryOps)
    ops.exists.return_value = exists
    ops.list_subdirectories.return_value = []
    return ops


class TestFilesystemBackendInit:
    """Test filesystem backend construction."""

    @pytest.mark.parametrize("root", ["foo", "bar"])
    def test_checks_root_exists(self, root):
        ops = mocked_ops()

        FilesystemBackend(root, ops)

        ops.exists.assert_called_once_with(Path(root))

    def test_creates_missing_root(self):
        ops = mocked_ops(exists=False)

        FilesystemBackend("foo", ops)

        ops.create.assert_called_once_with(Path("foo"))

    def test_existing_root_not_created(self):
        ops = mocked_ops(exists=True)

        FilesystemBackend("foo", ops)

        ops.create.assert_not_called()

    def test_creates_nested_root_on_disk(self, tmp_path):
        root = tmp_path / "a" / "b" / "containers"

        FilesystemBackend(root)

        assert root.is_dir()


class TestFilesystemBackendWithMockedDirectories:
    """Backend behaviour against mocked directory operations."""

    @pytest.mark.parametrize("root", ["foo", "bar"])
    def test_list_returns_directory_listing(self, root):
        ops = mocked_ops()
        ops.list_subdirectories.return_value = [Path(root) / n for n in ("a", "b", "c")]
        backend = FilesystemBackend(root, ops)

        results = backend.list()

        ops.list_subdirectories.assert_called_once_with(Path(root))
        assert [c.name for c in results] == ["a", "b", "c"]
        assert results[0].handle == Path(root) / "a"

    @pytest.mark.parametrize("name", ["foo", "bar"])
    def test_create_makes_directory(self, name):
        ops = mocked_ops()
        backend = FilesystemBackend("test", ops)
        ops.exists.return_value = False

        result = backend.create(name)

        ops.create.assert_called_once_with(Path("test") / name)
        assert result.name == name
        assert result.handle == Path("test") / name

    def test_create_existing_skips_mkdir(self):
        ops = mocked_ops()
        backend = FilesystemBackend("test", ops)

        backend.create("foo")

        ops.create.assert_not_called()

    def test_delete_missing_skips_removal(self):
        ops = mocked_ops()
        backend = FilesystemBackend("test", ops)
        ops.exists.return_value = False

        backend.delete("foo")

        ops.delete_recursively.assert_not_called()

    def test_delete_existing_removes_recursively(self):
        ops = mocked_ops()
        backend = FilesystemBackend("test", ops)

        backend.delete("foo")

        ops.delete_recursively.assert_called_once_with(Path("test") / "foo")


class TestFilesystemBackendOnDisk:
    """End-to-end behaviour against a real temporary directory."""

    @pytest.fixture
    def manager(self, filesystem_root):
        return ContainerManager(FilesystemBackend(filesystem_root))

    def test_create_list_delete(self, manager, filesystem_root):
        manager.create("foo")
        manager.create("bar")

        assert sorted(c.name for c in manager.list()) == ["bar", "foo"]
        assert (filesystem_root / "foo").is_dir()

        manager.delete("foo")

        assert [c.name for c in manager.list()] == ["bar"]
        assert manager.get("foo") is None
        assert not (filesystem_root / "foo").exists()

    def test_create_is_idempotent(self, manager, filesystem_root):
        (filesystem_root / "foo").mkdir()
        (filesystem_root / "foo" / "keep.txt").write_text("data")

        container = manager.create("foo")

        assert container.name == "foo"
        assert (filesystem_root / "foo" / "keep.txt").read_text() == "data"
        assert len(manager.list()) == 1

    def test_delete_removes_contents(self, manager, filesystem_root):
        manager.create("foo")
        (filesystem_root / "foo" / "nested").mkdir()
        (filesystem_root / "foo" / "nested" / "file.bin").write_bytes(b"x")

        manager.delete("foo")

        assert not (filesystem_root / "foo").exists()

    def test_delete_missing_is_noop(self, manager):
        manager.delete("missing")

    def test_get_existing(self, manager, filesystem_root):
        manager.create("foo")

        container = manager.get("foo")

        assert container is not None
        assert container.handle == filesystem_root / "foo"

    def test_files_in_root_are_not_containers(self, manager, filesystem_root):
        (filesystem_root / "stray.txt").write_text("x")
        manager.create("foo")

        assert [c.name for c in manager.list()] == ["foo"]

    def test_strict_naming(self, manager):
        """Path-like names never reach the filesystem."""
        for name in ("../escape", "a/b", "UPPER"):
            with pytest.raises(InvalidNameError):
                manager.create(name)


class TestFilesystemErrorTranslation:
    """OSErrors are translated at the manager boundary."""

    def test_permission_error_is_security(self):
        ops = mocked_ops()
        original = PermissionError("denied")
        ops.list_subdirectories.side_effect = original
        manager = ContainerManager(FilesystemBackend("test", ops))

        with pytest.raises(ContainerSecurityError) as exc_info:
            manager.list()

        assert exc_info.value.original is original

    def test_other_os_error_is_generic(self):
        ops = mocked_ops()
        manager = ContainerManager(FilesystemBackend("test", ops))
        ops.exists.return_value = False
        ops.create.side_effect = OSError(28, "No space left on device")

        with pytest.raises(ContainerStorageError) as exc_info:
            manager.create("foo")

        assert type(exc_info.value) is ContainerStorageError
        assert exc_info.value.original.errno == 28
