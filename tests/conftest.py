from __future__ import annotations

import os

import pytest

from cloudstab.core.storage import ContainerManager
from cloudstab.core.storage.backends import MemoryBackend


@pytest.fixture
def clean_env(monkeypatch):
    """Clean environment fixture to isolate tests."""
    # Store original values
    original_values = {}
    env_keys = ["CLOUDSTAB_STORAGE_PATH", "CLOUDSTAB_ROOT"]

    for key in env_keys:
        if key in os.environ:
            original_values[key] = os.environ[key]
        monkeypatch.delenv(key, raising=False)

    yield

    # Restore original values
    for key, value in original_values.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def memory_manager():
    """ContainerManager over a fresh in-memory backend."""
    return ContainerManager(MemoryBackend())


@pytest.fixture
def filesystem_root(tmp_path):
    """Root directory (not yet created) for filesystem backend tests."""
    return tmp_path / "containers"
