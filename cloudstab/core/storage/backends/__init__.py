"""Container backend implementations."""

from cloudstab.core.storage.backends.azure_backend import AzureBackend
from cloudstab.core.storage.backends.filesystem_backend import DirectoryOps, FilesystemBackend
from cloudstab.core.storage.backends.memory_backend import MemoryBackend, MemoryContainerStore
from cloudstab.core.storage.backends.s3_backend import S3Backend
from cloudstab.core.storage.backends.swift_backend import SwiftBackend

__all__ = [
    "AzureBackend",
    "DirectoryOps",
    "FilesystemBackend",
    "MemoryBackend",
    "MemoryContainerStore",
    "S3Backend",
    "SwiftBackend",
]
