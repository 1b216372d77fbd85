"""Container backend configuration.

This module defines the CONFIGURATION dict which maps backend names to their
settings. Deployments can edit this file or point the registry at their own
config module.

Example usage:
    from cloudstab.core.storage import get_container_manager

    manager = get_container_manager("local")
    manager.create("reports")

Environment overrides:
    # Move the local filesystem root
    export CLOUDSTAB_STORAGE_PATH=/srv/containers

SDK-backed backends:
    # S3, Azure and Swift entries need a ready client object, so they are
    # registered at startup rather than declared here:
    registry.register("uploads", {"type": "s3", "client": minio_client})
"""

from __future__ import annotations

import os
from pathlib import Path

from cloudstab.core.utils.env import load_env_file_if_present

load_env_file_if_present()
PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _resolve_default_root_path() -> Path:
    """Return the default filesystem container root."""
    configured_path = os.environ.get("CLOUDSTAB_STORAGE_PATH")
    if configured_path:
        return Path(configured_path).expanduser()

    return PROJECT_ROOT / "var" / "containers"


DEFAULT_ROOT_PATH = _resolve_default_root_path()


CONFIGURATION = {
    # Local directories, one per container
    "local": {
        "type": "filesystem",
        "root_path": str(DEFAULT_ROOT_PATH),
    },
    # Same layout on a separate root for long-lived data
    "archive": {
        "__inherits__": "local",
        "root_path": str(DEFAULT_ROOT_PATH.parent / "archive"),
    },
    # Throwaway containers for tests and scripts
    "scratch": {
        "type": "memory",
    },
    "tmp": {
        "type": "filesystem",
        "root_path": "/tmp/cloudstab",
    },
}
