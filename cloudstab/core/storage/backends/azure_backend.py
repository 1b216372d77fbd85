"""Azure Blob Storage backend implementation for container management."""

from __future__ import annotations

import builtins
import logging

from azure.core.exceptions import (
    AzureError,
    ClientAuthenticationError,
    ResourceExistsError,
    ResourceNotFoundError,
)
from azure.storage.blob import BlobServiceClient

from cloudstab.core.storage.container import Container, ContainerBackend
from cloudstab.core.storage.errors import ErrorTranslator

logger = logging.getLogger(__name__)

AZURE_SECURITY_CODES = frozenset(
    {
        "AuthenticationFailed",
        "AuthorizationFailure",
        "AuthorizationPermissionMismatch",
        "InsufficientAccountPermissions",
        "AccountIsDisabled",
        "AccessDenied",
        "AccountNotFound",
    }
)

AZURE_NOT_FOUND_CODES = frozenset({"ContainerNotFound"})


def _azure_error_code(error: BaseException) -> str | None:
    return getattr(error, "error_code", None)


class AzureBackend(ContainerBackend):
    """Azure Blob Storage implementation of the container backend."""

    error_translator = ErrorTranslator(
        native_errors=(AzureError,),
        security_codes=AZURE_SECURITY_CODES,
        not_found_codes=AZURE_NOT_FOUND_CODES,
        security_types=(ClientAuthenticationError,),
        not_found_types=(ResourceNotFoundError,),
        code_of=_azure_error_code,
    )

    def __init__(self, client: BlobServiceClient):
        """Initialize Azure backend.

        Args:
            client: Configured blob service client for the storage account
        """
        self._client = client

    def list(self) -> builtins.list[Container]:
        return [
            Container(properties.name, properties)
            for properties in self._client.list_containers()
        ]

    def get(self, name: str) -> Container | None:
        container_client = self._client.get_container_client(name)
        if not container_client.exists():
            return None
        return Container(name, container_client)

    def create(self, name: str) -> Container:
        try:
            container_client = self._client.create_container(name)
            logger.info(f"Created Azure container: {name}")
        except ResourceExistsError:
            container_client = self._client.get_container_client(name)
        return Container(name, container_client)

    def delete(self, name: str) -> None:
        try:
            self._client.delete_container(name)
            logger.info(f"Removed Azure container: {name}")
        except ResourceNotFoundError:
            logger.debug(f"Azure container already absent: {name}")
