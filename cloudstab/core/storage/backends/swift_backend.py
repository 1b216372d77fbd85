"""OpenStack Swift backend implementation for container management.

Covers Swift deployments and Swift-based services such as Rackspace Cloud
Files, through a ready ``swiftclient.Connection``.
"""

from __future__ import annotations

import builtins
import logging

from requests.exceptions import RequestException
from swiftclient import Connection
from swiftclient.exceptions import ClientException

from cloudstab.core.storage.container import Container, ContainerBackend
from cloudstab.core.storage.errors import ErrorTranslator

logger = logging.getLogger(__name__)

SWIFT_SECURITY_STATUSES = frozenset({401, 403})
SWIFT_NOT_FOUND_STATUSES = frozenset({404})


def _swift_status(error: BaseException) -> int | None:
    return getattr(error, "http_status", None)


class SwiftBackend(ContainerBackend):
    """Swift implementation of the container backend."""

    error_translator = ErrorTranslator(
        native_errors=(ClientException, RequestException),
        security_codes=SWIFT_SECURITY_STATUSES,
        not_found_codes=SWIFT_NOT_FOUND_STATUSES,
        code_of=_swift_status,
    )

    def __init__(self, connection: Connection):
        """Initialize Swift backend.

        Args:
            connection: Authenticated Swift connection
        """
        self._connection = connection

    def list(self) -> builtins.list[Container]:
        _, containers = self._connection.get_account(full_listing=True)
        return [Container(entry["name"], entry) for entry in containers]

    def get(self, name: str) -> Container | None:
        try:
            headers = self._connection.head_container(name)
        except ClientException as e:
            if e.http_status in SWIFT_NOT_FOUND_STATUSES:
                return None
            raise
        return Container(name, headers)

    def create(self, name: str) -> Container:
        # PUT on an existing Swift container succeeds without changing it.
        self._connection.put_container(name)
        logger.info(f"Ensured Swift container: {name}")
        return Container(name, self._connection.head_container(name))

    def delete(self, name: str) -> None:
        try:
            self._connection.delete_container(name)
            logger.info(f"Removed Swift container: {name}")
        except ClientException as e:
            if e.http_status not in SWIFT_NOT_FOUND_STATUSES:
                raise
            logger.debug(f"Swift container already absent: {name}")
