"""Tests for the Azure Blob Storage backend implementation."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from azure.core.exceptions import (
    ClientAuthenticationError,
    HttpResponseError,
    ResourceExistsError,
    ResourceNotFoundError,
    ServiceRequestError,
)

from cloudstab.core.storage import (
    ContainerManager,
    ContainerSecurityError,
    ContainerStorageError,
)
from cloudstab.core.storage.backends import AzureBackend


def make_http_error(error_code: str | None, cls: type[HttpResponseError] = HttpResponseError):
    error = cls(message=f"Azure failure ({error_code})")
    error.error_code = error_code
    return error


def make_properties(name: str) -> Mock:
    properties = Mock()
    properties.name = name
    return properties


@pytest.fixture
def mock_client():
    client = Mock()
    client.list_containers.return_value = iter([])
    return client


@pytest.fixture
def manager(mock_client):
    return ContainerManager(AzureBackend(mock_client))


class TestAzureBackendOperations:
    """Test Azure backend container operations."""

    def test_list(self, mock_client, manager):
        mock_client.list_containers.return_value = iter(
            [make_properties("foo"), make_properties("bar")]
        )

        assert [c.name for c in manager.list()] == ["foo", "bar"]

    def test_get_existing(self, mock_client, manager):
        container_client = Mock()
        container_client.exists.return_value = True
        mock_client.get_container_client.return_value = container_client

        container = manager.get("foo")

        mock_client.get_container_client.assert_called_once_with("foo")
        assert container.name == "foo"
        assert container.handle is container_client

    def test_get_missing_returns_none(self, mock_client, manager):
        mock_client.get_container_client.return_value.exists.return_value = False

        assert manager.get("foo") is None

    def test_create_new(self, mock_client, manager):
        created = Mock()
        mock_client.create_container.return_value = created

        container = manager.create("foo")

        mock_client.create_container.assert_called_once_with("foo")
        assert container.handle is created

    def test_create_existing_returns_existing(self, mock_client, manager):
        existing = Mock()
        mock_client.create_container.side_effect = ResourceExistsError(message="exists")
        mock_client.get_container_client.return_value = existing

        container = manager.create("foo")

        assert container.name == "foo"
        assert container.handle is existing

    def test_delete(self, mock_client, manager):
        manager.delete("foo")

        mock_client.delete_container.assert_called_once_with("foo")

    def test_delete_missing_is_noop(self, mock_client, manager):
        mock_client.delete_container.side_effect = ResourceNotFoundError(message="missing")

        manager.delete("foo")


class TestAzureBackendErrors:
    """Test Azure error translation."""

    @pytest.mark.parametrize(
        "error_code",
        ["AuthenticationFailed", "AuthorizationFailure", "AccessDenied", "AccountNotFound"],
    )
    def test_security_codes(self, mock_client, manager, error_code):
        original = make_http_error(error_code)
        mock_client.list_containers.side_effect = original

        with pytest.raises(ContainerSecurityError) as exc_info:
            manager.list()

        assert exc_info.value.original is original

    def test_client_authentication_error(self, mock_client, manager):
        mock_client.create_container.side_effect = ClientAuthenticationError(message="denied")

        with pytest.raises(ContainerSecurityError):
            manager.create("foo")

    def test_other_http_error_is_generic(self, mock_client, manager):
        original = make_http_error("ServerBusy")
        mock_client.delete_container.side_effect = original

        with pytest.raises(ContainerStorageError) as exc_info:
            manager.delete("foo")

        assert type(exc_info.value) is ContainerStorageError
        assert exc_info.value.original.error_code == "ServerBusy"

    def test_transport_error_is_generic(self, mock_client, manager):
        mock_client.get_container_client.return_value.exists.side_effect = ServiceRequestError(
            message="connection refused"
        )

        with pytest.raises(ContainerStorageError):
            manager.get("foo")
