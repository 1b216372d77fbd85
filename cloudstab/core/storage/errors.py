"""Portable error taxonomy and backend error translation.

Backends raise their SDK's native exceptions. The ContainerManager passes
each one through an ErrorTranslator exactly once, which classifies it into
one of a small set of portable kinds while keeping the original error
attached (``original`` and ``__cause__``).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Classification of a container operation failure."""

    SECURITY = "security"
    NOT_FOUND = "not_found"
    INVALID_NAME = "invalid_name"
    GENERIC = "generic"


# Custom exceptions


class ContainerStorageError(Exception):
    """Base exception for container storage errors.

    Raised as-is for backend failures that are not otherwise classified.
    """

    kind = ErrorKind.GENERIC

    def __init__(self, message: str, original: BaseException | None = None):
        super().__init__(message)
        self.original = original


class ContainerSecurityError(ContainerStorageError):
    """Raised when the backend rejects the caller's credentials or permissions."""

    kind = ErrorKind.SECURITY


class ContainerNotFoundError(ContainerStorageError):
    """Raised when a backend reports a missing container mid-operation."""

    kind = ErrorKind.NOT_FOUND


class InvalidNameError(ContainerStorageError, ValueError):
    """Raised when a container name fails validation."""

    kind = ErrorKind.INVALID_NAME

    def __init__(self, name: Any, message: str | None = None):
        super().__init__(message or f"Invalid container name: {name!r}")
        self.name = name


def default_error_code(error: BaseException) -> Any:
    """Pull a provider error code off a native exception, if it has one."""
    for attribute in ("code", "error_code", "http_status", "status_code"):
        value = getattr(error, attribute, None)
        if value is not None:
            return value
    return None


class ErrorTranslator:
    """Map backend-native exceptions onto the portable error kinds.

    Examples:
        >>> translator = ErrorTranslator(
        ...     native_errors=(S3Error,),
        ...     security_codes={"InvalidAccessKeyId", "AccessDenied"},
        ... )
        >>> translator.translate(error)  # ContainerSecurityError wrapping error
    """

    def __init__(
        self,
        native_errors: tuple[type[BaseException], ...] = (),
        security_codes: Iterable[Any] = (),
        not_found_codes: Iterable[Any] = (),
        security_types: tuple[type[BaseException], ...] = (),
        not_found_types: tuple[type[BaseException], ...] = (),
        code_of: Callable[[BaseException], Any] = default_error_code,
    ):
        """Initialize the translator.

        Args:
            native_errors: Exception types the backend's SDK raises. Only these
                are caught and translated by the manager.
            security_codes: Error codes meaning authentication/authorization failure
            not_found_codes: Error codes meaning the container does not exist
            security_types: Exception types that are always security failures
            not_found_types: Exception types that always mean "not found"
            code_of: Extracts the provider error code from a native exception
        """
        self.native_errors = tuple(native_errors)
        self._security_codes = frozenset(security_codes)
        self._not_found_codes = frozenset(not_found_codes)
        self._security_types = tuple(security_types)
        self._not_found_types = tuple(not_found_types)
        self._code_of = code_of

    def is_security_error(self, error: BaseException) -> bool:
        """Return True if ``error`` is an authentication/authorization failure."""
        if self._security_types and isinstance(error, self._security_types):
            return True
        code = self._code_of(error)
        return code is not None and code in self._security_codes

    def is_not_found_error(self, error: BaseException) -> bool:
        if self._not_found_types and isinstance(error, self._not_found_types):
            return True
        code = self._code_of(error)
        return code is not None and code in self._not_found_codes

    def translate(self, error: BaseException) -> ContainerStorageError:
        """Translate a backend error into a normalized error.

        Already-normalized errors are returned unchanged so translation
        happens at most once.

        Args:
            error: Exception raised by the backend

        Returns:
            ContainerSecurityError, ContainerNotFoundError or ContainerStorageError
            carrying ``error`` as ``original``
        """
        if isinstance(error, ContainerStorageError):
            return error

        if self.is_security_error(error):
            logger.warning(f"Backend rejected credentials: {error}")
            return ContainerSecurityError(f"Access denied by storage backend: {error}", error)

        if self.is_not_found_error(error):
            return ContainerNotFoundError(f"Container not found: {error}", error)

        return ContainerStorageError(f"Storage backend error: {error}", error)
