"""Container name validation rules."""

from __future__ import annotations

import re

from cloudstab.core.storage.errors import InvalidNameError

MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 63

# Lowercase alphanumeric runs joined by single dashes.
_NAME_PATTERN = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")


def validate_container_name(name: str | None) -> None:
    """Validate a container name against the object-store naming rule.

    Names must be 3-63 characters long, built only from lowercase letters,
    digits and single dashes, and must not start or end with a dash. A
    leading digit is allowed.

    Args:
        name: Candidate container name

    Raises:
        InvalidNameError: If the name is None or breaks the rule

    Examples:
        >>> validate_container_name("2abc")
        >>> validate_container_name("ab--c")
        Traceback (most recent call last):
        ...
        cloudstab.core.storage.errors.InvalidNameError: ...
    """
    if name is None:
        raise InvalidNameError(name, "Container names cannot be None.")

    if not isinstance(name, str):
        raise InvalidNameError(name, "Container names must be strings.")

    if len(name) < MIN_NAME_LENGTH or len(name) > MAX_NAME_LENGTH:
        raise InvalidNameError(
            name,
            f"Container names must be between {MIN_NAME_LENGTH} and "
            f"{MAX_NAME_LENGTH} characters.",
        )

    if not _NAME_PATTERN.fullmatch(name):
        raise InvalidNameError(name)


def validate_non_empty_name(name: str | None) -> None:
    """Looser rule: any non-empty string is accepted."""
    if not name or not isinstance(name, str):
        raise InvalidNameError(name, "Container names cannot be None or empty.")


def is_valid_container_name(name: str | None) -> bool:
    """Return True if ``name`` passes validate_container_name."""
    try:
        validate_container_name(name)
    except InvalidNameError:
        return False
    return True
