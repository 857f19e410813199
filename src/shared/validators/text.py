"""Required-ness, length and identifier validators for free-text fields."""

import re

from .results import ValidationResult

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100

_USERNAME_RE = re.compile(r"[a-zA-Z0-9_-]+")


def is_missing(value) -> bool:
    """Return True for the values a form submits when a field is left empty."""
    return value is None or value == ""


def _length(value) -> int:
    return len(value) if hasattr(value, "__len__") else len(str(value))


def validate_required(value, field_name: str = "Field") -> ValidationResult:
    if is_missing(value):
        return ValidationResult.fail(f"{field_name} is required")
    return ValidationResult.ok()


def validate_min_length(value, min_length: int, field_name: str = "Field") -> ValidationResult:
    """Fail when the value is empty or shorter than ``min_length``."""
    if not value or _length(value) < min_length:
        return ValidationResult.fail(f"{field_name} must be at least {min_length} characters")
    return ValidationResult.ok()


def validate_max_length(value, max_length: int, field_name: str = "Field") -> ValidationResult:
    """Fail when the value is longer than ``max_length``. Empty values pass."""
    if value and _length(value) > max_length:
        return ValidationResult.fail(f"{field_name} must not exceed {max_length} characters")
    return ValidationResult.ok()


def validate_username(username) -> ValidationResult:
    """Validate username format.

    Usernames are 3-20 characters drawn from ASCII letters, digits,
    underscores and hyphens.
    """
    if not username:
        return ValidationResult.fail("Username is required")
    username = str(username)
    if len(username) < USERNAME_MIN_LENGTH:
        return ValidationResult.fail(f"Username must be at least {USERNAME_MIN_LENGTH} characters")
    if len(username) > USERNAME_MAX_LENGTH:
        return ValidationResult.fail(f"Username must not exceed {USERNAME_MAX_LENGTH} characters")
    if not _USERNAME_RE.fullmatch(username):
        return ValidationResult.fail("Username can only contain letters, numbers, underscores, and hyphens")
    return ValidationResult.ok()


def validate_name(value, field_name: str = "Name") -> ValidationResult:
    """Validate a person or entity name (2-100 characters once trimmed)."""
    if not value or not str(value).strip():
        return ValidationResult.fail(f"{field_name} is required")
    trimmed = str(value).strip()
    if len(trimmed) < NAME_MIN_LENGTH:
        return ValidationResult.fail(f"{field_name} must be at least {NAME_MIN_LENGTH} characters")
    if len(trimmed) > NAME_MAX_LENGTH:
        return ValidationResult.fail(f"{field_name} must not exceed {NAME_MAX_LENGTH} characters")
    return ValidationResult.ok()


def validate_match(value, other, field_name: str = "Field") -> ValidationResult:
    """Fail when a confirmation value differs from the value it confirms."""
    if value != other:
        return ValidationResult.fail(f"{field_name} does not match")
    return ValidationResult.ok()
