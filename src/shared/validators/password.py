"""Password validation functions."""

import re

from .results import PasswordStrength, ValidationResult

SPECIAL_CHARACTERS = "!@#$%^&*"
MIN_PASSWORD_LENGTH = 8

_SPECIAL_RE = re.compile(r"[!@#$%^&*]")


def _password_checks(password: str) -> list[tuple[bool, str]]:
    return [
        (len(password) >= MIN_PASSWORD_LENGTH, f"At least {MIN_PASSWORD_LENGTH} characters"),
        (re.search(r"[A-Z]", password) is not None, "At least one uppercase letter"),
        (re.search(r"[a-z]", password) is not None, "At least one lowercase letter"),
        (re.search(r"[0-9]", password) is not None, "At least one number"),
        (_SPECIAL_RE.search(password) is not None, f"At least one special character ({SPECIAL_CHARACTERS})"),
    ]


def validate_password(password) -> ValidationResult:
    """Validate a password against the account password policy.

    Requirements:
    - At least 8 characters
    - At least one uppercase letter (A-Z)
    - At least one lowercase letter (a-z)
    - At least one digit (0-9)
    - At least one special character from ``!@#$%^&*``

    Every rule is checked, so a failing result lists all unmet requirements
    in the order above.

    Examples:
        >>> validate_password("Abcdef1!").valid
        True
        >>> validate_password("abcdefgh").requirements
        ['At least one uppercase letter', 'At least one number', 'At least one special character (!@#$%^&*)']

    """
    if not password:
        return ValidationResult.fail("Password is required")
    password = str(password)

    unmet = [description for passed, description in _password_checks(password) if not passed]
    if unmet:
        return ValidationResult.fail("Password must contain:", requirements=unmet)
    return ValidationResult.ok()


def validate_password_strength(password: str) -> str:
    """Validate password strength requirements for pydantic field validators.

    Args:
        password: Password string to validate

    Returns:
        The validated password string

    Raises:
        ValueError: If password doesn't meet the password policy

    Examples:
        >>> validate_password_strength("SecurePass123!")
        'SecurePass123!'
        >>> validate_password_strength("Weakpass1")
        Traceback (most recent call last):
        ...
        ValueError: Password must contain: At least one special character (!@#$%^&*)

    """
    result = validate_password(password)
    if not result.valid:
        raise ValueError(result.describe())
    return password


def get_password_strength(password) -> PasswordStrength:
    """Score a password from 0 to 100 for a strength meter.

    Independent of ``validate_password``: it never rejects, it only grades.
    """
    if not password:
        return PasswordStrength(score=0, label="None", color="gray")
    password = str(password)

    score = 0
    if len(password) >= 8:
        score += 20
    if len(password) >= 12:
        score += 20
    if re.search(r"[a-z]", password):
        score += 15
    if re.search(r"[A-Z]", password):
        score += 15
    if re.search(r"[0-9]", password):
        score += 15
    if _SPECIAL_RE.search(password):
        score += 15

    if score < 40:
        return PasswordStrength(score=score, label="Weak", color="red")
    if score < 70:
        return PasswordStrength(score=score, label="Fair", color="yellow")
    if score < 90:
        return PasswordStrength(score=score, label="Good", color="blue")
    return PasswordStrength(score=score, label="Strong", color="green")
