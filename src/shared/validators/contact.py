"""Email, URL and phone number validators."""

import re
from urllib.parse import urlsplit

from .results import ValidationResult

MIN_PHONE_DIGITS = 10

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_PHONE_RE = re.compile(r"[0-9\s\-+()]+")


def validate_email(email) -> ValidationResult:
    """Validate an email address of the form ``local@domain.tld``.

    The local part and domain may not contain whitespace or a second ``@``,
    and the domain needs at least one dot.
    """
    if not email:
        return ValidationResult.fail("Email is required")
    if not _EMAIL_RE.fullmatch(str(email)):
        return ValidationResult.fail("Invalid email format")
    return ValidationResult.ok()


def _parse_absolute_url(url: str) -> tuple[str, int | None]:
    """Return host and port, raising ValueError unless ``url`` is an absolute URL."""
    if any(ch.isspace() for ch in url):
        raise ValueError(f"URL contains whitespace: {url!r}")
    parts = urlsplit(url)
    if not parts.scheme or not _SCHEME_RE.fullmatch(parts.scheme):
        raise ValueError(f"URL has no valid scheme: {url!r}")
    if not parts.netloc or not parts.hostname:
        raise ValueError(f"URL has no host: {url!r}")
    # .port raises ValueError for a malformed or out-of-range port
    return parts.hostname, parts.port


def validate_url(url) -> ValidationResult:
    """Validate an absolute URL.

    A URL is valid when it has a scheme (``https:``, ``ftp:``, ...) followed
    by a network location with a host. Schemeless strings such as
    ``example.com`` are rejected.
    """
    if not url:
        return ValidationResult.fail("URL is required")
    try:
        _parse_absolute_url(str(url))
    except ValueError:
        return ValidationResult.fail("Invalid URL format")
    return ValidationResult.ok()


def validate_phone(phone) -> ValidationResult:
    """Validate a phone number.

    Only digits, spaces, ``-``, ``+`` and parentheses are allowed, and at
    least 10 digits must remain once the punctuation is stripped.
    """
    if not phone:
        return ValidationResult.fail("Phone is required")
    phone = str(phone)
    if not _PHONE_RE.fullmatch(phone):
        return ValidationResult.fail("Invalid phone format")
    digits = re.sub(r"[^0-9]", "", phone)
    if len(digits) < MIN_PHONE_DIGITS:
        return ValidationResult.fail(f"Phone must have at least {MIN_PHONE_DIGITS} digits")
    return ValidationResult.ok()
