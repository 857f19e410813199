"""Calendar date validators.

Dates are accepted as ``date``/``datetime`` objects or as ISO 8601 strings
(``2024-01-31``, ``2024-01-31T09:30:00``, ``2024-01-31T09:30:00+02:00``).
Timezone-aware datetimes are compared in UTC; naive values are compared as
given.
"""

import re
from datetime import date, datetime, time, timedelta

from .results import ValidationResult

_EXPIRY_RE = re.compile(r"(0[1-9]|1[0-2])/([0-9]{2})")


def parse_date(value) -> date | datetime | None:
    """Parse a date or datetime, returning None when the value is not one."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _comparable(value: date | datetime) -> timedelta:
    """Return the offset of ``value`` from ``datetime.min``, shifted to UTC when aware.

    The key stays in range for values at year 1 or year 9999 whose UTC
    offset would push a converted datetime past the calendar limits.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    offset = value.utcoffset() or timedelta(0)
    return (value.replace(tzinfo=None) - datetime.min) - offset


def validate_date(value) -> ValidationResult:
    if not value:
        return ValidationResult.fail("Date is required")
    parsed = parse_date(value)
    if parsed is None:
        return ValidationResult.fail("Invalid date format")
    return ValidationResult.ok(parsed)


def validate_date_range(start_date, end_date) -> ValidationResult:
    """Validate that both endpoints are dates and the start is not after the end."""
    start = parse_date(start_date)
    if start is None:
        return ValidationResult.fail("Invalid start date")
    end = parse_date(end_date)
    if end is None:
        return ValidationResult.fail("Invalid end date")
    if _comparable(start) > _comparable(end):
        return ValidationResult.fail("Start date must be before end date")
    return ValidationResult.ok()


def validate_card_expiry(value, today: date | None = None) -> ValidationResult:
    """Validate a card expiry in ``MM/YY`` form.

    A card stays valid through the last day of its expiry month. ``today``
    defaults to the current date. Two-digit years are compared against
    ``today.year % 100`` and do not wrap into the next century, so ``01/00``
    counts as expired in 2099.
    """
    if not value:
        return ValidationResult.fail("Expiry date is required")
    match = _EXPIRY_RE.fullmatch(str(value))
    if match is None:
        return ValidationResult.fail("Expiry must be MM/YY format")

    today = today or date.today()
    month, year = int(match.group(1)), int(match.group(2))
    current_year = today.year % 100
    if year < current_year or (year == current_year and month < today.month):
        return ValidationResult.fail("Card has expired")
    return ValidationResult.ok()
