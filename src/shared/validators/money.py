"""Currency, percentage and numeric range validators."""

import math
import re
from decimal import Decimal

from .results import ValidationResult
from .text import is_missing

MAX_CURRENCY_DECIMALS = 2

_NUMBER_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


def parse_number(value) -> float | None:
    """Parse a form value as a finite number.

    Accepts ints, floats, Decimals and numeric strings (surrounding
    whitespace allowed). Returns None for anything else, including booleans,
    NaN and infinities.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not _NUMBER_RE.fullmatch(value):
            return None
    elif not isinstance(value, int | float | Decimal):
        return None
    try:
        number = float(value)
    except (OverflowError, ValueError):
        # huge ints overflow, signalling-NaN Decimals refuse to convert
        return None
    return number if math.isfinite(number) else None


def _format_bound(bound: float) -> str:
    if isinstance(bound, float) and bound.is_integer():
        return str(int(bound))
    return str(bound)


def _decimal_places(number: float) -> int:
    exponent = Decimal(repr(number)).normalize().as_tuple().exponent
    return max(0, -exponent)


def validate_money(amount, min_amount: float = 0, max_amount: float = math.inf) -> ValidationResult:
    """Validate a currency amount.

    Checks, in order: presence, numeric, ``min_amount`` (default 0),
    ``max_amount`` (default unbounded) and at most two decimal places.

    Returns:
        A valid result carrying the parsed amount as ``value``, or the first
        failure.

    """
    if is_missing(amount):
        return ValidationResult.fail("Amount is required")

    number = parse_number(amount)
    if number is None:
        return ValidationResult.fail("Amount must be a valid number")
    if number < min_amount:
        return ValidationResult.fail(f"Amount must be at least {_format_bound(min_amount)}")
    if number > max_amount:
        return ValidationResult.fail(f"Amount must not exceed {_format_bound(max_amount)}")
    if _decimal_places(number) > MAX_CURRENCY_DECIMALS:
        return ValidationResult.fail(f"Amount must have at most {MAX_CURRENCY_DECIMALS} decimal places")

    return ValidationResult.ok(number)


def validate_percentage(value) -> ValidationResult:
    number = parse_number(value)
    if number is None:
        return ValidationResult.fail("Percentage must be a valid number")
    if number < 0 or number > 100:
        return ValidationResult.fail("Percentage must be between 0 and 100")
    return ValidationResult.ok(number)


def validate_min_value(value, min_value: float) -> ValidationResult:
    """Fail when a numeric value is below ``min_value``. Empty values pass."""
    if is_missing(value):
        return ValidationResult.ok()
    number = parse_number(value)
    if number is None:
        return ValidationResult.fail("Must be a valid number")
    if number < min_value:
        return ValidationResult.fail(f"Must be at least {_format_bound(min_value)}")
    return ValidationResult.ok()


def validate_max_value(value, max_value: float) -> ValidationResult:
    """Fail when a numeric value is above ``max_value``. Empty values pass."""
    if is_missing(value):
        return ValidationResult.ok()
    number = parse_number(value)
    if number is None:
        return ValidationResult.fail("Must be a valid number")
    if number > max_value:
        return ValidationResult.fail(f"Must not exceed {_format_bound(max_value)}")
    return ValidationResult.ok()


def format_currency(value) -> str:
    """Format an amount for display with thousands separators and two decimals.

    Examples:
        >>> format_currency(1234.5)
        '1,234.50'
        >>> format_currency(None)
        ''

    """
    if is_missing(value):
        return ""
    number = parse_number(value)
    if number is None:
        return ""
    return f"{number:,.2f}"


def parse_currency(value) -> float:
    """Parse a displayed amount such as ``$1,234.50`` back to a number.

    Raises:
        ValueError: If the value is not a currency amount.

    """
    if is_missing(value):
        return 0.0
    number = parse_number(re.sub(r"[$,]", "", str(value)))
    if number is None:
        raise ValueError(f"Invalid currency value: {value!r}")
    return number
