"""Bank account and payment card validators."""

import re

from .results import ValidationResult

CARD_MIN_DIGITS = 13
CARD_MAX_DIGITS = 19

_IBAN_RE = re.compile(r"[A-Z]{2}[0-9]{2}[A-Z0-9]{1,30}")
_CVV_RE = re.compile(r"[0-9]{3,4}")


def luhn_checksum_valid(digits: str) -> bool:
    """Return True if a digit string passes the Luhn checksum.

    Scanning from the rightmost digit, every second digit (starting with the
    second from the right) is doubled, with 9 subtracted from doubles above 9.
    The number is valid when the total is divisible by 10.

    Examples:
        >>> luhn_checksum_valid("4532015112830366")
        True
        >>> luhn_checksum_valid("4532015112830367")
        False

    """
    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def validate_credit_card(card_number) -> ValidationResult:
    """Validate a payment card number.

    Separators are ignored. The remaining 13-19 digits must pass the Luhn
    checksum.
    """
    if not card_number:
        return ValidationResult.fail("Card number is required")

    digits = re.sub(r"[^0-9]", "", str(card_number))
    if len(digits) < CARD_MIN_DIGITS or len(digits) > CARD_MAX_DIGITS:
        return ValidationResult.fail(f"Card number must be between {CARD_MIN_DIGITS} and {CARD_MAX_DIGITS} digits")
    if not luhn_checksum_valid(digits):
        return ValidationResult.fail("Invalid card number")
    return ValidationResult.ok()


def validate_card_cvv(cvv) -> ValidationResult:
    if not cvv:
        return ValidationResult.fail("CVV is required")
    if not _CVV_RE.fullmatch(str(cvv)):
        return ValidationResult.fail("CVV must be 3 or 4 digits")
    return ValidationResult.ok()


def validate_iban(iban) -> ValidationResult:
    """Validate the shape of an IBAN: country code, check digits, account part.

    Spaces are ignored. Only the format is checked, not the mod-97 check digits.
    """
    if not iban:
        return ValidationResult.fail("IBAN is required")
    if not _IBAN_RE.fullmatch(re.sub(r"\s", "", str(iban))):
        return ValidationResult.fail("Invalid IBAN format")
    return ValidationResult.ok()
