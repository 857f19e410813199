"""Shared validators package for the application.

Pure, synchronous validators for form input. Every validator returns a
``ValidationResult`` instead of raising, so callers can render all problems
at once.

Modules:
- results.py: ValidationResult, PasswordStrength, FormValidationResult
- contact.py: email, URL and phone validation
- password.py: password policy and strength meter
- money.py: currency, percentage and numeric range validation
- dates.py: date, date range and card expiry validation
- text.py: required, length, username and name validation
- banking.py: IBAN, card number (Luhn) and CVV validation
- combinators.py: validate_field / validate_form
- schemas.py: form schemas for the application's forms
- fields.py: pydantic field types for request schemas
"""

from .banking import luhn_checksum_valid, validate_card_cvv, validate_credit_card, validate_iban
from .combinators import optional, validate_field, validate_form
from .contact import validate_email, validate_phone, validate_url
from .dates import parse_date, validate_card_expiry, validate_date, validate_date_range
from .money import (
    format_currency,
    parse_currency,
    parse_number,
    validate_max_value,
    validate_min_value,
    validate_money,
    validate_percentage,
)
from .password import get_password_strength, validate_password, validate_password_strength
from .results import FormSchema, FormValidationResult, PasswordStrength, Rule, ValidationResult
from .schemas import FORM_SCHEMAS, get_form_schema
from .text import (
    is_missing,
    validate_match,
    validate_max_length,
    validate_min_length,
    validate_name,
    validate_required,
    validate_username,
)

__all__ = [
    "FORM_SCHEMAS",
    "FormSchema",
    "FormValidationResult",
    "PasswordStrength",
    "Rule",
    "ValidationResult",
    "format_currency",
    "get_form_schema",
    "get_password_strength",
    "is_missing",
    "luhn_checksum_valid",
    "optional",
    "parse_currency",
    "parse_date",
    "parse_number",
    "validate_card_cvv",
    "validate_card_expiry",
    "validate_credit_card",
    "validate_date",
    "validate_date_range",
    "validate_email",
    "validate_field",
    "validate_form",
    "validate_iban",
    "validate_match",
    "validate_max_length",
    "validate_max_value",
    "validate_min_length",
    "validate_min_value",
    "validate_money",
    "validate_name",
    "validate_password",
    "validate_password_strength",
    "validate_percentage",
    "validate_phone",
    "validate_required",
    "validate_url",
    "validate_username",
]
