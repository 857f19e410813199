"""Compose rules into field-level and form-level validation."""

from collections.abc import Iterable, Mapping
from typing import Any

from .results import FormSchema, FormValidationResult, Rule, ValidationResult
from .text import is_missing


def validate_field(value, rules: Iterable[Rule]) -> ValidationResult:
    """Apply rules in order and return the first failure.

    Rules after the first failing one are not called, so the order of
    ``rules`` decides which error a value reports.

    Examples:
        >>> from src.shared.validators import validate_email, validate_required
        >>> validate_field("", [validate_required, validate_email]).error
        'Field is required'

    """
    for rule in rules:
        result = rule(value)
        if not result.valid:
            return result
    return ValidationResult.ok()


def validate_form(form_data: Mapping[str, Any], schema: FormSchema) -> FormValidationResult:
    """Validate every field named in ``schema`` against ``form_data``.

    Each field runs its own rule chain; a failing field never stops the
    others from being checked. Fields missing from ``form_data`` are
    validated as ``None``. Keys of ``form_data`` that the schema does not
    name are ignored.
    """
    errors: dict[str, str] = {}
    for field_name, rules in schema.items():
        result = validate_field(form_data.get(field_name), rules)
        if not result.valid:
            errors[field_name] = result.error
    return FormValidationResult(is_valid=not errors, errors=errors)


def optional(rule: Rule) -> Rule:
    """Wrap a rule so that empty values (``None`` or ``""``) pass unchecked."""

    def check(value) -> ValidationResult:
        if is_missing(value):
            return ValidationResult.ok()
        return rule(value)

    return check
