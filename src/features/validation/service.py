"""Validation service layer."""

import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from src.shared.validators import (
    FORM_SCHEMAS,
    FormValidationResult,
    PasswordStrength,
    ValidationResult,
    get_form_schema,
    get_password_strength,
    validate_card_cvv,
    validate_card_expiry,
    validate_credit_card,
    validate_date,
    validate_date_range,
    validate_email,
    validate_form,
    validate_iban,
    validate_max_length,
    validate_max_value,
    validate_min_length,
    validate_min_value,
    validate_money,
    validate_name,
    validate_password,
    validate_percentage,
    validate_phone,
    validate_required,
    validate_url,
    validate_username,
)

from .exceptions import FormTooLarge, InvalidValidatorOptions, UnknownFormSchema, UnknownValidator
from .schemas import (
    CardExpiryOptions,
    DateRangeOptions,
    FieldNameOptions,
    MaxLengthOptions,
    MaxValueOptions,
    MinLengthOptions,
    MinValueOptions,
    MoneyOptions,
    NameOptions,
    SignupCheckRequest,
    ValidatorOptions,
)

logger = logging.getLogger(__name__)

# Validator name -> (validator, accepted options)
FIELD_VALIDATORS: dict[str, tuple[Callable[..., ValidationResult], type[ValidatorOptions]]] = {
    "email": (validate_email, ValidatorOptions),
    "password": (validate_password, ValidatorOptions),
    "money": (validate_money, MoneyOptions),
    "percentage": (validate_percentage, ValidatorOptions),
    "min_value": (validate_min_value, MinValueOptions),
    "max_value": (validate_max_value, MaxValueOptions),
    "date": (validate_date, ValidatorOptions),
    "date_range": (validate_date_range, DateRangeOptions),
    "card_expiry": (validate_card_expiry, CardExpiryOptions),
    "required": (validate_required, FieldNameOptions),
    "min_length": (validate_min_length, MinLengthOptions),
    "max_length": (validate_max_length, MaxLengthOptions),
    "username": (validate_username, ValidatorOptions),
    "name": (validate_name, NameOptions),
    "url": (validate_url, ValidatorOptions),
    "phone": (validate_phone, ValidatorOptions),
    "iban": (validate_iban, ValidatorOptions),
    "credit_card": (validate_credit_card, ValidatorOptions),
    "card_cvv": (validate_card_cvv, ValidatorOptions),
}


class ValidationService:
    """Service for validation operations."""

    @staticmethod
    def list_validators() -> list[str]:
        return sorted(FIELD_VALIDATORS)

    @staticmethod
    def list_forms() -> dict[str, list[str]]:
        return {name: list(schema) for name, schema in FORM_SCHEMAS.items()}

    @staticmethod
    def validate_field(name: str, value: Any, options: dict[str, Any]) -> ValidationResult:
        """Run a single named validator.

        Args:
            name: Validator name (see FIELD_VALIDATORS)
            value: Raw field value
            options: Keyword options accepted by the validator

        Returns:
            The validator's result

        Raises:
            UnknownValidator: If no validator has that name
            InvalidValidatorOptions: If the options are not accepted

        """
        try:
            validator, options_model = FIELD_VALIDATORS[name]
        except KeyError:
            raise UnknownValidator(name) from None

        try:
            parsed = options_model.model_validate(options)
        except ValidationError as exc:
            logger.debug(f"Rejected options for validator {name}: {exc.error_count()} error(s)")
            raise InvalidValidatorOptions(name, exc.errors(include_url=False, include_context=False)) from exc

        return validator(value, **parsed.model_dump())

    @staticmethod
    def validate_form(name: str, data: dict[str, Any], max_fields: int) -> FormValidationResult:
        """Validate form data against a named form schema.

        Raises:
            UnknownFormSchema: If no schema has that name
            FormTooLarge: If the form has more than ``max_fields`` fields

        """
        try:
            schema = get_form_schema(name)
        except KeyError:
            raise UnknownFormSchema(name) from None

        if len(data) > max_fields:
            logger.warning(f"Rejected {name} form with {len(data)} fields (limit {max_fields})")
            raise FormTooLarge(max_fields)

        result = validate_form(data, schema)
        if not result.is_valid:
            logger.info(f"Form {name} failed validation on fields: {', '.join(result.errors)}")
        return result

    @staticmethod
    def password_strength(password: str) -> PasswordStrength:
        return get_password_strength(password)

    @staticmethod
    def check_signup(data: SignupCheckRequest) -> ValidationResult:
        """Confirm registration credentials that already passed request validation.

        Field rules run while the request is parsed, so a request that reaches
        this method is valid. The checked username is returned as the value.
        """
        logger.debug(f"Signup credentials accepted for username {data.username}")
        return ValidationResult.ok(data.username)
