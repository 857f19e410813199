"""Validation router (API endpoints)."""

import logging

from fastapi import APIRouter

from src.config.settings import settings
from src.shared.validators import FormValidationResult, PasswordStrength, ValidationResult

from .schemas import (
    FieldValidationRequest,
    FormSchemaListResponse,
    FormValidationRequest,
    PasswordStrengthRequest,
    SignupCheckRequest,
    ValidatorListResponse,
)
from .service import ValidationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/validation", tags=["Validation"])


@router.get("/validators", response_model=ValidatorListResponse)
async def list_validators():
    """List the field validators that can be called by name."""
    return ValidatorListResponse(validators=ValidationService.list_validators())


@router.get("/forms", response_model=FormSchemaListResponse)
async def list_forms():
    """List the form schemas and the fields each one checks."""
    return FormSchemaListResponse(forms=ValidationService.list_forms())


@router.post("/fields/{name}", response_model=ValidationResult, response_model_exclude_none=True)
async def validate_field(name: str, data: FieldValidationRequest):
    """Validate a single value with the named validator.

    Keys that do not apply to the outcome are omitted: `error` and
    `requirements` only appear on failures, `value` only on successes of
    parsing validators (money, percentage, date).
    """
    return ValidationService.validate_field(name, data.value, data.options)


@router.post("/forms/{name}", response_model=FormValidationResult)
async def validate_form(name: str, data: FormValidationRequest):
    """Validate a whole form. Every failing field is reported."""
    return ValidationService.validate_form(name, data.data, settings.validation_max_form_fields)


@router.post("/password-strength", response_model=PasswordStrength)
async def password_strength(data: PasswordStrengthRequest):
    """Score a password for the strength meter."""
    return ValidationService.password_strength(data.password)


@router.post("/signup", response_model=ValidationResult, response_model_exclude_none=True)
async def check_signup(data: SignupCheckRequest):
    """Check registration credentials.

    Email, username and password follow the form rules, and the password
    confirmation must match. Failures are returned as a 422 response.
    """
    return ValidationService.check_signup(data)
