"""Validation API schemas (DTOs)."""

import math
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.shared.validators import validate_match
from src.shared.validators.fields import EmailField, PasswordField, UsernameField


# Request schemas
class FieldValidationRequest(BaseModel):
    """Validate one value with a named validator."""

    value: Any = None
    options: dict[str, Any] = Field(default_factory=dict, description="Keyword options for the validator")


class FormValidationRequest(BaseModel):
    """Validate submitted form data against a named form schema."""

    data: dict[str, Any] = Field(default_factory=dict)


class PasswordStrengthRequest(BaseModel):
    """Score a password for the strength meter."""

    password: str = ""


class SignupCheckRequest(BaseModel):
    """Check registration credentials before the account is created."""

    email: EmailField
    username: UsernameField
    password: PasswordField
    confirm_password: str

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, value, info):
        """Validate that password and confirm_password match."""
        if "password" in info.data:
            result = validate_match(value, info.data["password"], "Passwords")
            if not result.valid:
                raise ValueError(result.error)
        return value


# Validator options
class ValidatorOptions(BaseModel):
    """Base for per-validator options. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")


class FieldNameOptions(ValidatorOptions):
    field_name: str = "Field"


class NameOptions(ValidatorOptions):
    field_name: str = "Name"


class MinLengthOptions(FieldNameOptions):
    min_length: int = Field(..., ge=0)


class MaxLengthOptions(FieldNameOptions):
    max_length: int = Field(..., ge=0)


class MoneyOptions(ValidatorOptions):
    min_amount: float = 0
    max_amount: float = math.inf


class MinValueOptions(ValidatorOptions):
    min_value: float


class MaxValueOptions(ValidatorOptions):
    max_value: float


class DateRangeOptions(ValidatorOptions):
    end_date: Any


class CardExpiryOptions(ValidatorOptions):
    today: date | None = None


# Response schemas
class ValidatorListResponse(BaseModel):
    """Names of the available field validators."""

    validators: list[str]


class FormSchemaListResponse(BaseModel):
    """Names of the available form schemas and their fields."""

    forms: dict[str, list[str]]
