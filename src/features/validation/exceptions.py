"""Validation feature exceptions."""

from typing import Any

from fastapi import HTTPException, status


class ValidationFeatureException(HTTPException):
    """Base validation feature exception."""

    def __init__(self, detail: Any = "Validation request failed", status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class UnknownValidator(ValidationFeatureException):
    """Raised when no field validator has the requested name."""

    def __init__(self, name: str):
        super().__init__(detail=f"Unknown validator: {name}", status_code=status.HTTP_404_NOT_FOUND)


class UnknownFormSchema(ValidationFeatureException):
    """Raised when no form schema has the requested name."""

    def __init__(self, name: str):
        super().__init__(detail=f"Unknown form schema: {name}", status_code=status.HTTP_404_NOT_FOUND)


class InvalidValidatorOptions(ValidationFeatureException):
    """Raised when the options sent for a validator are not accepted."""

    def __init__(self, name: str, errors: list[dict[str, Any]]):
        super().__init__(
            detail={"message": f"Invalid options for validator '{name}'", "errors": errors},
            status_code=422,
        )


class FormTooLarge(ValidationFeatureException):
    """Raised when a submitted form has more fields than allowed."""

    def __init__(self, limit: int):
        super().__init__(
            detail=f"Form has more than {limit} fields",
            status_code=413,
        )
