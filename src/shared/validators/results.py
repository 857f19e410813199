"""Result types shared by every validator and combinator."""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ValidationResult(BaseModel):
    """Outcome of a single validation rule.

    A passing result may carry a parsed ``value``. A failing result always
    carries an ``error`` and, for the password validator, the list of unmet
    ``requirements``. ``value`` is never set on a failing result.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    error: str | None = None
    requirements: list[str] | None = None
    value: Any = None

    @model_validator(mode="after")
    def check_consistency(self) -> Self:
        """Keep valid and failed results from mixing their fields."""
        if self.valid:
            if self.error is not None or self.requirements is not None:
                raise ValueError("A valid result cannot carry an error or requirements")
        else:
            if not self.error:
                raise ValueError("An invalid result must carry an error message")
            if self.value is not None:
                raise ValueError("An invalid result cannot carry a value")
        return self

    @classmethod
    def ok(cls, value: Any = None) -> "ValidationResult":
        return cls(valid=True, value=value)

    @classmethod
    def fail(cls, error: str, requirements: list[str] | None = None) -> "ValidationResult":
        return cls(valid=False, error=error, requirements=requirements)

    def describe(self) -> str:
        """Return the error as one line, with any unmet requirements appended."""
        if self.valid:
            return ""
        if self.requirements:
            return f"{self.error} {', '.join(self.requirements)}"
        return self.error


class PasswordStrength(BaseModel):
    """Heuristic characterisation of a password. Never rejects input."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    label: Literal["None", "Weak", "Fair", "Good", "Strong"]
    color: Literal["gray", "red", "yellow", "blue", "green"]


class FormValidationResult(BaseModel):
    """Aggregate outcome of validating a whole form."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    errors: dict[str, str] = Field(default_factory=dict)


Rule = Callable[[Any], ValidationResult]
FormSchema = Mapping[str, Sequence[Rule]]
