"""Pydantic field types backed by the shared validators.

Request schemas use these types so that the HTTP boundary accepts and
rejects exactly what the forms do.

Example:
    class GoalCreateRequest(BaseModel):
        target_amount: MoneyField
        deadline: DateField

"""

from collections.abc import Callable
from datetime import date, datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator

from .banking import validate_credit_card, validate_iban
from .contact import validate_email, validate_phone, validate_url
from .dates import validate_date
from .money import validate_money, validate_percentage
from .password import validate_password_strength
from .results import Rule
from .text import validate_username


def enforce(rule: Rule) -> Callable[[Any], Any]:
    """Turn a rule into a pydantic validator.

    The returned callable raises ``ValueError`` with the rule's error when
    the value fails, and otherwise returns the parsed value (or the input
    when the rule does not parse).
    """

    def check(value: Any) -> Any:
        result = rule(value)
        if not result.valid:
            raise ValueError(result.describe())
        return value if result.value is None else result.value

    return check


EmailField = Annotated[str, AfterValidator(enforce(validate_email))]
PasswordField = Annotated[str, AfterValidator(validate_password_strength)]
UsernameField = Annotated[str, AfterValidator(enforce(validate_username))]
PhoneField = Annotated[str, AfterValidator(enforce(validate_phone))]
UrlField = Annotated[str, AfterValidator(enforce(validate_url))]
IbanField = Annotated[str, AfterValidator(enforce(validate_iban))]
CreditCardField = Annotated[str, AfterValidator(enforce(validate_credit_card))]

# Numbers and dates are checked on the raw input so that the rules see what
# the user typed (e.g. "12.345") before pydantic coerces it.
MoneyField = Annotated[float, BeforeValidator(enforce(validate_money))]
PercentageField = Annotated[float, BeforeValidator(enforce(validate_percentage))]
DateField = Annotated[date | datetime, BeforeValidator(enforce(validate_date))]
