"""Form schemas for the budget application's forms.

Each schema maps a form field to the ordered rules it must pass. The HTTP
layer and the UI validate against the same schemas.
"""

from functools import partial

from .banking import validate_card_cvv, validate_credit_card
from .combinators import optional
from .contact import validate_email
from .dates import validate_card_expiry, validate_date
from .money import validate_money
from .password import validate_password
from .results import FormSchema
from .text import validate_min_length, validate_name, validate_required

# Transaction amounts must be positive and stay below one billion
MIN_TRANSACTION_AMOUNT = 0.01
MAX_TRANSACTION_AMOUNT = 999_999_999

_amount = partial(validate_money, min_amount=MIN_TRANSACTION_AMOUNT, max_amount=MAX_TRANSACTION_AMOUNT)

LOGIN_SCHEMA: FormSchema = {
    "email": [validate_email],
    "password": [partial(validate_required, field_name="Password")],
}

REGISTER_SCHEMA: FormSchema = {
    "email": [validate_email],
    "password": [validate_password],
    "first_name": [partial(validate_name, field_name="First name")],
    "last_name": [partial(validate_name, field_name="Last name")],
}

INCOME_SCHEMA: FormSchema = {
    "amount": [_amount],
    "description": [partial(validate_required, field_name="Description")],
    "date": [validate_date],
}

EXPENSE_SCHEMA: FormSchema = {
    "amount": [_amount],
    "category": [partial(validate_required, field_name="Category")],
    "date": [validate_date],
}

GOAL_SCHEMA: FormSchema = {
    "name": [validate_name],
    "target_amount": [_amount],
    "deadline": [validate_date],
}

CREDIT_CARD_SCHEMA: FormSchema = {
    "cardholder_name": [partial(validate_name, field_name="Cardholder name")],
    "card_number": [validate_credit_card],
    "expiry_date": [validate_card_expiry],
    "cvv": [validate_card_cvv],
}

HOUSEHOLD_SCHEMA: FormSchema = {
    "name": [validate_name],
    "description": [optional(partial(validate_min_length, min_length=5, field_name="Description"))],
}

MEMBER_SCHEMA: FormSchema = {
    "email": [validate_email],
    "first_name": [partial(validate_name, field_name="First name")],
    "last_name": [partial(validate_name, field_name="Last name")],
}

FORM_SCHEMAS: dict[str, FormSchema] = {
    "login": LOGIN_SCHEMA,
    "register": REGISTER_SCHEMA,
    "income": INCOME_SCHEMA,
    "expense": EXPENSE_SCHEMA,
    "goal": GOAL_SCHEMA,
    "credit_card": CREDIT_CARD_SCHEMA,
    "household": HOUSEHOLD_SCHEMA,
    "member": MEMBER_SCHEMA,
}


def get_form_schema(name: str) -> FormSchema:
    """Look up a form schema by name.

    Raises:
        KeyError: If no schema has that name.

    """
    try:
        return FORM_SCHEMAS[name]
    except KeyError:
        raise KeyError(f"Unknown form schema: {name}") from None
