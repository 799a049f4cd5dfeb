"""Validation rules for service input and import data."""

import re

from bindery_estimator.database.models import (
    CreateCustomerInput,
    CreateQuantityOptionInput,
    CreateQuoteInput,
)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+$")


def validate_customer_input(data: CreateCustomerInput) -> list[str]:
    """Validate a new customer. Returns list of error strings."""
    errors = []
    if not (data.name or "").strip():
        errors.append("name is required")
    elif len(data.name.strip()) > 200:
        errors.append("name exceeds 200 chars")
    if data.email and not _EMAIL_RE.match(data.email.strip()):
        errors.append(f"email '{data.email}' is not a valid address")
    return errors


def validate_quantity_options(
    options: list[CreateQuantityOptionInput],
) -> list[str]:
    """At least one tier; positive whole quantities; non-negative prices."""
    errors = []
    if not options:
        errors.append("at least one quantity option is required")
        return errors
    for i, opt in enumerate(options, start=1):
        if isinstance(opt.quantity, bool) or not isinstance(opt.quantity, int):
            errors.append(f"option {i}: quantity must be an integer")
        elif opt.quantity <= 0:
            errors.append(f"option {i}: quantity must be greater than zero")
        if isinstance(opt.unit_price, bool) or not isinstance(
            opt.unit_price, (int, float)
        ):
            errors.append(f"option {i}: unit price must be a number")
        elif opt.unit_price < 0:
            errors.append(f"option {i}: unit price cannot be negative")
    return errors


def validate_quote_input(data: CreateQuoteInput) -> list[str]:
    """Validate a new quote. Returns list of error strings."""
    errors = []
    if not (data.job_title or "").strip():
        errors.append("job title is required")
    if not (data.description or "").strip():
        errors.append("description is required")
    if not (data.finished_size or "").strip():
        errors.append("finished size is required")
    errors.extend(validate_quantity_options(data.quantity_options))
    return errors


def validate_customer_row(row: dict, row_num: int) -> list[str]:
    """Validate a single row of customer import data."""
    errors = []

    name = (row.get("name") or "").strip()
    if not name:
        errors.append(f"Row {row_num}: name is required")
    elif len(name) > 200:
        errors.append(f"Row {row_num}: name exceeds 200 chars")

    email = (row.get("email") or "").strip()
    if email and not _EMAIL_RE.match(email):
        errors.append(f"Row {row_num}: email '{email}' is not valid")

    return errors
