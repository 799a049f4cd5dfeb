"""Tests for input validators."""

from bindery_estimator.database.models import (
    CreateCustomerInput,
    CreateQuantityOptionInput,
    CreateQuoteInput,
)
from bindery_estimator.io.validators import (
    validate_customer_input,
    validate_customer_row,
    validate_quantity_options,
    validate_quote_input,
)


def _opt(quantity, unit_price):
    return CreateQuantityOptionInput(quantity=quantity, unit_price=unit_price)


class TestValidateCustomerInput:
    def test_valid(self):
        data = CreateCustomerInput(name="Acme", email="a@b.com")
        assert validate_customer_input(data) == []

    def test_missing_name(self):
        errors = validate_customer_input(CreateCustomerInput(name=""))
        assert "name is required" in errors

    def test_long_name(self):
        errors = validate_customer_input(CreateCustomerInput(name="x" * 201))
        assert any("200" in e for e in errors)

    def test_bad_email(self):
        errors = validate_customer_input(
            CreateCustomerInput(name="Acme", email="nope")
        )
        assert len(errors) == 1


class TestValidateQuantityOptions:
    def test_valid(self):
        assert validate_quantity_options([_opt(500, 0.45), _opt(1, 0)]) == []

    def test_empty(self):
        assert validate_quantity_options([]) == [
            "at least one quantity option is required"
        ]

    def test_non_integer_quantity(self):
        errors = validate_quantity_options([_opt(2.5, 1.0)])
        assert errors == ["option 1: quantity must be an integer"]

    def test_bool_quantity(self):
        assert validate_quantity_options([_opt(True, 1.0)])

    def test_negative_quantity(self):
        errors = validate_quantity_options([_opt(10, 1.0), _opt(-5, 1.0)])
        assert errors == ["option 2: quantity must be greater than zero"]

    def test_bad_price(self):
        errors = validate_quantity_options([_opt(10, "cheap")])
        assert errors == ["option 1: unit price must be a number"]


class TestValidateQuoteInput:
    def test_collects_all_errors(self):
        errors = validate_quote_input(CreateQuoteInput(customer_id="c"))
        assert "job title is required" in errors
        assert "description is required" in errors
        assert "finished size is required" in errors
        assert "at least one quantity option is required" in errors

    def test_valid(self):
        data = CreateQuoteInput(
            customer_id="c", job_title="T", description="D",
            finished_size="6 x 9", quantity_options=[_opt(100, 1.0)],
        )
        assert validate_quote_input(data) == []


class TestValidateCustomerRow:
    def test_valid_row(self):
        assert validate_customer_row({"name": "Acme", "email": ""}, 2) == []

    def test_missing_name(self):
        errors = validate_customer_row({"name": "  "}, 5)
        assert errors == ["Row 5: name is required"]

    def test_bad_email(self):
        errors = validate_customer_row({"name": "A", "email": "x"}, 3)
        assert errors[0].startswith("Row 3:")
