"""
Tests for invoice form validation and amount conversion.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from src.components.invoices import (
    MAX_AMOUNT,
    MAX_AMOUNT_CENTS,
    Invalid,
    InvoiceConfig,
    InvoiceFields,
    Valid,
    parse_amount,
    to_cents,
    validate_amount,
    validate_customer_id,
    validate_invoice_form,
    validate_status,
)


class TestParseAmount:
    """Test decimal parsing of raw form values."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("12.50", Decimal("12.50")),
            (" 7 ", Decimal("7")),
            ("1e2", Decimal("100")),
            (3, Decimal("3")),
        ],
    )
    def test_parses_numbers(self, raw: object, expected: Decimal) -> None:
        assert parse_amount(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", "12,50", "NaN", "Infinity", True])
    def test_rejects_non_numbers(self, raw: object) -> None:
        assert parse_amount(raw) is None


class TestToCents:
    """Test base-10 scaling to minor units."""

    @pytest.mark.parametrize(
        ("amount", "cents"),
        [
            ("12.50", 1250),
            ("10.10", 1010),
            ("0.01", 1),
            ("0.29", 29),
            ("1.005", 101),
            ("1.004", 100),
            ("100", 10000),
        ],
    )
    def test_exact_conversion(self, amount: str, cents: int) -> None:
        assert to_cents(Decimal(amount)) == cents

    def test_large_values_do_not_overflow_context(self) -> None:
        assert to_cents(Decimal("1e30")) == 10**32
        assert to_cents(Decimal("123456789012345678901234567890.125")) == (
            12345678901234567890123456789013
        )

    def test_max_amount_is_max_cents(self) -> None:
        assert MAX_AMOUNT == Decimal("92233720368547758.07")
        assert to_cents(MAX_AMOUNT) == MAX_AMOUNT_CENTS


class TestFieldValidators:
    """Test per-field rules."""

    def test_customer_id_valid(self) -> None:
        assert validate_customer_id("3958dc9e-712f-4377-85e9-fec4b6a6442a") == []

    def test_blank_customer_id_reports_every_rule(self) -> None:
        """Blank input fails both the required and the pattern rule."""
        errors = validate_customer_id("   ")

        assert [e.code for e in errors] == ["customer_required", "customer_invalid"]
        assert all(e.field == "customerId" for e in errors)

    def test_customer_id_bad_characters_and_length(self) -> None:
        errors = validate_customer_id("a b" * 10, InvoiceConfig(customer_id_max_length=5))

        assert [e.code for e in errors] == ["customer_invalid", "customer_too_long"]

    def test_amount_not_a_number(self) -> None:
        errors = validate_amount("twelve")

        assert [e.code for e in errors] == ["amount_invalid"]

    @pytest.mark.parametrize("amount", ["0", "-3.50"])
    def test_amount_not_positive(self, amount: str) -> None:
        errors = validate_amount(amount)

        assert [e.code for e in errors] == ["amount_not_positive"]
        assert errors[0].message == "Please enter an amount greater than $0."

    @pytest.mark.parametrize("amount", ["1e30", "92233720368547758.08", "1E+999999"])
    def test_amount_too_large(self, amount: str) -> None:
        errors = validate_amount(amount)

        assert [e.code for e in errors] == ["amount_too_large"]
        assert errors[0].field == "amount"

    def test_amount_at_upper_bound(self) -> None:
        assert validate_amount("92233720368547758.07") == []

    @pytest.mark.parametrize("amount", ["0.001", "0.0049", "1E-999999"])
    def test_amount_rounds_to_zero_cents(self, amount: str) -> None:
        errors = validate_amount(amount)

        assert [e.code for e in errors] == ["amount_below_minimum"]
        assert errors[0].message == "Please enter an amount of at least $0.01."

    def test_half_cent_rounds_up_to_one(self) -> None:
        assert validate_amount("0.005") == []

    @pytest.mark.parametrize("status", ["pending", "paid"])
    def test_status_allowed(self, status: str) -> None:
        assert validate_status(status) == []

    @pytest.mark.parametrize("status", ["PAID", "overdue", "", None])
    def test_status_rejected(self, status: object) -> None:
        errors = validate_status(status)

        assert [e.code for e in errors] == ["status_invalid"]


class TestValidateInvoiceForm:
    """Test whole-form validation."""

    def test_valid_form(self) -> None:
        outcome = validate_invoice_form({"customerId": "c1", "amount": "25.00", "status": "pending"})

        assert outcome == Valid(
            record=InvoiceFields(customer_id="c1", amount_cents=2500, status="pending")
        )

    def test_collects_errors_from_all_fields(self) -> None:
        outcome = validate_invoice_form({"customerId": "", "amount": "-1", "status": "void"})

        assert isinstance(outcome, Invalid)
        assert outcome.field_errors() == {
            "customerId": [
                "Please select a customer.",
                "Customer reference may only contain letters, digits, '-' and '_'.",
            ],
            "amount": ["Please enter an amount greater than $0."],
            "status": ["Please select an invoice status."],
        }

    def test_ignores_extra_fields(self) -> None:
        outcome = validate_invoice_form(
            {"customerId": "c1", "amount": "1", "status": "paid", "id": "x", "date": "2020-01-01"}
        )

        assert isinstance(outcome, Valid)
