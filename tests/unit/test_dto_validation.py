"""
Unit tests for request DTO validation.

These tests verify:
1. CustomerRequest collects every failing field and builds entities
2. CustomerUpdateRequest only touches the mutable fields
3. CreditRequest enforces value, date window and installment bounds
"""

import pytest
from datetime import date, timedelta
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from credit_system.application.dto import (
    CreditRequest,
    CreditSummary,
    CreditView,
    CustomerRequest,
    CustomerUpdateRequest,
    CustomerView,
)
from credit_system.core.security import verify_password
from credit_system.domain.entities import Address, Credit, CreditStatus, Customer
from credit_system.domain.exceptions import FieldError, InvalidRequestException
from credit_system.service.rules import rule_settings

TODAY = date(2024, 1, 15)


def make_customer_request(**overrides) -> CustomerRequest:
    fields = {
        "first_name": "Aldair",
        "last_name": "Garros",
        "tax_id": "284.759.346-25",
        "income": Decimal("1000.00"),
        "email": " info@aldairgc.com ",
        "password": "123654",
        "zip_code": "65000000",
        "street": "Rua Amazonas",
    }
    fields.update(overrides)
    return CustomerRequest(**fields)


def make_credit_request(**overrides) -> CreditRequest:
    fields = {
        "credit_value": Decimal("1000.00"),
        "day_first_installment": TODAY + relativedelta(months=2),
        "number_of_installments": 5,
        "customer_id": 1,
    }
    fields.update(overrides)
    return CreditRequest(**fields)


def messages(errors) -> dict:
    return {e.field: e.message for e in errors}


# =============================================================================
# CustomerRequest Tests
# =============================================================================

class TestCustomerRequest:
    """Tests for CustomerRequest."""

    def test_valid_request_has_no_errors(self):
        assert make_customer_request().validate() == []

    def test_blank_fields_reported(self):
        request = make_customer_request(first_name=" ", zip_code="", password=None)

        assert messages(request.validate()) == {
            "first_name": "First name must be fulfilled",
            "password": "Password must be fulfilled",
            "zip_code": "Zipcode must be fulfilled",
        }

    def test_invalid_cpf_reported(self):
        request = make_customer_request(tax_id="12345678900")

        assert request.validate() == [FieldError("tax_id", "Invalid CPF number")]

    def test_invalid_email_reported(self):
        request = make_customer_request(email="info@")

        assert request.validate() == [FieldError("email", "Invalid email")]

    def test_missing_income_reported(self):
        request = make_customer_request(income=None)

        assert request.validate() == [FieldError("income", "Income must be informed")]

    def test_zero_income_is_allowed(self):
        assert make_customer_request(income=Decimal("0")).validate() == []

    def test_to_entity_normalizes_and_hashes(self):
        customer = make_customer_request().to_entity()

        assert customer.id is None
        assert customer.tax_id == "28475934625"
        assert customer.email == "info@aldairgc.com"
        assert customer.address == Address(zip_code="65000000", street="Rua Amazonas")
        assert customer.password_hash != "123654"
        assert verify_password("123654", customer.password_hash)

    def test_to_entity_raises_with_all_errors(self):
        request = make_customer_request(first_name="", email="bad")

        with pytest.raises(InvalidRequestException) as exc_info:
            request.to_entity()

        assert {e.field for e in exc_info.value.errors} == {"first_name", "email"}
        assert exc_info.value.code == "INVALID_REQUEST"


# =============================================================================
# CustomerUpdateRequest Tests
# =============================================================================

class TestCustomerUpdateRequest:
    """Tests for CustomerUpdateRequest."""

    def _existing(self) -> Customer:
        return Customer(
            id=7,
            first_name="Aldair",
            last_name="Garros",
            tax_id="28475934625",
            income=Decimal("1000.00"),
            email="info@aldairgc.com",
            password_hash="hash",
            address=Address(zip_code="65000000", street="Rua Amazonas"),
        )

    def test_apply_updates_mutable_fields_only(self):
        customer = self._existing()
        request = CustomerUpdateRequest(
            first_name="Aldair",
            last_name="Costa",
            income=Decimal("5000.00"),
            email="new@aldairgc.com",
            zip_code="65010000",
            street="Rua do Sol",
        )

        request.apply_to(customer)

        assert customer.id == 7
        assert customer.last_name == "Costa"
        assert customer.income == Decimal("5000.00")
        assert customer.email == "new@aldairgc.com"
        assert customer.address.street == "Rua do Sol"
        assert customer.tax_id == "28475934625"
        assert customer.password_hash == "hash"

    def test_apply_rejects_negative_income_without_mutating(self):
        customer = self._existing()
        request = CustomerUpdateRequest(
            first_name="Aldair",
            last_name="Costa",
            income=Decimal("-1"),
            email="info@aldairgc.com",
            zip_code="65000000",
            street="Rua Amazonas",
        )

        with pytest.raises(InvalidRequestException):
            request.apply_to(customer)

        assert customer.last_name == "Garros"


# =============================================================================
# CreditRequest Tests
# =============================================================================

class TestCreditRequest:
    """Tests for CreditRequest."""

    def test_valid_request_has_no_errors(self):
        assert make_credit_request().validate(TODAY) == []

    def test_missing_fields_reported(self):
        request = CreditRequest(
            credit_value=None,
            day_first_installment=None,
            number_of_installments=None,
            customer_id=None,
        )

        assert messages(request.validate(TODAY)) == {
            "credit_value": "Inform a valid value",
            "day_first_installment": "Inform the date of first installment",
            "number_of_installments": "Inform the number of installments",
            "customer_id": "Invalid customer ID",
        }

    def test_negative_value_reported(self):
        request = make_credit_request(credit_value=Decimal("-10"))

        assert request.validate(TODAY) == [
            FieldError("credit_value", "Credit value must be positive")
        ]

    def test_date_today_is_not_future(self):
        request = make_credit_request(day_first_installment=TODAY)

        assert request.validate(TODAY) == [
            FieldError("day_first_installment", "The date must be in the future")
        ]

    def test_date_at_window_limit_accepted(self):
        request = make_credit_request(day_first_installment=date(2024, 4, 15))

        assert request.validate(TODAY) == []

    def test_date_past_window_reported(self):
        request = make_credit_request(day_first_installment=date(2024, 4, 16))

        assert request.validate(TODAY) == [
            FieldError(
                "day_first_installment",
                "First day of installment must be within the next 3 months",
            )
        ]

    def test_window_message_follows_configured_months(self, monkeypatch):
        monkeypatch.setattr(rule_settings, "installment_window_months", 2)
        request = make_credit_request(day_first_installment=date(2024, 3, 16))

        assert request.validate(TODAY) == [
            FieldError(
                "day_first_installment",
                "First day of installment must be within the next 2 months",
            )
        ]

    def test_installment_bounds_follow_configured_maximum(self, monkeypatch):
        monkeypatch.setattr(rule_settings, "max_installments", 24)

        assert make_credit_request(number_of_installments=24).validate(TODAY) == []
        assert make_credit_request(number_of_installments=25).validate(TODAY) == [
            FieldError("number_of_installments", "Not greater than 24")
        ]

    def test_zero_installments_reported(self):
        request = make_credit_request(number_of_installments=0)

        assert request.validate(TODAY) == [
            FieldError("number_of_installments", "Invalid number of installments")
        ]

    def test_too_many_installments_reported(self):
        request = make_credit_request(number_of_installments=49)

        assert request.validate(TODAY) == [
            FieldError("number_of_installments", "Not greater than 48")
        ]

    def test_to_entity_builds_in_progress_credit(self):
        request = make_credit_request(
            day_first_installment=date.today() + timedelta(days=10)
        )

        credit = request.to_entity()

        assert credit.id is None
        assert credit.status == CreditStatus.IN_PROGRESS
        assert credit.customer_id == 1
        assert credit.credit_code is not None

    def test_to_entity_codes_are_unique(self):
        request = make_credit_request(
            day_first_installment=date.today() + timedelta(days=10)
        )

        assert request.to_entity().credit_code != request.to_entity().credit_code


# =============================================================================
# View Tests
# =============================================================================

class TestViews:
    """Tests for response DTOs."""

    def test_customer_view_flattens_address(self):
        customer = Customer(
            id=1,
            first_name="Aldair",
            last_name="Garros",
            tax_id="28475934625",
            income=Decimal("1000.00"),
            email="info@aldairgc.com",
            password_hash="hash",
            address=Address(zip_code="65000000", street="Rua Amazonas"),
        )

        view = CustomerView.from_entity(customer)

        assert view.zip_code == "65000000"
        assert view.street == "Rua Amazonas"
        assert not hasattr(view, "password_hash")

    def test_credit_views_render_code_as_string(self):
        credit = Credit(
            credit_value=Decimal("1000.00"),
            day_first_installment=date(2024, 3, 1),
            number_of_installments=5,
            customer_id=1,
        )

        view = CreditView.from_entity(credit)
        summary = CreditSummary.from_entity(credit)

        assert view.credit_code == str(credit.credit_code)
        assert view.day_first_installment == "2024-03-01"
        assert view.status == "in_progress"
        assert view.customer_email is None
        assert summary.credit_code == view.credit_code
