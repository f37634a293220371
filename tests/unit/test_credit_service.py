"""
Unit tests for CreditService.

These tests verify:
1. save re-checks the installment window before touching the store
2. save resolves the owner through CustomerService
3. find_by_credit_code enforces ownership
"""

import pytest
from datetime import date, timedelta
from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import uuid4

from dateutil.relativedelta import relativedelta

from credit_system.application.services import CreditService, CustomerService
from credit_system.domain.entities import Address, Credit, Customer
from credit_system.domain.exceptions import (
    CreditNotFoundException,
    CreditOwnershipMismatchException,
    CustomerNotFoundException,
    InvalidInstallmentDateException,
    InvalidRequestException,
)
from credit_system.domain.interfaces import CreditRepository, CustomerRepository

TODAY = date(2024, 1, 15)


def make_customer(customer_id: int) -> Customer:
    return Customer(
        id=customer_id,
        first_name="Aldair",
        last_name="Garros",
        tax_id="28475934625",
        income=Decimal("1000.00"),
        email="info@aldairgc.com",
        password_hash="hash",
        address=Address(zip_code="65000000", street="Rua Amazonas"),
    )


def make_credit(customer_id=1, first_installment=None, credit_id=None) -> Credit:
    return Credit(
        id=credit_id,
        credit_value=Decimal("1000.00"),
        day_first_installment=first_installment or TODAY + relativedelta(months=2),
        number_of_installments=5,
        customer_id=customer_id,
    )


@pytest.fixture
def customer_repository() -> AsyncMock:
    repo = AsyncMock(spec=CustomerRepository)
    repo.get_by_id.side_effect = lambda customer_id: (
        make_customer(customer_id) if customer_id in (1, 2) else None
    )
    return repo


@pytest.fixture
def credit_repository() -> AsyncMock:
    repo = AsyncMock(spec=CreditRepository)

    async def save(credit):
        credit.id = 10
        return credit

    repo.save.side_effect = save
    return repo


@pytest.fixture
def service(credit_repository, customer_repository) -> CreditService:
    return CreditService(
        credit_repository=credit_repository,
        customer_service=CustomerService(customer_repository),
    )


class TestSave:
    @pytest.mark.asyncio
    async def test_two_months_ahead_is_saved_with_owner(self, service, credit_repository):
        credit = make_credit()

        saved = await service.save(credit, today=TODAY)

        assert saved.id == 10
        assert saved.customer.email == "info@aldairgc.com"
        credit_repository.save.assert_awaited_once_with(credit)

    @pytest.mark.asyncio
    async def test_past_three_months_raises_and_stores_nothing(
        self, service, credit_repository, customer_repository
    ):
        credit = make_credit(
            first_installment=TODAY + relativedelta(months=3) + timedelta(days=1)
        )

        with pytest.raises(InvalidInstallmentDateException) as exc_info:
            await service.save(credit, today=TODAY)

        assert exc_info.value.message == (
            "First day of installment must be within the next 3 months"
        )
        credit_repository.save.assert_not_awaited()
        customer_repository.get_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_exact_limit_is_accepted(self, service):
        credit = make_credit(first_installment=TODAY + relativedelta(months=3))

        saved = await service.save(credit, today=TODAY)

        assert saved.id == 10

    @pytest.mark.asyncio
    async def test_non_future_date_is_rejected(self, service, credit_repository):
        with pytest.raises(InvalidInstallmentDateException):
            await service.save(make_credit(first_installment=TODAY), today=TODAY)

        credit_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_customer_raises_not_found(self, service, credit_repository):
        with pytest.raises(CustomerNotFoundException):
            await service.save(make_credit(customer_id=404), today=TODAY)

        credit_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_first_installment_is_invalid(self, service, credit_repository):
        credit = make_credit()
        credit.day_first_installment = None

        with pytest.raises(InvalidRequestException) as exc_info:
            await service.save(credit, today=TODAY)

        assert exc_info.value.errors[0].field == "day_first_installment"
        credit_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_customer_id_is_invalid(self, service):
        with pytest.raises(InvalidRequestException) as exc_info:
            await service.save(make_credit(customer_id=None), today=TODAY)

        assert exc_info.value.errors[0].field == "customer_id"


class TestFindAllByCustomerId:
    @pytest.mark.asyncio
    async def test_returns_store_order(self, service, credit_repository):
        credits = [make_credit(credit_id=1), make_credit(credit_id=2)]
        credit_repository.get_by_customer_id.return_value = credits

        result = await service.find_all_by_customer_id(1)

        assert result == credits
        credit_repository.get_by_customer_id.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_empty_for_customer_without_credits(self, service, credit_repository):
        credit_repository.get_by_customer_id.return_value = []

        assert await service.find_all_by_customer_id(2) == []


class TestFindByCreditCode:
    @pytest.mark.asyncio
    async def test_owner_gets_credit(self, service, credit_repository):
        credit = make_credit(customer_id=1, credit_id=3)
        credit_repository.get_by_credit_code.return_value = credit

        result = await service.find_by_credit_code(1, credit.credit_code)

        assert result.credit_code == credit.credit_code

    @pytest.mark.asyncio
    async def test_other_customer_gets_ownership_mismatch(self, service, credit_repository):
        credit = make_credit(customer_id=2, credit_id=3)
        credit_repository.get_by_credit_code.return_value = credit

        with pytest.raises(CreditOwnershipMismatchException) as exc_info:
            await service.find_by_credit_code(1, credit.credit_code)

        assert exc_info.value.message == "Contact admin"

    @pytest.mark.asyncio
    async def test_unknown_code_raises_not_found(self, service, credit_repository):
        code = uuid4()
        credit_repository.get_by_credit_code.return_value = None

        with pytest.raises(CreditNotFoundException) as exc_info:
            await service.find_by_credit_code(1, code)

        assert exc_info.value.message == f"CreditCode {code} not found"
