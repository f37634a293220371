"""SQLAlchemy implementation of CustomerRepository."""

from typing import List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from credit_system.domain.entities import Address, Customer
from credit_system.domain.exceptions import (
    CustomerHasCreditsException,
    CustomerNotFoundException,
    UniquenessViolationException,
)
from credit_system.domain.interfaces import CustomerRepository
from credit_system.infrastructure.database.errors import is_unique_violation
from credit_system.infrastructure.database.models import CreditModel, CustomerModel


def customer_to_entity(model: CustomerModel) -> Customer:
    """Convert database model to domain entity."""
    return Customer(
        id=model.id,
        first_name=model.first_name,
        last_name=model.last_name,
        tax_id=model.tax_id,
        income=model.income,
        email=model.email,
        password_hash=model.password_hash,
        address=Address(zip_code=model.zip_code, street=model.street),
    )


class SqlCustomerRepository(CustomerRepository):
    """
    Relational implementation of the Customer repository.

    Tax id and email uniqueness is checked before writing and is
    backed by unique constraints, so a concurrent duplicate that slips
    past the check still fails with UniquenessViolationException.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, customer: Customer) -> Customer:
        """Insert a new customer or update an existing one."""
        if customer.id is None:
            return await self._insert(customer)
        return await self._update(customer)

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Retrieve a customer by ID."""
        model = await self._session.get(CustomerModel, customer_id)

        if model is None:
            return None

        return customer_to_entity(model)

    async def get_all(self, limit: int = 100, offset: int = 0) -> List[Customer]:
        """Retrieve customers ordered by ID."""
        stmt = (
            select(CustomerModel)
            .order_by(CustomerModel.id.asc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)

        return [customer_to_entity(model) for model in result.scalars().all()]

    async def delete(self, customer: Customer) -> None:
        """Delete a customer who owns no credits."""
        stmt = (
            select(func.count())
            .select_from(CreditModel)
            .where(CreditModel.customer_id == customer.id)
        )
        credit_count = (await self._session.execute(stmt)).scalar_one()

        if credit_count:
            raise CustomerHasCreditsException(customer.id, credit_count)

        model = await self._session.get(CustomerModel, customer.id)
        if model is None:
            raise CustomerNotFoundException(customer.id)

        await self._session.delete(model)
        await self._session.flush()

    async def _insert(self, customer: Customer) -> Customer:
        await self._ensure_unique(customer)

        model = CustomerModel(
            first_name=customer.first_name,
            last_name=customer.last_name,
            tax_id=customer.tax_id,
            income=customer.income,
            email=customer.email,
            password_hash=customer.password_hash,
            zip_code=customer.address.zip_code,
            street=customer.address.street,
        )

        self._session.add(model)
        await self._flush()

        customer.id = model.id
        return customer

    async def _update(self, customer: Customer) -> Customer:
        model = await self._session.get(CustomerModel, customer.id)
        if model is None:
            raise CustomerNotFoundException(customer.id)

        await self._ensure_unique(customer)

        model.first_name = customer.first_name
        model.last_name = customer.last_name
        model.income = customer.income
        model.email = customer.email
        model.zip_code = customer.address.zip_code
        model.street = customer.address.street

        await self._flush()

        return customer

    async def _ensure_unique(self, customer: Customer) -> None:
        """Reject a tax id or email already held by another customer."""
        stmt = select(CustomerModel).where(
            or_(
                CustomerModel.tax_id == customer.tax_id,
                CustomerModel.email == customer.email,
            )
        )
        if customer.id is not None:
            stmt = stmt.where(CustomerModel.id != customer.id)

        existing = (await self._session.execute(stmt.limit(1))).scalar_one_or_none()

        if existing is not None:
            field = "tax id" if existing.tax_id == customer.tax_id else "email"
            raise UniquenessViolationException("Customer", field)

    async def _flush(self) -> None:
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            if is_unique_violation(exc):
                raise UniquenessViolationException("Customer") from exc
            raise
