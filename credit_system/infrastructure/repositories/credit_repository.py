"""SQLAlchemy implementation of CreditRepository."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from credit_system.domain.entities import Credit, CreditStatus
from credit_system.domain.exceptions import UniquenessViolationException
from credit_system.domain.interfaces import CreditRepository
from credit_system.infrastructure.database.errors import is_unique_violation
from credit_system.infrastructure.database.models import CreditModel

from .customer_repository import customer_to_entity


class SqlCreditRepository(CreditRepository):
    """Relational implementation of the Credit repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, credit: Credit) -> Credit:
        """Persist a new credit."""
        existing = await self._session.execute(
            select(CreditModel.id).where(
                CreditModel.credit_code == str(credit.credit_code)
            )
        )
        if existing.first() is not None:
            raise UniquenessViolationException("Credit", "credit code")

        model = CreditModel(
            credit_code=str(credit.credit_code),
            credit_value=credit.credit_value,
            day_first_installment=credit.day_first_installment,
            number_of_installments=credit.number_of_installments,
            status=credit.status.value,
            customer_id=credit.customer_id,
        )

        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            if is_unique_violation(exc):
                raise UniquenessViolationException("Credit") from exc
            raise

        credit.id = model.id
        return credit

    async def get_by_id(self, credit_id: int) -> Optional[Credit]:
        """Retrieve a credit by ID."""
        stmt = (
            select(CreditModel)
            .options(selectinload(CreditModel.customer))
            .where(CreditModel.id == credit_id)
        )
        return await self._fetch_one(stmt)

    async def get_all(self, limit: int = 100, offset: int = 0) -> List[Credit]:
        """Retrieve credits ordered by ID."""
        stmt = (
            select(CreditModel)
            .options(selectinload(CreditModel.customer))
            .order_by(CreditModel.id.asc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)

        return [self._to_entity(model) for model in result.scalars().all()]

    async def get_by_customer_id(self, customer_id: int) -> List[Credit]:
        """Retrieve all credits owned by a customer, oldest first."""
        stmt = (
            select(CreditModel)
            .options(selectinload(CreditModel.customer))
            .where(CreditModel.customer_id == customer_id)
            .order_by(CreditModel.id.asc())
        )
        result = await self._session.execute(stmt)

        return [self._to_entity(model) for model in result.scalars().all()]

    async def get_by_credit_code(self, credit_code: UUID) -> Optional[Credit]:
        """Retrieve a credit by its credit code."""
        stmt = (
            select(CreditModel)
            .options(selectinload(CreditModel.customer))
            .where(CreditModel.credit_code == str(credit_code))
        )
        return await self._fetch_one(stmt)

    async def _fetch_one(self, stmt) -> Optional[Credit]:
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    def _to_entity(self, model: CreditModel) -> Credit:
        """Convert database model to domain entity."""
        return Credit(
            id=model.id,
            credit_code=UUID(model.credit_code),
            credit_value=model.credit_value,
            day_first_installment=model.day_first_installment,
            number_of_installments=model.number_of_installments,
            status=CreditStatus(model.status),
            customer_id=model.customer_id,
            customer=customer_to_entity(model.customer) if model.customer else None,
        )
