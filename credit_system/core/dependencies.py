"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from credit_system.infrastructure.database import get_db_session
from credit_system.infrastructure.repositories import (
    SqlCreditRepository,
    SqlCustomerRepository,
)
from credit_system.application.services import CreditService, CustomerService


# Repository dependencies
async def get_customer_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SqlCustomerRepository:
    """Get a CustomerRepository bound to the request session."""
    return SqlCustomerRepository(session)


async def get_credit_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SqlCreditRepository:
    """Get a CreditRepository bound to the request session."""
    return SqlCreditRepository(session)


# Service dependencies
async def get_customer_service(
    customer_repo: Annotated[SqlCustomerRepository, Depends(get_customer_repository)],
) -> CustomerService:
    """Get a CustomerService instance."""
    return CustomerService(customer_repository=customer_repo)


async def get_credit_service(
    credit_repo: Annotated[SqlCreditRepository, Depends(get_credit_repository)],
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CreditService:
    """Get a CreditService instance with its customer service collaborator."""
    return CreditService(
        credit_repository=credit_repo,
        customer_service=customer_service,
    )
