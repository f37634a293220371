"""
Fixtures for integration tests.

Provides:
- Test client for FastAPI app
- In-memory database for testing
- Request payloads for customers and credits
"""

from datetime import date
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from dateutil.relativedelta import relativedelta
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from credit_system.main import app
from credit_system.core.dependencies import (
    get_credit_repository,
    get_customer_repository,
)
from credit_system.infrastructure.database import Base
from credit_system.infrastructure.repositories import (
    SqlCreditRepository,
    SqlCustomerRepository,
)


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def customer_repository(test_session: AsyncSession) -> SqlCustomerRepository:
    return SqlCustomerRepository(test_session)


@pytest.fixture
def credit_repository(test_session: AsyncSession) -> SqlCreditRepository:
    return SqlCreditRepository(test_session)


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client bound to the in-memory database.

    Both repositories share the test session, so data written by one
    request is visible to the next.
    """
    async def override_get_customer_repository():
        return SqlCustomerRepository(test_session)

    async def override_get_credit_repository():
        return SqlCreditRepository(test_session)

    app.dependency_overrides[get_customer_repository] = override_get_customer_repository
    app.dependency_overrides[get_credit_repository] = override_get_credit_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def customer_payload() -> dict:
    """Registration body for a valid customer."""
    return {
        "first_name": "Aldair",
        "last_name": "Garros",
        "tax_id": "28475934625",
        "income": "1000.00",
        "email": "info@aldairgc.com",
        "password": "123654",
        "zip_code": "65000000",
        "street": "Rua Amazonas",
    }


@pytest.fixture
def other_customer_payload() -> dict:
    """Registration body for a second, distinct customer."""
    return {
        "first_name": "Marta",
        "last_name": "Souza",
        "tax_id": "52998224725",
        "income": "4500.00",
        "email": "marta@souzaconsultoria.com",
        "password": "s3cret!",
        "zip_code": "01310100",
        "street": "Avenida Paulista",
    }


@pytest.fixture
def credit_payload() -> dict:
    """Credit body with a first installment two months ahead. customer_id is filled per test."""
    return {
        "credit_value": "1000.00",
        "day_first_installment": (date.today() + relativedelta(months=2)).isoformat(),
        "number_of_installments": 5,
    }


@pytest_asyncio.fixture
async def registered_customer(client: AsyncClient, customer_payload: dict) -> dict:
    """Register the default customer and return the response body."""
    response = await client.post("/v1/customers", json=customer_payload)
    assert response.status_code == 201
    return response.json()
