"""Customer API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response

from credit_system.application.dto import (
    CustomerRequest,
    CustomerUpdateRequest,
    CustomerView,
)
from credit_system.application.services import CustomerService
from credit_system.core.dependencies import get_customer_service
from credit_system.core.metrics import record_customer_deleted, record_customer_registered
from credit_system.presentation.schemas import (
    CustomerRequestSchema,
    CustomerResponseSchema,
    CustomerUpdateSchema,
    ErrorResponseSchema,
)

customer_router = APIRouter(
    prefix="/customers",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        404: {"model": ErrorResponseSchema, "description": "Customer not found"},
    },
)


def _to_schema(customer) -> CustomerResponseSchema:
    view = CustomerView.from_entity(customer)
    return CustomerResponseSchema(
        id=view.id,
        first_name=view.first_name,
        last_name=view.last_name,
        tax_id=view.tax_id,
        income=view.income,
        email=view.email,
        zip_code=view.zip_code,
        street=view.street,
    )


@customer_router.post(
    "",
    response_model=CustomerResponseSchema,
    status_code=201,
    summary="Register Customer",
    responses={
        409: {"model": ErrorResponseSchema, "description": "Tax id or email already registered"},
    },
)
async def create_customer(
    request: CustomerRequestSchema,
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CustomerResponseSchema:
    """
    Register a new customer.

    The password is hashed before it is stored and is never returned.
    """
    dto = CustomerRequest(
        first_name=request.first_name,
        last_name=request.last_name,
        tax_id=request.tax_id,
        income=request.income,
        email=request.email,
        password=request.password,
        zip_code=request.zip_code,
        street=request.street,
    )

    customer = await customer_service.save(dto.to_entity())
    record_customer_registered()

    return _to_schema(customer)


@customer_router.get(
    "/{customer_id}",
    response_model=CustomerResponseSchema,
    summary="Get Customer",
)
async def get_customer(
    customer_id: Annotated[int, Path(description="Identifier of the customer")],
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CustomerResponseSchema:
    customer = await customer_service.find_by_id(customer_id)
    return _to_schema(customer)


@customer_router.patch(
    "",
    response_model=CustomerResponseSchema,
    summary="Update Customer",
    description="Update names, income, email and address. Tax id and password cannot change.",
    responses={
        409: {"model": ErrorResponseSchema, "description": "Email already registered"},
    },
)
async def update_customer(
    customer_id: Annotated[int, Query(description="Identifier of the customer")],
    request: CustomerUpdateSchema,
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CustomerResponseSchema:
    dto = CustomerUpdateRequest(
        first_name=request.first_name,
        last_name=request.last_name,
        income=request.income,
        email=request.email,
        zip_code=request.zip_code,
        street=request.street,
    )

    customer = await customer_service.update(customer_id, dto)
    return _to_schema(customer)


@customer_router.delete(
    "/{customer_id}",
    status_code=204,
    summary="Delete Customer",
    responses={
        409: {"model": ErrorResponseSchema, "description": "Customer still owns credits"},
    },
)
async def delete_customer(
    customer_id: Annotated[int, Path(description="Identifier of the customer")],
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> Response:
    await customer_service.delete(customer_id)
    record_customer_deleted()
    return Response(status_code=204)
