"""Credit API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query

from credit_system.application.dto import CreditRequest, CreditSummary, CreditView
from credit_system.application.services import CreditService
from credit_system.core.dependencies import get_credit_service
from credit_system.core.metrics import record_credit_created
from credit_system.presentation.schemas import (
    CreditCreatedSchema,
    CreditRequestSchema,
    CreditResponseSchema,
    CreditSummarySchema,
    ErrorResponseSchema,
)

credit_router = APIRouter(
    prefix="/credits",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        404: {"model": ErrorResponseSchema, "description": "Customer or credit not found"},
    },
)


def _view_fields(view: CreditView) -> dict:
    return {
        "credit_code": view.credit_code,
        "credit_value": view.credit_value,
        "day_first_installment": view.day_first_installment,
        "number_of_installments": view.number_of_installments,
        "status": view.status,
        "customer_id": view.customer_id,
        "customer_email": view.customer_email,
        "customer_income": view.customer_income,
    }


@credit_router.post(
    "",
    response_model=CreditCreatedSchema,
    status_code=201,
    summary="Create Credit",
    description="""
    Create a credit for an existing customer.

    The first installment must fall within the next 3 months and the
    number of installments must be between 1 and 48.
    """,
)
async def create_credit(
    request: CreditRequestSchema,
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> CreditCreatedSchema:
    dto = CreditRequest(
        credit_value=request.credit_value,
        day_first_installment=request.day_first_installment,
        number_of_installments=request.number_of_installments,
        customer_id=request.customer_id,
    )

    credit = await credit_service.save(dto.to_entity())
    record_credit_created(credit.credit_value, credit.number_of_installments)

    view = CreditView.from_entity(credit)
    return CreditCreatedSchema(
        message=f"Credit {view.credit_code} - Customer {view.customer_email} saved!",
        **_view_fields(view),
    )


@credit_router.get(
    "",
    response_model=list[CreditSummarySchema],
    summary="List Customer Credits",
)
async def list_credits(
    customer_id: Annotated[int, Query(description="Identifier of the owning customer")],
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> list[CreditSummarySchema]:
    credits = await credit_service.find_all_by_customer_id(customer_id)

    return [
        CreditSummarySchema(
            credit_code=summary.credit_code,
            credit_value=summary.credit_value,
            number_of_installments=summary.number_of_installments,
        )
        for summary in (CreditSummary.from_entity(c) for c in credits)
    ]


@credit_router.get(
    "/{credit_code}",
    response_model=CreditResponseSchema,
    summary="Get Credit",
    description="Retrieve a credit by its code. Only the owning customer may read it.",
)
async def get_credit(
    credit_code: Annotated[UUID, Path(description="UUID handle of the credit")],
    customer_id: Annotated[int, Query(description="Identifier of the requesting customer")],
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> CreditResponseSchema:
    credit = await credit_service.find_by_credit_code(customer_id, credit_code)
    return CreditResponseSchema(**_view_fields(CreditView.from_entity(credit)))
