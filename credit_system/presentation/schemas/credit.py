"""Credit-related Pydantic schemas."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CreditRequestSchema(BaseModel):
    """Schema for POST /v1/credits request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "credit_value": "1000.00",
                    "day_first_installment": "2025-11-01",
                    "number_of_installments": 5,
                    "customer_id": 1,
                }
            ]
        }
    )

    credit_value: Optional[Decimal] = Field(
        None,
        description="Amount borrowed, must be positive",
        examples=["1000.00"],
    )
    day_first_installment: Optional[date] = Field(
        None,
        description="First installment date, within the next 3 months",
    )
    number_of_installments: Optional[int] = Field(
        None,
        description="Number of installments, 1 to 48",
        examples=[5],
    )
    customer_id: Optional[int] = Field(
        None,
        description="Identifier of the owning customer",
        examples=[1],
    )


class CreditResponseSchema(BaseModel):
    """Schema for a single credit in API responses."""

    credit_code: str = Field(..., description="UUID handle of the credit")
    credit_value: Decimal
    day_first_installment: str = Field(..., description="ISO 8601 date (YYYY-MM-DD)")
    number_of_installments: int
    status: str = Field(..., examples=["in_progress"])
    customer_id: int
    customer_email: Optional[str] = None
    customer_income: Optional[Decimal] = None


class CreditCreatedSchema(CreditResponseSchema):
    """Schema for POST /v1/credits response body."""

    message: str = Field(
        ...,
        examples=["Credit 550e8400-e29b-41d4-a716-446655440000 - Customer info@aldairgc.com saved!"],
    )


class CreditSummarySchema(BaseModel):
    """Schema for a credit in owner listings."""

    credit_code: str
    credit_value: Decimal
    number_of_installments: int
