"""Customer-related Pydantic schemas."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CustomerRequestSchema(BaseModel):
    """Schema for POST /v1/customers request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "first_name": "Aldair",
                    "last_name": "Garros",
                    "tax_id": "28475934625",
                    "income": "1000.00",
                    "email": "info@aldairgc.com",
                    "password": "123654",
                    "zip_code": "65000000",
                    "street": "Rua Amazonas",
                }
            ]
        }
    )

    first_name: Optional[str] = Field(None, max_length=100, description="Customer's first name")
    last_name: Optional[str] = Field(None, max_length=100, description="Customer's last name")
    tax_id: Optional[str] = Field(None, max_length=14, description="CPF, digits or formatted")
    income: Optional[Decimal] = Field(None, description="Monthly income", examples=["1000.00"])
    email: Optional[str] = Field(None, max_length=255, description="Contact email")
    password: Optional[str] = Field(None, description="Account password, stored hashed")
    zip_code: Optional[str] = Field(None, max_length=20, description="Postal code")
    street: Optional[str] = Field(None, max_length=255, description="Street address")


class CustomerUpdateSchema(BaseModel):
    """Schema for PATCH /v1/customers request body."""

    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    income: Optional[Decimal] = Field(None, examples=["10000.00"])
    email: Optional[str] = Field(None, max_length=255)
    zip_code: Optional[str] = Field(None, max_length=20)
    street: Optional[str] = Field(None, max_length=255)


class CustomerResponseSchema(BaseModel):
    """Schema for a customer in API responses."""

    id: int = Field(..., description="Customer identifier")
    first_name: str
    last_name: str
    tax_id: str
    income: Decimal
    email: str
    zip_code: str
    street: str

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "id": 1,
                    "first_name": "Aldair",
                    "last_name": "Garros",
                    "tax_id": "28475934625",
                    "income": "1000.00",
                    "email": "info@aldairgc.com",
                    "zip_code": "65000000",
                    "street": "Rua Amazonas",
                }
            ]
        }
    )
