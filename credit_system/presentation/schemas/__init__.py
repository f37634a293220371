"""Pydantic schemas for API request/response validation."""

from .customer import (
    CustomerRequestSchema,
    CustomerResponseSchema,
    CustomerUpdateSchema,
)
from .credit import (
    CreditCreatedSchema,
    CreditRequestSchema,
    CreditResponseSchema,
    CreditSummarySchema,
)
from .error import ErrorResponseSchema, FieldErrorSchema

__all__ = [
    "CustomerRequestSchema",
    "CustomerResponseSchema",
    "CustomerUpdateSchema",
    "CreditCreatedSchema",
    "CreditRequestSchema",
    "CreditResponseSchema",
    "CreditSummarySchema",
    "ErrorResponseSchema",
    "FieldErrorSchema",
]
