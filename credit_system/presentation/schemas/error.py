"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class FieldErrorSchema(BaseModel):
    """A single failed field check."""

    field: str = Field(..., description="Name of the offending field", examples=["tax_id"])
    message: str = Field(..., description="What is wrong with it", examples=["Invalid CPF number"])


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""

    error: str = Field(
        ...,
        description="Error code",
        examples=["CUSTOMER_NOT_FOUND"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Id 42 not found"],
    )
    details: list[FieldErrorSchema] = Field(
        default_factory=list,
        description="Per-field failures for invalid requests",
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "INVALID_REQUEST",
                    "message": "number_of_installments: Not greater than 48",
                    "details": [
                        {
                            "field": "number_of_installments",
                            "message": "Not greater than 48",
                        }
                    ],
                    "request_id": "abc123",
                }
            ]
        }
    }
