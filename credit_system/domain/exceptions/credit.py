"""Credit-related domain exceptions."""

from uuid import UUID

from .base import DomainException


class CreditNotFoundException(DomainException):
    """Raised when no credit has the requested credit code."""

    def __init__(self, credit_code: UUID):
        super().__init__(
            message=f"CreditCode {credit_code} not found",
            code="CREDIT_NOT_FOUND",
        )
        self.credit_code = credit_code


class InvalidInstallmentDateException(DomainException):
    """Raised when the first installment date falls outside the allowed window."""

    def __init__(self, message: str = "First day of installment must be within the next 3 months"):
        super().__init__(
            message=message,
            code="INVALID_INSTALLMENT_DATE",
        )


class CreditOwnershipMismatchException(DomainException):
    """
    Raised when a credit exists but belongs to another customer.

    The message is deliberately generic so a caller probing codes
    learns nothing about the owner.
    """

    def __init__(self, credit_code: UUID, customer_id: int):
        super().__init__(
            message="Contact admin",
            code="CREDIT_OWNERSHIP_MISMATCH",
        )
        self.credit_code = credit_code
        self.customer_id = customer_id
