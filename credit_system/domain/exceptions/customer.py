"""Customer-related domain exceptions."""

from .base import DomainException


class CustomerNotFoundException(DomainException):
    """Raised when a customer cannot be found."""

    def __init__(self, customer_id: int):
        super().__init__(
            message=f"Id {customer_id} not found",
            code="CUSTOMER_NOT_FOUND",
        )
        self.customer_id = customer_id


class CustomerHasCreditsException(DomainException):
    """Raised when deleting a customer who still owns credits."""

    def __init__(self, customer_id: int, credit_count: int):
        super().__init__(
            message=f"Customer {customer_id} owns {credit_count} credit(s) and cannot be deleted",
            code="CUSTOMER_HAS_CREDITS",
        )
        self.customer_id = customer_id
        self.credit_count = credit_count
