"""Data Transfer Objects for application layer."""

from .customer import CustomerRequest, CustomerUpdateRequest, CustomerView
from .credit import CreditRequest, CreditSummary, CreditView

__all__ = [
    "CustomerRequest",
    "CustomerUpdateRequest",
    "CustomerView",
    "CreditRequest",
    "CreditSummary",
    "CreditView",
]
