"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .customer import CustomerNotFoundException, CustomerHasCreditsException
from .credit import (
    CreditNotFoundException,
    CreditOwnershipMismatchException,
    InvalidInstallmentDateException,
)
from .persistence import UniquenessViolationException
from .request import FieldError, InvalidRequestException

__all__ = [
    "DomainException",
    "CustomerNotFoundException",
    "CustomerHasCreditsException",
    "CreditNotFoundException",
    "CreditOwnershipMismatchException",
    "InvalidInstallmentDateException",
    "UniquenessViolationException",
    "FieldError",
    "InvalidRequestException",
]
