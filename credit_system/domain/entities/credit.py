"""Credit entity representing a loan owned by a customer."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from .customer import Customer


class CreditStatus(str, Enum):
    """Lifecycle status of a credit."""

    IN_PROGRESS = "in_progress"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass
class Credit:
    """
    A credit requested by a customer.

    Credits are created once with all fields fixed and are never
    updated in place. ``credit_code`` is the external handle handed
    to clients; ``id`` is the internal identifier.
    """

    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int
    customer_id: Optional[int]
    credit_code: UUID = field(default_factory=uuid4)
    status: CreditStatus = CreditStatus.IN_PROGRESS
    customer: Optional[Customer] = None
    id: Optional[int] = None

    def belongs_to(self, customer_id: int) -> bool:
        """Check whether the credit is owned by the given customer."""
        return self.customer_id is not None and self.customer_id == customer_id
