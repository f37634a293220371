"""Customer entity and its embedded address."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Address:
    """Postal address owned by a customer."""

    zip_code: str
    street: str


@dataclass
class Customer:
    """
    A registered customer who may hold credits.

    ``id`` stays None until the customer is persisted. The tax id and
    password hash are fixed at registration; the update path only
    touches names, income, email and address.
    """

    first_name: str
    last_name: str
    tax_id: str
    income: Decimal
    email: str
    password_hash: str
    address: Address
    id: Optional[int] = None
