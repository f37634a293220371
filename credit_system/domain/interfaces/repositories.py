"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from credit_system.domain.entities import Credit, Customer


class CustomerRepository(ABC):
    """
    Abstract repository for Customer persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, customer: Customer) -> Customer:
        """
        Insert a new customer or update an existing one.

        Args:
            customer: The customer to save; ``id`` None means insert

        Returns:
            The saved customer with its identifier populated

        Raises:
            UniquenessViolationException: If the tax id or email is taken
            CustomerNotFoundException: If updating an id that does not exist
        """
        ...

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """
        Retrieve a customer by ID.

        Args:
            customer_id: The customer's identifier

        Returns:
            The customer if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_all(self, limit: int = 100, offset: int = 0) -> List[Customer]:
        """
        Retrieve customers ordered by identifier.

        Args:
            limit: Maximum number of customers to return
            offset: Number of customers to skip

        Returns:
            List of customers
        """
        ...

    @abstractmethod
    async def delete(self, customer: Customer) -> None:
        """
        Remove a customer.

        Args:
            customer: The persisted customer to remove

        Raises:
            CustomerHasCreditsException: If the customer still owns credits
        """
        ...


class CreditRepository(ABC):
    """
    Abstract repository for Credit persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, credit: Credit) -> Credit:
        """
        Persist a new credit.

        Args:
            credit: The credit to save, with its owner id set

        Returns:
            The saved credit with its identifier populated

        Raises:
            UniquenessViolationException: If the credit code is taken
        """
        ...

    @abstractmethod
    async def get_by_id(self, credit_id: int) -> Optional[Credit]:
        """
        Retrieve a credit by its internal identifier.

        Args:
            credit_id: The credit's identifier

        Returns:
            The credit if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_all(self, limit: int = 100, offset: int = 0) -> List[Credit]:
        """
        Retrieve credits ordered by identifier.

        Args:
            limit: Maximum number of credits to return
            offset: Number of credits to skip

        Returns:
            List of credits
        """
        ...

    @abstractmethod
    async def get_by_customer_id(self, customer_id: int) -> List[Credit]:
        """
        Retrieve all credits owned by a customer.

        Args:
            customer_id: The owner's identifier

        Returns:
            List of credits, possibly empty
        """
        ...

    @abstractmethod
    async def get_by_credit_code(self, credit_code: UUID) -> Optional[Credit]:
        """
        Retrieve a credit by its external credit code.

        Args:
            credit_code: The credit's public handle

        Returns:
            The credit if found, None otherwise
        """
        ...
