"""Customer service - handles customer registration and lookup use cases."""

import structlog

from credit_system.application.dto import CustomerUpdateRequest
from credit_system.domain.entities import Customer
from credit_system.domain.exceptions import CustomerNotFoundException
from credit_system.domain.interfaces import CustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """
    Application service for customer use cases.
    """

    def __init__(self, customer_repository: CustomerRepository):
        self._customer_repo = customer_repository

    async def save(self, customer: Customer) -> Customer:
        """
        Persist a new or existing customer.

        Args:
            customer: The customer to save

        Returns:
            The saved customer

        Raises:
            UniquenessViolationException: If the tax id or email is taken
        """
        is_new = customer.id is None
        saved = await self._customer_repo.save(customer)

        logger.info(
            "customer_saved",
            customer_id=saved.id,
            created=is_new,
        )

        return saved

    async def find_by_id(self, customer_id: int) -> Customer:
        """
        Get a customer by ID.

        Args:
            customer_id: The customer's identifier

        Returns:
            The customer entity

        Raises:
            CustomerNotFoundException: If customer not found
        """
        customer = await self._customer_repo.get_by_id(customer_id)

        if customer is None:
            logger.warning("customer_not_found", customer_id=customer_id)
            raise CustomerNotFoundException(customer_id)

        return customer

    async def update(self, customer_id: int, request: CustomerUpdateRequest) -> Customer:
        """
        Apply an update to an existing customer.

        Args:
            customer_id: The customer's identifier
            request: The new names, income, email and address

        Returns:
            The updated customer

        Raises:
            CustomerNotFoundException: If customer not found
            InvalidRequestException: If the update fails validation
            UniquenessViolationException: If the new email is taken
        """
        customer = await self.find_by_id(customer_id)
        request.apply_to(customer)
        return await self.save(customer)

    async def delete(self, customer_id: int) -> None:
        """
        Delete a customer.

        Args:
            customer_id: The customer's identifier

        Raises:
            CustomerNotFoundException: If customer not found
            CustomerHasCreditsException: If the customer still owns credits
        """
        customer = await self.find_by_id(customer_id)
        await self._customer_repo.delete(customer)

        logger.info("customer_deleted", customer_id=customer_id)
