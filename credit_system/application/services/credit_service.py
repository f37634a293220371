"""Credit service - orchestrates credit creation and lookup use cases."""

from datetime import date
from typing import List, Optional
from uuid import UUID

import structlog

from credit_system.application.services.customer_service import CustomerService
from credit_system.domain.entities import Credit
from credit_system.domain.exceptions import (
    CreditNotFoundException,
    CreditOwnershipMismatchException,
    FieldError,
    InvalidInstallmentDateException,
    InvalidRequestException,
)
from credit_system.domain.interfaces import CreditRepository
from credit_system.service.rules import (
    is_within_installment_window,
    rule_settings,
)

logger = structlog.get_logger(__name__)


class CreditService:
    """
    Application service for credit use cases.

    Re-checks the installment window itself, so callers that skip
    request validation still cannot persist an out-of-window credit.
    """

    def __init__(
        self,
        credit_repository: CreditRepository,
        customer_service: CustomerService,
    ):
        self._credit_repo = credit_repository
        self._customer_service = customer_service

    async def save(self, credit: Credit, today: Optional[date] = None) -> Credit:
        """
        Create a credit for an existing customer.

        Args:
            credit: The credit to create, with customer_id set
            today: Reference date for the installment window

        Returns:
            The saved credit with its owner resolved

        Raises:
            InvalidRequestException: If customer_id or the first installment date is missing
            InvalidInstallmentDateException: If the first installment is out of window
            CustomerNotFoundException: If the owner does not exist
        """
        if credit.customer_id is None:
            raise InvalidRequestException(
                [FieldError("customer_id", "Invalid customer ID")]
            )

        if credit.day_first_installment is None:
            raise InvalidRequestException(
                [FieldError("day_first_installment", "Inform the date of first installment")]
            )

        log = logger.bind(
            customer_id=credit.customer_id,
            credit_code=str(credit.credit_code),
        )

        if not is_within_installment_window(credit.day_first_installment, today):
            log.warning(
                "credit_rejected_installment_date",
                day_first_installment=str(credit.day_first_installment),
            )
            raise InvalidInstallmentDateException(
                "First day of installment must be within the next "
                f"{rule_settings.installment_window_months} months"
            )

        credit.customer = await self._customer_service.find_by_id(credit.customer_id)

        saved = await self._credit_repo.save(credit)

        log.info(
            "credit_saved",
            credit_id=saved.id,
            number_of_installments=saved.number_of_installments,
        )

        return saved

    async def find_all_by_customer_id(self, customer_id: int) -> List[Credit]:
        """
        Get all credits owned by a customer.

        Args:
            customer_id: The owner's identifier

        Returns:
            List of credits, possibly empty
        """
        credits = await self._credit_repo.get_by_customer_id(customer_id)

        logger.info(
            "customer_credits_retrieved",
            customer_id=customer_id,
            count=len(credits),
        )

        return credits

    async def find_by_credit_code(self, customer_id: int, credit_code: UUID) -> Credit:
        """
        Get a credit by its code, on behalf of its owner.

        Args:
            customer_id: The requesting customer's identifier
            credit_code: The credit's public handle

        Returns:
            The credit entity

        Raises:
            CreditNotFoundException: If no credit has that code
            CreditOwnershipMismatchException: If the credit belongs to someone else
        """
        credit = await self._credit_repo.get_by_credit_code(credit_code)

        if credit is None:
            logger.warning("credit_not_found", credit_code=str(credit_code))
            raise CreditNotFoundException(credit_code)

        if not credit.belongs_to(customer_id):
            logger.warning(
                "credit_ownership_mismatch",
                credit_code=str(credit_code),
                customer_id=customer_id,
            )
            raise CreditOwnershipMismatchException(credit_code, customer_id)

        return credit
