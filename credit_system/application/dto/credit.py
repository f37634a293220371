"""Data transfer objects for credit operations."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Optional

from credit_system.domain.entities import Credit
from credit_system.domain.exceptions import FieldError, InvalidRequestException
from credit_system.service.rules import (
    date_within_next_three_months,
    is_future_date,
    is_valid_installment_count,
    rule_settings,
)


@dataclass(frozen=True)
class CreditRequest:
    """Input data for creating a credit."""

    credit_value: Optional[Decimal]
    day_first_installment: Optional[date]
    number_of_installments: Optional[int]
    customer_id: Optional[int]

    def validate(self, today: Optional[date] = None) -> List[FieldError]:
        errors: List[FieldError] = []

        if self.credit_value is None:
            errors.append(FieldError("credit_value", "Inform a valid value"))
        elif self.credit_value <= 0:
            errors.append(FieldError("credit_value", "Credit value must be positive"))

        if self.day_first_installment is None:
            errors.append(
                FieldError("day_first_installment", "Inform the date of first installment")
            )
        elif not is_future_date(self.day_first_installment, today):
            errors.append(
                FieldError("day_first_installment", "The date must be in the future")
            )
        elif not date_within_next_three_months(self.day_first_installment, today):
            errors.append(
                FieldError(
                    "day_first_installment",
                    "First day of installment must be within the next "
                    f"{rule_settings.installment_window_months} months",
                )
            )

        if self.number_of_installments is None:
            errors.append(
                FieldError("number_of_installments", "Inform the number of installments")
            )
        elif not is_valid_installment_count(self.number_of_installments):
            if self.number_of_installments > rule_settings.max_installments:
                message = f"Not greater than {rule_settings.max_installments}"
            else:
                message = "Invalid number of installments"
            errors.append(FieldError("number_of_installments", message))

        if self.customer_id is None:
            errors.append(FieldError("customer_id", "Invalid customer ID"))

        return errors

    def to_entity(self) -> Credit:
        """
        Build a new Credit with a fresh credit code.

        Raises:
            InvalidRequestException: If any field check fails
        """
        errors = self.validate()
        if errors:
            raise InvalidRequestException(errors)

        return Credit(
            credit_value=self.credit_value,
            day_first_installment=self.day_first_installment,
            number_of_installments=self.number_of_installments,
            customer_id=self.customer_id,
        )


@dataclass(frozen=True)
class CreditView:
    """Full representation of a credit, including its owner's contact data."""

    credit_code: str
    credit_value: Decimal
    day_first_installment: str
    number_of_installments: int
    status: str
    customer_id: int
    customer_email: Optional[str]
    customer_income: Optional[Decimal]

    @classmethod
    def from_entity(cls, credit: Credit) -> "CreditView":
        customer = credit.customer
        return cls(
            credit_code=str(credit.credit_code),
            credit_value=credit.credit_value,
            day_first_installment=credit.day_first_installment.isoformat(),
            number_of_installments=credit.number_of_installments,
            status=credit.status.value,
            customer_id=credit.customer_id,
            customer_email=customer.email if customer else None,
            customer_income=customer.income if customer else None,
        )


@dataclass(frozen=True)
class CreditSummary:
    """Brief summary of a credit for owner listings."""

    credit_code: str
    credit_value: Decimal
    number_of_installments: int

    @classmethod
    def from_entity(cls, credit: Credit) -> "CreditSummary":
        return cls(
            credit_code=str(credit.credit_code),
            credit_value=credit.credit_value,
            number_of_installments=credit.number_of_installments,
        )
