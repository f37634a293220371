"""Data transfer objects for customer operations."""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from email_validator import EmailNotValidError, validate_email

from credit_system.core.security import hash_password
from credit_system.domain.entities import Address, Customer
from credit_system.domain.exceptions import FieldError, InvalidRequestException
from credit_system.service.rules import is_valid_tax_id, normalize_tax_id


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _is_valid_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _check_required(errors: List[FieldError], field: str, value: Optional[str], label: str) -> None:
    if _is_blank(value):
        errors.append(FieldError(field, f"{label} must be fulfilled"))


def _check_income(errors: List[FieldError], income: Optional[Decimal]) -> None:
    if income is None:
        errors.append(FieldError("income", "Income must be informed"))
    elif income < 0:
        errors.append(FieldError("income", "Income must not be negative"))


def _check_email(errors: List[FieldError], email: Optional[str]) -> None:
    if _is_blank(email):
        errors.append(FieldError("email", "Email must be fulfilled"))
    elif not _is_valid_email(email.strip()):
        errors.append(FieldError("email", "Invalid email"))


@dataclass(frozen=True)
class CustomerRequest:
    """Input data for registering a customer."""

    first_name: Optional[str]
    last_name: Optional[str]
    tax_id: Optional[str]
    income: Optional[Decimal]
    email: Optional[str]
    password: Optional[str]
    zip_code: Optional[str]
    street: Optional[str]

    def validate(self) -> List[FieldError]:
        errors: List[FieldError] = []

        _check_required(errors, "first_name", self.first_name, "First name")
        _check_required(errors, "last_name", self.last_name, "Last name")

        if _is_blank(self.tax_id):
            errors.append(FieldError("tax_id", "CPF must be fulfilled"))
        elif not is_valid_tax_id(self.tax_id):
            errors.append(FieldError("tax_id", "Invalid CPF number"))

        _check_income(errors, self.income)
        _check_email(errors, self.email)
        _check_required(errors, "password", self.password, "Password")
        _check_required(errors, "zip_code", self.zip_code, "Zipcode")
        _check_required(errors, "street", self.street, "Street")

        return errors

    def to_entity(self) -> Customer:
        """
        Build a new Customer, hashing the password.

        Raises:
            InvalidRequestException: If any field check fails
        """
        errors = self.validate()
        if errors:
            raise InvalidRequestException(errors)

        return Customer(
            first_name=self.first_name.strip(),
            last_name=self.last_name.strip(),
            tax_id=normalize_tax_id(self.tax_id),
            income=self.income,
            email=self.email.strip(),
            password_hash=hash_password(self.password),
            address=Address(
                zip_code=self.zip_code.strip(),
                street=self.street.strip(),
            ),
        )


@dataclass(frozen=True)
class CustomerUpdateRequest:
    """Input data for updating a customer. Tax id and password are immutable."""

    first_name: Optional[str]
    last_name: Optional[str]
    income: Optional[Decimal]
    email: Optional[str]
    zip_code: Optional[str]
    street: Optional[str]

    def validate(self) -> List[FieldError]:
        errors: List[FieldError] = []

        _check_required(errors, "first_name", self.first_name, "First name")
        _check_required(errors, "last_name", self.last_name, "Last name")
        _check_income(errors, self.income)
        _check_email(errors, self.email)
        _check_required(errors, "zip_code", self.zip_code, "Zipcode")
        _check_required(errors, "street", self.street, "Street")

        return errors

    def apply_to(self, customer: Customer) -> Customer:
        """
        Copy the updatable fields onto an existing customer.

        Raises:
            InvalidRequestException: If any field check fails
        """
        errors = self.validate()
        if errors:
            raise InvalidRequestException(errors)

        customer.first_name = self.first_name.strip()
        customer.last_name = self.last_name.strip()
        customer.income = self.income
        customer.email = self.email.strip()
        customer.address.zip_code = self.zip_code.strip()
        customer.address.street = self.street.strip()

        return customer


@dataclass(frozen=True)
class CustomerView:
    """Public representation of a customer. Never carries the password."""

    id: int
    first_name: str
    last_name: str
    tax_id: str
    income: Decimal
    email: str
    zip_code: str
    street: str

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerView":
        return cls(
            id=customer.id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            tax_id=customer.tax_id,
            income=customer.income,
            email=customer.email,
            zip_code=customer.address.zip_code,
            street=customer.address.street,
        )
