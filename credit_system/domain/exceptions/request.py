"""Request validation exceptions."""

from dataclasses import dataclass
from typing import List

from .base import DomainException


@dataclass(frozen=True)
class FieldError:
    """A single failed field check."""

    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class InvalidRequestException(DomainException):
    """Raised when an input fails one or more field checks."""

    def __init__(self, errors: List[FieldError]):
        super().__init__(
            message="; ".join(f"{e.field}: {e.message}" for e in errors),
            code="INVALID_REQUEST",
        )
        self.errors = list(errors)
