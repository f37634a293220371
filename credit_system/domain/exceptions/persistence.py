"""Store-reported domain exceptions."""

from typing import Optional

from .base import DomainException


class UniquenessViolationException(DomainException):
    """Raised when a write would break a uniqueness constraint."""

    def __init__(self, entity: str, field: Optional[str] = None):
        if field:
            message = f"{entity} with the same {field} already exists"
        else:
            message = f"{entity} violates a uniqueness constraint"
        super().__init__(
            message=message,
            code="UNIQUENESS_VIOLATION",
        )
        self.entity = entity
        self.field = field
