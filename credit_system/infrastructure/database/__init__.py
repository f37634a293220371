"""Database infrastructure."""

from .connection import get_db_session, DatabaseSessionManager, db_manager
from .errors import is_unique_violation
from .models import Base, CustomerModel, CreditModel

__all__ = [
    "get_db_session",
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "CustomerModel",
    "CreditModel",
    "is_unique_violation",
]
