"""Classification of driver-level integrity errors."""

from sqlalchemy.exc import IntegrityError

# SQLSTATE for unique_violation
_PG_UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """
    Tell unique-constraint failures apart from NOT NULL, FK and CHECK ones.

    asyncpg errors expose ``sqlstate`` on the adapted DBAPI error; SQLite
    only reports the failure in the message text ("UNIQUE constraint failed").
    """
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == _PG_UNIQUE_VIOLATION:
        return True
    if getattr(orig, "pgcode", None) == _PG_UNIQUE_VIOLATION:
        return True
    message = str(orig).lower()
    return "unique constraint" in message or "duplicate key" in message
