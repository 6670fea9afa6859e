"""Translation of store integrity errors into domain errors."""
from sqlalchemy.exc import IntegrityError


def is_unique_violation(exc: IntegrityError) -> bool:
    """
    Tell unique-constraint failures apart from foreign key or check failures.

    SQLite reports "UNIQUE constraint failed", PostgreSQL "duplicate key
    value violates unique constraint", MySQL "Duplicate entry".
    """
    message = str(exc.orig).lower()
    return "unique" in message or "duplicate" in message
