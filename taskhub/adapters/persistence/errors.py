# taskhub/adapters/persistence/errors.py
"""
Translation of storage failures into DomainErrors.

This is the only module where driver-specific detail (SQLSTATE codes, SQLite
messages) is allowed to shape the domain error vocabulary. Rules, in order:

1. unique violation mentioning ``email``  -> AlreadyExistsError("Email already exists")
2. any other unique violation             -> AlreadyExistsError("<Entity> already exists")
3. foreign-key violation                  -> NotFoundError("<Entity> not found")
4. anything else                          -> InfrastructureError("Failed to <operation> <entity>"),
                                             with the cause logged, never returned
"""
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from taskhub.core.domain.exceptions import (
    AlreadyExistsError,
    DomainError,
    InfrastructureError,
    NotFoundError,
)

logger = structlog.get_logger()

# PostgreSQL SQLSTATE codes, as exposed by asyncpg (``sqlstate``) and psycopg (``pgcode``).
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"

# Connection refusals and socket timeouts can escape the driver unwrapped.
STORAGE_ERRORS = (SQLAlchemyError, OSError)


class ConstraintViolation(str, Enum):
    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"


def _driver_message(exc: IntegrityError) -> str:
    # The first line names the constraint; later lines may echo row values.
    lines = str(exc.orig).splitlines()
    return lines[0] if lines else ""


def classify_violation(exc: BaseException) -> Optional[ConstraintViolation]:
    """Returns which constraint a storage error violated, or None for other failures."""
    if not isinstance(exc, IntegrityError):
        return None

    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    message = _driver_message(exc)

    if code == UNIQUE_VIOLATION or "UNIQUE constraint failed" in message:
        return ConstraintViolation.UNIQUE
    if code == FOREIGN_KEY_VIOLATION or "FOREIGN KEY constraint failed" in message:
        return ConstraintViolation.FOREIGN_KEY
    return None


def map_db_error(
    exc: BaseException,
    operation: str,
    entity: str,
    referenced: Optional[str] = None,
) -> DomainError:
    """
    Maps a storage error raised while running ``operation`` on ``entity``.

    Args:
        exc: The SQLAlchemy (or socket) error.
        operation: Repository operation name, e.g. "insert".
        entity: Label of the aggregate being written, e.g. "User".
        referenced: Label of the entity a foreign key points to. Defaults to ``entity``.
    """
    violation = classify_violation(exc)

    if violation is ConstraintViolation.UNIQUE:
        if "email" in _driver_message(exc):
            return AlreadyExistsError("Email already exists")
        return AlreadyExistsError(f"{entity} already exists")

    if violation is ConstraintViolation.FOREIGN_KEY:
        return NotFoundError(f"{referenced or entity} not found")

    logger.error(
        "database_error",
        operation=operation,
        entity=entity,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return InfrastructureError(f"Failed to {operation} {entity.lower()}")


@contextmanager
def translate_errors(operation: str, entity: str, referenced: Optional[str] = None) -> Iterator[None]:
    """
    Wraps a block of repository code so storage errors leave it as DomainErrors.

        with translate_errors("insert", "User"):
            async with session_factory.begin() as session:
                ...
    """
    try:
        yield
    except STORAGE_ERRORS as exc:
        raise map_db_error(exc, operation, entity, referenced) from exc
