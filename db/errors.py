"""
db.errors - Domain errors raised by the database layer.

The storage engine enforces NOT NULL and FOREIGN KEY constraints; the
driver's IntegrityError is translated here into one of two error kinds
so callers never depend on driver message text.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class LabWhereError(Exception):
    """Base class for every error LabWhere raises on purpose."""


class ConstraintViolation(LabWhereError):
    """A required (NOT NULL) column was omitted on insert."""


class ReferentialIntegrityError(LabWhereError):
    """A foreign key referenced a row that does not exist."""


class NotFoundError(LabWhereError):
    pass


class NameFormatError(ConstraintViolation):
    """A location name does not match the accepted format."""


def check_field(field: str, value, expected: type) -> None:
    """
    Reject a present value of the wrong type before it reaches the driver.
    None passes through so the NOT NULL constraint still decides.
    """
    if value is None:
        return
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, expected):
        raise ConstraintViolation(
            f"{field} must be of type {expected.__name__}, "
            f"got {type(value).__name__}"
        )


# Fragments of SQLite and PostgreSQL constraint messages
_NOT_NULL_MARKERS = ("not null constraint", "violates not-null constraint")
_FOREIGN_KEY_MARKERS = ("foreign key constraint",)


def translate_integrity_error(exc: IntegrityError) -> LabWhereError:
    """Map a driver IntegrityError to ConstraintViolation / ReferentialIntegrityError."""
    message = str(exc.orig if exc.orig is not None else exc)
    lowered = message.lower()
    if any(marker in lowered for marker in _FOREIGN_KEY_MARKERS):
        return ReferentialIntegrityError(message)
    if any(marker in lowered for marker in _NOT_NULL_MARKERS):
        return ConstraintViolation(message)
    # Other integrity failures (CHECK, UNIQUE) are still constraint failures
    return ConstraintViolation(message)


def flush_checked(session: Session) -> None:
    """
    Flush pending writes.  On a constraint failure the session is rolled
    back, so nothing of the rejected statement is kept, and the
    translated error is raised.
    """
    try:
        session.flush()
    except IntegrityError as exc:
        session.rollback()
        error = translate_integrity_error(exc)
        logger.warning(f"Rejected write: {type(error).__name__}: {error}")
        raise error from exc
