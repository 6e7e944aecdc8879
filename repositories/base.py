"""Helpers shared by the repositories."""

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import ConstraintViolation, DatabaseError

logger = logging.getLogger(__name__)


@contextmanager
def database_errors(db: Session, action: str) -> Iterator[None]:
    """Translate SQLAlchemy failures raised inside the block.

    Integrity violations become ConstraintViolation, every other driver or
    query failure becomes DatabaseError. The session is rolled back first.

    Args:
        db: Session the block operates on.
        action: Short description used in logs and error details.
    """
    try:
        yield
    except IntegrityError as e:
        db.rollback()
        logger.warning("Constraint violation while %s: %s", action, e.orig)
        raise ConstraintViolation(f"Constraint violation while {action}") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Database error while %s", action)
        raise DatabaseError(f"Database error while {action}") from e


def changed_fields(patch: BaseModel, fields: Iterable[str]) -> dict[str, Any]:
    """Collect the recognised fields of ``patch`` that carry a value.

    Unset, None and empty-string values are skipped so they never clobber
    the stored column.

    Args:
        patch: Partial update payload.
        fields: Column names that may be written.

    Returns:
        Mapping of column name to new value, in ``fields`` order.
    """
    data = patch.model_dump(include=set(fields), exclude_none=True)
    return {
        field: data[field]
        for field in fields
        if field in data and data[field] != ""
    }
