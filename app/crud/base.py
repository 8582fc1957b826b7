"""
Shared write path for partial updates.

Each gateway validates its own field names, then hands the mapping here to
be compiled into an UPDATE statement keyed on the entity's primary key.
"""

import logging
from typing import Any, Iterable, Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestError
from app.core.sql import bind_positional, compile_update

logger = logging.getLogger(__name__)


def check_fields(fields: Mapping[str, Any], allowed: Iterable[str]) -> None:
    """Raise BadRequestError if `fields` names anything outside `allowed`."""
    unknown = sorted(set(fields) - set(allowed))
    if unknown:
        raise BadRequestError(f"Cannot update field(s): {', '.join(unknown)}")


def update_row(
    db: Session,
    table: str,
    key_column: str,
    key: Any,
    fields: Mapping[str, Any],
    rename: Mapping[str, str],
) -> None:
    """
    Apply a partial update to one row and commit.

    The key is bound as the last positional parameter, after the values
    produced by compile_update().

    Raises:
        EmptyUpdateError: If fields is empty
        BadRequestError: If the store rejects the new values
    """
    set_clause, values = compile_update(fields, rename)
    key_idx = len(values) + 1

    statement, params = bind_positional(
        f'UPDATE {table} SET {set_clause} WHERE "{key_column}" = ${key_idx}',
        [*values, key],
    )

    try:
        db.execute(statement, params)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Rejected update on {table} {key}: {e.orig}")
        raise BadRequestError(f"Invalid values for {table} update")
