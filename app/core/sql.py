"""
SQL helpers for partial updates.

compile_update() maps a sparse field mapping onto a SET clause with
positional ($1, $2, ...) parameters. bind_positional() turns a statement
written with those markers into a SQLAlchemy text clause so it runs on
any dialect.
"""

import re
from typing import Any, Dict, List, Mapping, NamedTuple, Sequence, Tuple

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause

from app.core.exceptions import EmptyUpdateError

_POSITIONAL_RE = re.compile(r"\$(\d+)")


class PartialUpdate(NamedTuple):
    set_clause: str
    values: List[Any]


def compile_update(fields: Mapping[str, Any], rename: Mapping[str, str]) -> PartialUpdate:
    """
    Build the SET clause for a partial update.

    Args:
        fields: Field name -> new value, only for fields being changed
        rename: Field name -> column name; fields not listed keep their own name

    Returns:
        PartialUpdate where values[i - 1] is bound to $i in set_clause

    Raises:
        EmptyUpdateError: If fields is empty

    Example:
        >>> compile_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        PartialUpdate(set_clause='"first_name"=$1, "age"=$2', values=['Aliya', 32])
    """
    keys = list(fields.keys())
    if not keys:
        raise EmptyUpdateError("No data")

    cols = [f'"{rename.get(key, key)}"=${idx}' for idx, key in enumerate(keys, start=1)]

    return PartialUpdate(
        set_clause=", ".join(cols),
        values=[fields[key] for key in keys],
    )


def bind_positional(statement: str, values: Sequence[Any]) -> Tuple[TextClause, Dict[str, Any]]:
    """Rewrite $n markers as :pn binds and pair them with their values."""
    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}
    return text(_POSITIONAL_RE.sub(r":p\1", statement)), params
