"""
Helpers for building SQL fragments.
"""

from dataclasses import dataclass
from typing import Any, Collection, Mapping, Optional, Tuple

from jobly.core.errors import BadRequestError


@dataclass(frozen=True)
class PartialUpdate:
    """A `SET` clause body and the values its placeholders refer to."""
    set_cols: str
    values: Tuple[Any, ...]


def sql_for_partial_update(
    data: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
    allowed_columns: Optional[Collection[str]] = None
) -> PartialUpdate:
    """
    Build the column assignments for an UPDATE that touches only `data`'s keys.

    Args:
        data: Field name -> new value, in the order the assignments should use
        js_to_sql: Field name -> column name, for fields whose column differs
        allowed_columns: If given, every resolved column must be in it

    Returns:
        PartialUpdate, e.g. for {"first_name": "Aliya", "age": 32} and
        {"first_name": "firstName"}:
            set_cols='"firstName"=$1, "age"=$2', values=("Aliya", 32)

    Raises:
        BadRequestError: If data is empty or names a column not allowed
    """
    if not data:
        raise BadRequestError("No data")

    cols = []
    for idx, field in enumerate(data, start=1):
        column = js_to_sql.get(field, field)
        if allowed_columns is not None and column not in allowed_columns:
            raise BadRequestError(f"Cannot update field: {field}")
        cols.append(f'"{column}"=${idx}')

    return PartialUpdate(set_cols=", ".join(cols), values=tuple(data.values()))
