"""
Argument validation shared by the statement builders.

All checks run before any SQL text is built.
"""

from typing import List, Sequence, Union

from ..core.errors import InvalidArgumentError
from ..core.types import ConflictPolicy


def require_table(table: str, operation: str) -> str:
    """Ensure a usable table name was given."""
    if not table or not isinstance(table, str) or not table.strip():
        raise InvalidArgumentError(f"{operation} received no table name")
    return table


def require_column(column: str, operation: str, role: str = "column") -> str:
    """Ensure a single column name is a non-empty string."""
    if not column or not isinstance(column, str) or not column.strip():
        raise InvalidArgumentError(f"{operation} received an empty {role} name")
    return column


def require_columns(
    columns: Sequence[str], operation: str, role: str = "columns"
) -> List[str]:
    """
    Ensure a column list is non-empty, made of names, and free of duplicates.

    Returns:
        The columns as a list, preserving caller order
    """
    if isinstance(columns, str):
        raise InvalidArgumentError(
            f"{operation} expects a sequence of {role}, not a single string"
        )
    column_list = list(columns or [])
    if not column_list:
        raise InvalidArgumentError(f"{operation} received no {role}")

    seen = set()
    for column in column_list:
        require_column(column, operation, role=role.rstrip("s"))
        if column in seen:
            raise InvalidArgumentError(
                f"{operation} received duplicate {role.rstrip('s')} '{column}'"
            )
        seen.add(column)
    return column_list


def coerce_conflict_policy(policy: Union[ConflictPolicy, str]) -> ConflictPolicy:
    """Accept a ConflictPolicy or its string value."""
    try:
        return ConflictPolicy(policy)
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown conflict policy: {policy!r}") from e
