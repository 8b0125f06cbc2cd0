"""
Cell value resolution for row objects.

Rows may be mappings (key lookup) or any object exposing columns as
attributes: dataclasses, pydantic models, named tuples and plain classes.
"""

from typing import Any, Callable, Mapping, Optional

from .errors import UnknownColumnError

CalculatedValues = Mapping[str, Callable[[Any], Any]]

_MISSING = object()


def read_field(row: Any, column: str) -> Any:
    """
    Read a named field directly from a row, ignoring any calculated values.

    Args:
        row: Row object (mapping or attribute-bearing object)
        column: Column/field name

    Returns:
        The field's value (``None`` is a valid value)

    Raises:
        UnknownColumnError: If the row has no such field

    Examples:
        >>> read_field({"Id": 1}, "Id")
        1
    """
    if isinstance(row, Mapping):
        value = row.get(column, _MISSING)
    else:
        value = getattr(row, column, _MISSING)
    if value is _MISSING:
        raise UnknownColumnError(column, row)
    return value


def resolve_value(
    column: str,
    row: Any,
    calculated_values: Optional[CalculatedValues] = None,
) -> Any:
    """
    Resolve the value to bind for one column of one row.

    A calculated function registered for ``column`` wins over the row's own
    field. Exceptions raised by calculated functions propagate unchanged.

    Examples:
        >>> resolve_value("Text", {"Text": "aaa"})
        'aaa'
        >>> resolve_value("Text", {"Text": "aaa"}, {"Text": lambda r: r["Text"].upper()})
        'AAA'
    """
    if calculated_values is not None and column in calculated_values:
        return calculated_values[column](row)
    return read_field(row, column)
