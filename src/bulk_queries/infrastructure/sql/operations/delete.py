"""
IN-list DELETE generation.
"""

from typing import Any, Iterable

from bulk_queries.utils.logging import get_logger

from ..core.parameters import ParameterSet, param_name
from ..core.types import GeneratedBatch
from .validation import require_column, require_table

logger = get_logger(__name__)


def generate_delete(
    table: str,
    selector_column: str,
    selector_values: Iterable[Any],
    param_prefix: str = "",
) -> GeneratedBatch:
    """
    Build ``DELETE FROM table WHERE column IN (...)`` for a list of values.

    An empty value list still yields a statement (with an empty IN list and
    no parameters); callers treat it as "nothing to delete" and skip it.

    Example:
        >>> sql, params = generate_delete("T", "Text", ["aaa", "ccc"])
        >>> sql
        'DELETE FROM T WHERE Text IN (@Text_0,@Text_1);'
        >>> dict(params)
        {'Text_0': 'aaa', 'Text_1': 'ccc'}
    """
    require_table(table, "generate_delete")
    require_column(selector_column, "generate_delete", role="selector column")

    parameters = ParameterSet()
    placeholders = [
        parameters.add(param_name(selector_column, index, param_prefix), value)
        for index, value in enumerate(selector_values)
    ]
    sql = f"DELETE FROM {table} WHERE {selector_column} IN ({','.join(placeholders)});"

    logger.debug(
        "sql.delete.generated",
        table=table,
        selector_column=selector_column,
        values=len(placeholders),
    )
    return GeneratedBatch(sql, parameters)
