"""
Per-row UPDATE generation.

Every row gets its own ``UPDATE ... SET ... WHERE ...;`` line and all lines
share one ParameterSet, so row indexes in parameter names are global. The
statement is never split by batch size; with ``use_transaction`` the whole
script commits or rolls back as one unit.
"""

from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from bulk_queries.utils.logging import get_logger

from ..core.errors import InvalidArgumentError
from ..core.parameters import ParameterSet, param_name
from ..core.resolver import CalculatedValues, read_field, resolve_value
from ..core.types import DatabaseEngine, GeneratedBatch
from ..dialects import DialectProfile, get_dialect
from .validation import require_columns, require_table

logger = get_logger(__name__)


def _build_update_line(
    table: str,
    row: Any,
    index: int,
    selector_columns: Sequence[str],
    columns_to_update: Sequence[str],
    parameters: ParameterSet,
    calculated_values: Optional[CalculatedValues],
    param_prefix: str,
) -> str:
    assignments = [
        f"{column} = "
        + parameters.add(
            param_name(column, index, param_prefix),
            resolve_value(column, row, calculated_values),
        )
        for column in columns_to_update
    ]
    # Selectors identify the row, so they always come from the row itself
    conditions = [
        f"{column} = "
        + parameters.add(
            param_name(column, index, param_prefix), read_field(row, column)
        )
        for column in selector_columns
    ]
    return (
        f"UPDATE {table} SET {', '.join(assignments)} "
        f"WHERE {' AND '.join(conditions)};"
    )


def _validate_update_args(
    operation: str,
    engine: Union[DatabaseEngine, str],
    table: str,
    selector_columns: Sequence[str],
    columns_to_update: Sequence[str],
    calculated_values: Optional[CalculatedValues],
) -> Tuple[List[str], List[str], DialectProfile]:
    selectors = require_columns(selector_columns, operation, role="selector columns")
    updates = require_columns(columns_to_update, operation)
    require_table(table, operation)
    dialect = get_dialect(engine)

    if calculated_values:
        ambiguous = [c for c in selectors if c in updates and c in calculated_values]
        if ambiguous:
            raise InvalidArgumentError(
                f"{operation} cannot apply calculated values to selector "
                f"columns it also updates: {', '.join(ambiguous)}"
            )
    return selectors, updates, dialect


def generate_update(
    engine: Union[DatabaseEngine, str],
    table: str,
    rows: Iterable[Any],
    selector_columns: Sequence[str],
    columns_to_update: Sequence[str],
    calculated_values: Optional[CalculatedValues] = None,
    use_transaction: bool = True,
    param_prefix: str = "",
) -> GeneratedBatch:
    """
    Build one UPDATE per row, optionally wrapped in a transaction.

    Args:
        engine: Database engine tag selecting the dialect
        table: Target table name, used verbatim
        rows: Row objects
        selector_columns: Columns whose row values form the WHERE conjunction
        columns_to_update: Columns assigned in the SET clause
        calculated_values: Column name -> function(row) overriding SET values
            (never applied to selector columns)
        use_transaction: Bracket the script with the dialect's
            transaction-open and transaction-close literals
        param_prefix: Prefix for parameter names

    Returns:
        A single GeneratedBatch; ``("", ParameterSet())`` when there are no rows

    Raises:
        InvalidArgumentError: Missing table/selectors/columns, duplicates, or
            a column that is both selector and calculated update target
        UnknownColumnError: A column cannot be resolved on a row

    Example:
        >>> sql, _ = generate_update(
        ...     "postgresql", "T", [{"Id": 1, "Text": "x"}], ["Id"], ["Text"],
        ...     use_transaction=False,
        ... )
        >>> sql
        'UPDATE T SET Text = @Text_0 WHERE Id = @Id_0;'
    """
    selectors, updates, dialect = _validate_update_args(
        "generate_update",
        engine,
        table,
        selector_columns,
        columns_to_update,
        calculated_values,
    )

    rows = list(rows)
    if not rows:
        return GeneratedBatch("", ParameterSet())

    parameters = ParameterSet()
    lines: List[str] = [
        _build_update_line(
            table,
            row,
            index,
            selectors,
            updates,
            parameters,
            calculated_values,
            param_prefix,
        )
        for index, row in enumerate(rows)
    ]
    if use_transaction:
        lines = dialect.wrap_transaction(lines)

    logger.debug(
        "sql.update.generated",
        engine=dialect.name,
        table=table,
        rows=len(rows),
        use_transaction=use_transaction,
    )
    return GeneratedBatch("\n".join(lines), parameters)


def generate_update_statements(
    engine: Union[DatabaseEngine, str],
    table: str,
    rows: Iterable[Any],
    selector_columns: Sequence[str],
    columns_to_update: Sequence[str],
    calculated_values: Optional[CalculatedValues] = None,
    param_prefix: str = "",
) -> List[GeneratedBatch]:
    """
    Build the same per-row UPDATEs as generate_update, one batch per row.

    Each batch binds only its own row's parameters; names keep the global
    row index, so they match the single-script form. No transaction literals
    are emitted: callers that need atomicity run the list inside their own
    transaction, for drivers that accept one statement per execute call.
    """
    selectors, updates, dialect = _validate_update_args(
        "generate_update_statements",
        engine,
        table,
        selector_columns,
        columns_to_update,
        calculated_values,
    )

    batches: List[GeneratedBatch] = []
    for index, row in enumerate(rows):
        parameters = ParameterSet()
        line = _build_update_line(
            table,
            row,
            index,
            selectors,
            updates,
            parameters,
            calculated_values,
            param_prefix,
        )
        batches.append(GeneratedBatch(line, parameters))

    logger.debug(
        "sql.update.generated",
        engine=dialect.name,
        table=table,
        rows=len(batches),
        use_transaction=False,
    )
    return batches
