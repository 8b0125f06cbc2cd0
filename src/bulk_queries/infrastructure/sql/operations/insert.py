"""
Batched multi-row INSERT generation.

Rows are grouped into batches of ``batch_size``; each batch becomes one
``INSERT INTO t (a,b) VALUES (@a_0,@b_0),(@a_1,@b_1);`` statement with its
own ParameterSet. Row indexes in parameter names restart at 0 for every
batch, so the same names recur across batches.
"""

from typing import Any, Iterable, Iterator, List, Optional, Sequence, Union

from bulk_queries.utils.logging import get_logger

from ..core.errors import InvalidArgumentError, UnsupportedConflictPolicyError
from ..core.parameters import ParameterSet, param_name
from ..core.resolver import CalculatedValues, resolve_value
from ..core.types import ConflictPolicy, DatabaseEngine, GeneratedBatch
from ..dialects import DialectProfile, get_dialect
from .validation import coerce_conflict_policy, require_columns, require_table

logger = get_logger(__name__)

DEFAULT_BATCH_SIZE = 100


def _chunk_rows(rows: List[Any], batch_size: int) -> Iterator[List[Any]]:
    """Yield consecutive row slices; batch_size 0 yields everything at once."""
    if batch_size == 0:
        yield rows
        return
    for start in range(0, len(rows), batch_size):
        yield rows[start : start + batch_size]


def _statement_tail(
    dialect: DialectProfile, policy: ConflictPolicy, strict: bool
) -> str:
    clause = dialect.conflict_clause(policy)
    if clause:
        return f" {clause};"

    if not dialect.supports(policy):
        if strict:
            raise UnsupportedConflictPolicyError(dialect.name, policy.value)
        logger.warning(
            "sql.conflict_policy.ignored",
            engine=dialect.name,
            policy=policy.value,
        )
    return ";"


def _build_values_tuple(
    row: Any,
    index: int,
    columns: Sequence[str],
    parameters: ParameterSet,
    calculated_values: Optional[CalculatedValues],
    param_prefix: str,
) -> str:
    placeholders = [
        parameters.add(
            param_name(column, index, param_prefix),
            resolve_value(column, row, calculated_values),
        )
        for column in columns
    ]
    return "(" + ",".join(placeholders) + ")"


def generate_insert_batches(
    engine: Union[DatabaseEngine, str],
    table: str,
    rows: Iterable[Any],
    columns: Sequence[str],
    calculated_values: Optional[CalculatedValues] = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
    param_prefix: str = "",
    on_conflict: Union[ConflictPolicy, str] = ConflictPolicy.ERROR,
    strict_conflict: bool = False,
) -> List[GeneratedBatch]:
    """
    Build one multi-row INSERT statement per batch of rows.

    Args:
        engine: Database engine tag selecting the dialect
        table: Target table name, used verbatim
        rows: Row objects (mappings or attribute-bearing objects)
        columns: Column names, in SQL column-list order
        calculated_values: Column name -> function(row) overriding the row field
        batch_size: Rows per statement; 0 puts every row in one statement
        param_prefix: Prefix for parameter names, to keep several generated
            statements apart when they are concatenated into one script
        on_conflict: Conflict policy for duplicate keys
        strict_conflict: Raise instead of warning when the dialect cannot
            express ``on_conflict``

    Returns:
        List of GeneratedBatch in input order; empty when there are no rows

    Raises:
        InvalidArgumentError: Empty table/columns, duplicate columns,
            negative batch size or unknown engine
        UnknownColumnError: A column is neither a row field nor calculated
        UnsupportedConflictPolicyError: ``strict_conflict`` and no clause

    Example:
        >>> batches = generate_insert_batches(
        ...     "postgresql", "T", [{"Text": "aaa"}, {"Text": "bbb"}], ["Text"]
        ... )
        >>> batches[0].sql
        'INSERT INTO T (Text) VALUES (@Text_0),(@Text_1);'
    """
    dialect = get_dialect(engine)
    require_table(table, "generate_insert_batches")
    column_list = require_columns(columns, "generate_insert_batches")
    if not isinstance(batch_size, int) or batch_size < 0:
        raise InvalidArgumentError(
            f"batch_size must be a non-negative integer, got {batch_size!r}"
        )
    policy = coerce_conflict_policy(on_conflict)
    tail = _statement_tail(dialect, policy, strict_conflict)

    rows = list(rows)
    if not rows:
        return []

    head = f"INSERT INTO {table} ({','.join(column_list)}) VALUES "

    batches: List[GeneratedBatch] = []
    for chunk in _chunk_rows(rows, batch_size):
        parameters = ParameterSet()
        values = [
            _build_values_tuple(
                row, index, column_list, parameters, calculated_values, param_prefix
            )
            for index, row in enumerate(chunk)
        ]
        batches.append(GeneratedBatch(head + ",".join(values) + tail, parameters))

    logger.debug(
        "sql.insert.generated",
        engine=dialect.name,
        table=table,
        rows=len(rows),
        batches=len(batches),
        batch_size=batch_size,
        on_conflict=policy.value,
    )
    return batches
