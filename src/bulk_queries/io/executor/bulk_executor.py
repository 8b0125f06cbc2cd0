"""
Execution helper that runs generated batches on a SQLAlchemy engine.

Batches run in list order inside one ``engine.begin()`` block. The helper
does no pooling of its own and never retries.
"""

import time
from typing import Any, Iterable, List, Optional, Sequence, Union

from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import SQLAlchemyError

from bulk_queries.config import Settings, get_settings
from bulk_queries.infrastructure.sql import (
    CalculatedValues,
    ConflictPolicy,
    DatabaseEngine,
    GeneratedBatch,
    generate_delete,
    generate_insert_batches,
    generate_update_statements,
)
from bulk_queries.utils.logging import get_logger

from .bindings import to_text_clause
from .models import BulkExecutionError, ExecutionResult

logger = get_logger(__name__)


class BulkQueryExecutor:
    """Generate and execute bulk statements against one database."""

    def __init__(
        self,
        engine: Union[Engine, str, None] = None,
        database_engine: Union[DatabaseEngine, str, None] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Args:
            engine: SQLAlchemy Engine, a database URL, or None to use
                ``DATABASE_URL`` from settings
            database_engine: Dialect tag; defaults to settings.database_engine
            settings: Settings override (mainly for tests)
        """
        self.settings = settings or get_settings()
        self._owns_engine = not isinstance(engine, Engine)

        if isinstance(engine, Engine):
            self.engine = engine
        else:
            url = engine or self.settings.DATABASE_URL
            if not url:
                raise BulkExecutionError(
                    "No engine given and DATABASE_URL is not configured"
                )
            self.engine = create_engine(url)

        self.database_engine = DatabaseEngine(
            database_engine or self.settings.database_engine
        )
        self._logger = logger.bind(engine=self.database_engine.value)

    def close(self) -> None:
        """Dispose of the engine if this executor created it."""
        if self._owns_engine:
            self.engine.dispose()

    def __enter__(self) -> "BulkQueryExecutor":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def execute(self, batches: Iterable[GeneratedBatch]) -> ExecutionResult:
        """
        Execute batches in order within a single transaction.

        Batches with empty SQL or, for IN-list deletes, no parameters are
        skipped.
        """
        start = time.perf_counter()
        executed = 0
        skipped = 0
        rows_affected = 0

        try:
            with self.engine.begin() as conn:
                for index, batch in enumerate(batches):
                    if not batch.sql or not batch.parameters:
                        skipped += 1
                        continue
                    clause, params = to_text_clause(batch)
                    result = conn.execute(clause, params)
                    rowcount = getattr(result, "rowcount", -1)
                    if isinstance(rowcount, int) and rowcount > 0:
                        rows_affected += rowcount
                    executed += 1
                    self._logger.debug(
                        "database.batch.executed",
                        statement=index,
                        parameters=params,
                        rowcount=rowcount,
                    )
        except SQLAlchemyError as e:
            self._logger.error(
                "database.batch.failed",
                statement=executed + skipped,
                error=str(e),
            )
            raise BulkExecutionError(f"Bulk statement failed: {e}") from e

        duration_ms = (time.perf_counter() - start) * 1000
        self._logger.info(
            "database.batches.completed",
            statements=executed,
            skipped=skipped,
            rows_affected=rows_affected,
            duration_ms=round(duration_ms, 2),
        )
        return ExecutionResult(
            statements=executed,
            rows_affected=rows_affected,
            duration_ms=duration_ms,
            skipped=skipped,
        )

    def bulk_insert(
        self,
        table: str,
        rows: Iterable[Any],
        columns: Sequence[str],
        calculated_values: Optional[CalculatedValues] = None,
        batch_size: Optional[int] = None,
        on_conflict: Union[ConflictPolicy, str] = ConflictPolicy.ERROR,
        param_prefix: Optional[str] = None,
    ) -> ExecutionResult:
        """Insert rows in batches of ``batch_size`` (default DB_BATCH_SIZE)."""
        if batch_size is None:
            batch_size = self.settings.DB_BATCH_SIZE
        batches: List[GeneratedBatch] = generate_insert_batches(
            self.database_engine,
            table,
            rows,
            columns,
            calculated_values=calculated_values,
            batch_size=batch_size,
            param_prefix=self._prefix(param_prefix),
            on_conflict=on_conflict,
            strict_conflict=self.settings.strict_conflict_policy,
        )
        return self.execute(batches)

    def bulk_delete(
        self,
        table: str,
        selector_column: str,
        selector_values: Iterable[Any],
        param_prefix: Optional[str] = None,
    ) -> ExecutionResult:
        """Delete rows whose ``selector_column`` is in ``selector_values``."""
        batch = generate_delete(
            table,
            selector_column,
            selector_values,
            param_prefix=self._prefix(param_prefix),
        )
        return self.execute([batch])

    def bulk_update(
        self,
        table: str,
        rows: Iterable[Any],
        selector_columns: Sequence[str],
        columns_to_update: Sequence[str],
        calculated_values: Optional[CalculatedValues] = None,
        param_prefix: Optional[str] = None,
    ) -> ExecutionResult:
        """
        Update each row, matched on ``selector_columns``.

        Rows are sent as separate statements inside the ``engine.begin()``
        block of ``execute``, so a failure on any row rolls back every row
        and no dialect transaction literals are needed.
        """
        batches = generate_update_statements(
            self.database_engine,
            table,
            rows,
            selector_columns,
            columns_to_update,
            calculated_values=calculated_values,
            param_prefix=self._prefix(param_prefix),
        )
        return self.execute(batches)

    def _prefix(self, param_prefix: Optional[str]) -> str:
        return self.settings.param_prefix if param_prefix is None else param_prefix
