"""
Execution helper for generated bulk statements.

Example:
    >>> from bulk_queries.io.executor import BulkQueryExecutor
    >>> with BulkQueryExecutor("sqlite://", database_engine="sqlite") as executor:
    ...     executor.bulk_insert("items", rows, ["name", "price"])
"""

from .bindings import to_named_binds, to_text_clause
from .bulk_executor import BulkQueryExecutor
from .models import BulkExecutionError, ExecutionResult

__all__ = [
    "BulkExecutionError",
    "BulkQueryExecutor",
    "ExecutionResult",
    "to_named_binds",
    "to_text_clause",
]
