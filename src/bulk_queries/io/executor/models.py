from dataclasses import dataclass

from bulk_queries.infrastructure.sql.core.errors import BulkQueryError


class BulkExecutionError(BulkQueryError):
    """Raised when a generated statement fails to execute."""


@dataclass
class ExecutionResult:
    """Outcome of running a list of generated batches."""

    statements: int
    rows_affected: int
    duration_ms: float
    skipped: int = 0
