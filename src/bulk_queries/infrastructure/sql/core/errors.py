"""
Errors raised while generating bulk statements.

Every failure is local to a single generation call; calling again with
corrected arguments is always safe.
"""

from typing import Any


class BulkQueryError(Exception):
    """Base class for bulk-queries errors."""


class InvalidArgumentError(BulkQueryError, ValueError):
    """Raised before any SQL text is built when arguments are unusable."""


class UnknownColumnError(BulkQueryError, LookupError):
    """Raised when a column is neither a row field nor a calculated value."""

    def __init__(self, column: str, row: Any = None):
        self.column = column
        self.row_type = type(row).__name__ if row is not None else None
        detail = f" on {self.row_type}" if self.row_type else ""
        super().__init__(
            f"Failed to find field or calculated value for '{column}'{detail}"
        )


class UnsupportedConflictPolicyError(BulkQueryError):
    """Raised in strict mode when a dialect has no clause for a conflict policy."""

    def __init__(self, engine: str, policy: str):
        self.engine = engine
        self.policy = policy
        super().__init__(
            f"Conflict policy '{policy}' is not supported by engine '{engine}'"
        )
