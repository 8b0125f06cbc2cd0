"""
SQL module for batched, parameterized statement generation.

Builds multi-row INSERT, per-row UPDATE and IN-list DELETE statements with
``@name`` placeholders and a matching ParameterSet, using per-engine dialect
profiles for transaction and conflict syntax.
"""

from .core import (
    BulkQueryError,
    CalculatedValues,
    ConflictPolicy,
    DatabaseEngine,
    GeneratedBatch,
    InvalidArgumentError,
    ParameterSet,
    UnknownColumnError,
    UnsupportedConflictPolicyError,
    read_field,
    resolve_value,
)
from .dialects import DIALECTS, DialectProfile, get_dialect
from .operations import (
    generate_delete,
    generate_insert_batches,
    generate_update,
    generate_update_statements,
)

__all__ = [
    "BulkQueryError",
    "CalculatedValues",
    "ConflictPolicy",
    "DatabaseEngine",
    "GeneratedBatch",
    "InvalidArgumentError",
    "ParameterSet",
    "UnknownColumnError",
    "UnsupportedConflictPolicyError",
    "read_field",
    "resolve_value",
    "DIALECTS",
    "DialectProfile",
    "get_dialect",
    "generate_delete",
    "generate_insert_batches",
    "generate_update",
    "generate_update_statements",
]
