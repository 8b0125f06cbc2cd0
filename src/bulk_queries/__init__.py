"""
bulk-queries - Batched, parameterized SQL generation.

Turns a collection of row objects into dialect-correct multi-row INSERT,
per-row UPDATE and IN-list DELETE statements together with the bound
parameters each statement needs.
"""

from bulk_queries.infrastructure.sql import (
    ConflictPolicy,
    DatabaseEngine,
    GeneratedBatch,
    ParameterSet,
    generate_delete,
    generate_insert_batches,
    generate_update,
)

__version__ = "0.1.0"

__all__ = [
    "ConflictPolicy",
    "DatabaseEngine",
    "GeneratedBatch",
    "ParameterSet",
    "generate_delete",
    "generate_insert_batches",
    "generate_update",
]
