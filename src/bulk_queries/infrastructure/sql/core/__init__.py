"""Core SQL generation utilities package."""

from .errors import (
    BulkQueryError,
    InvalidArgumentError,
    UnknownColumnError,
    UnsupportedConflictPolicyError,
)
from .parameters import ParameterSet, param_name, placeholder
from .resolver import CalculatedValues, read_field, resolve_value
from .types import ConflictPolicy, DatabaseEngine, GeneratedBatch

__all__ = [
    "BulkQueryError",
    "InvalidArgumentError",
    "UnknownColumnError",
    "UnsupportedConflictPolicyError",
    "ParameterSet",
    "param_name",
    "placeholder",
    "CalculatedValues",
    "read_field",
    "resolve_value",
    "ConflictPolicy",
    "DatabaseEngine",
    "GeneratedBatch",
]
