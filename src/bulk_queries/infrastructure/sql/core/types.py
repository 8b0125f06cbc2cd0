"""
Value types shared by the statement builders.
"""

from enum import Enum
from typing import NamedTuple

from .parameters import ParameterSet


class DatabaseEngine(str, Enum):
    """Database engine tag selecting a dialect profile."""

    POSTGRES = "postgresql"
    SQLSERVER = "sqlserver"
    SQLITE = "sqlite"


class ConflictPolicy(str, Enum):
    """
    How generated INSERT statements treat unique-key conflicts.

    ERROR appends nothing, so the engine's own violation surfaces.
    DO_NOTHING appends the dialect's ignore-conflicting-rows clause.
    """

    ERROR = "error"
    DO_NOTHING = "do_nothing"


class GeneratedBatch(NamedTuple):
    """One executable statement and the parameters it binds."""

    sql: str
    parameters: ParameterSet
