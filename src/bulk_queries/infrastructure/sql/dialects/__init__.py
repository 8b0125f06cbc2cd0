"""
Dialect policy table keyed by database engine.

Example:
    >>> get_dialect("postgresql").transaction_open
    'BEGIN;'
"""

from types import MappingProxyType
from typing import Mapping, Union

from ..core.errors import InvalidArgumentError
from ..core.types import DatabaseEngine
from .base import DialectProfile
from .postgresql import POSTGRESQL
from .sqlite import SQLITE
from .sqlserver import SQLSERVER

DIALECTS: Mapping[DatabaseEngine, DialectProfile] = MappingProxyType(
    {
        DatabaseEngine.POSTGRES: POSTGRESQL,
        DatabaseEngine.SQLSERVER: SQLSERVER,
        DatabaseEngine.SQLITE: SQLITE,
    }
)


def get_dialect(engine: Union[DatabaseEngine, str]) -> DialectProfile:
    """
    Look up the dialect profile for an engine tag.

    Raises:
        InvalidArgumentError: If the engine tag is unknown
    """
    try:
        return DIALECTS[DatabaseEngine(engine)]
    except (ValueError, KeyError) as e:
        raise InvalidArgumentError(f"Unsupported database engine: {engine!r}") from e


__all__ = [
    "DIALECTS",
    "DialectProfile",
    "POSTGRESQL",
    "SQLITE",
    "SQLSERVER",
    "get_dialect",
]
