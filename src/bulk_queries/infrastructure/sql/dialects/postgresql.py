"""PostgreSQL dialect profile."""

from types import MappingProxyType

from ..core.types import ConflictPolicy, DatabaseEngine
from .base import DialectProfile

POSTGRESQL = DialectProfile(
    engine=DatabaseEngine.POSTGRES,
    transaction_open="BEGIN;",
    transaction_close="COMMIT;",
    conflict_clauses=MappingProxyType(
        {ConflictPolicy.DO_NOTHING: "ON CONFLICT DO NOTHING"}
    ),
)
