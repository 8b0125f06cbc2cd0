"""SQLite dialect profile (upsert syntax requires SQLite 3.24+)."""

from types import MappingProxyType

from ..core.types import ConflictPolicy, DatabaseEngine
from .base import DialectProfile

SQLITE = DialectProfile(
    engine=DatabaseEngine.SQLITE,
    transaction_open="BEGIN;",
    transaction_close="COMMIT;",
    conflict_clauses=MappingProxyType(
        {ConflictPolicy.DO_NOTHING: "ON CONFLICT DO NOTHING"}
    ),
)
