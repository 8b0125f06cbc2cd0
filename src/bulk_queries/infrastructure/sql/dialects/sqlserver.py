"""
SQL Server dialect profile.

SQL Server has no INSERT-level conflict clause; ignoring duplicates needs
MERGE or IGNORE_DUP_KEY on the index, neither of which fits a plain
multi-row INSERT.
"""

from .base import DialectProfile
from ..core.types import DatabaseEngine

SQLSERVER = DialectProfile(
    engine=DatabaseEngine.SQLSERVER,
    transaction_open="BEGIN TRANSACTION;",
    transaction_close="COMMIT;",
)
