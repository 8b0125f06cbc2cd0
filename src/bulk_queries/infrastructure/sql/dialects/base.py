"""
Dialect profiles: the per-engine syntax the statement builders need.

A profile is plain data. Builders look up transaction literals and conflict
clauses here and never branch on the engine themselves, so supporting a new
engine means adding a profile to the table in ``dialects/__init__.py``.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional

from ..core.types import ConflictPolicy, DatabaseEngine


@dataclass(frozen=True)
class DialectProfile:
    """Transaction envelope and conflict-clause syntax for one engine."""

    engine: DatabaseEngine
    transaction_open: str
    transaction_close: str
    conflict_clauses: Mapping[ConflictPolicy, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def name(self) -> str:
        return self.engine.value

    def conflict_clause(self, policy: ConflictPolicy) -> Optional[str]:
        """
        Clause to append to an INSERT for ``policy``.

        Returns None when nothing should be appended: always for
        ConflictPolicy.ERROR, and for any policy the engine lacks.
        """
        if policy == ConflictPolicy.ERROR:
            return None
        return self.conflict_clauses.get(policy)

    def supports(self, policy: ConflictPolicy) -> bool:
        return policy == ConflictPolicy.ERROR or policy in self.conflict_clauses

    def wrap_transaction(self, statements: List[str]) -> List[str]:
        """Bracket statement lines with the transaction open/close literals."""
        return [self.transaction_open, *statements, self.transaction_close]
