"""
Placeholder translation for SQLAlchemy.

Generated SQL uses ``@name`` placeholders. SQLAlchemy's ``text()`` binds
``:name`` and renders it in whatever paramstyle the driver expects, so the
same generated batch runs on psycopg2, pyodbc and sqlite3.
"""

import re
from typing import Any, Dict, Tuple

from sqlalchemy import TextClause, text

from bulk_queries.infrastructure.sql.core.parameters import PARAM_SIGIL
from bulk_queries.infrastructure.sql.core.types import GeneratedBatch

_PLACEHOLDER_PATTERN = re.compile(re.escape(PARAM_SIGIL) + r"(\w+)")


def to_named_binds(sql: str, parameter_names) -> str:
    """
    Rewrite ``@name`` placeholders as ``:name`` for known parameter names.

    Tokens that are not bound parameters (e.g. ``@@ROWCOUNT``) are left
    untouched.

    Examples:
        >>> to_named_binds("DELETE FROM T WHERE Id IN (@Id_0,@Id_1);", {"Id_0", "Id_1"})
        'DELETE FROM T WHERE Id IN (:Id_0,:Id_1);'
    """
    names = set(parameter_names)

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        return f":{name}" if name in names else match.group(0)

    return _PLACEHOLDER_PATTERN.sub(_replace, sql)


def to_text_clause(batch: GeneratedBatch) -> Tuple[TextClause, Dict[str, Any]]:
    """Convert a generated batch into an executable text clause and bind dict."""
    params = dict(batch.parameters)
    return text(to_named_binds(batch.sql, params)), params
