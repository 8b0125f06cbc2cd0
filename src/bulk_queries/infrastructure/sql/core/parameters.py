"""
SQL parameter naming and binding.

Placeholders in generated SQL take the form ``@{prefix}{column}_{index}``.
The matching ParameterSet stores the same names without the ``@`` sigil.
"""

from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from .errors import InvalidArgumentError

PARAM_SIGIL = "@"


def _same_value(bound: Any, value: Any) -> bool:
    # Identity first: NaN and array-like values do not compare equal to themselves
    if bound is value:
        return True
    try:
        return bool(bound == value)
    except (TypeError, ValueError):
        return False


def param_name(column: str, index: int, prefix: str = "") -> str:
    """
    Build the bound-parameter name for one cell.

    Examples:
        >>> param_name("Text", 0)
        'Text_0'
        >>> param_name("Text", 3, prefix="del_")
        'del_Text_3'
    """
    return f"{prefix}{column}_{index}"


def placeholder(name: str) -> str:
    """
    Render a parameter name as it appears in SQL text.

    Examples:
        >>> placeholder("Text_0")
        '@Text_0'
    """
    return f"{PARAM_SIGIL}{name}"


class ParameterSet(Mapping[str, Any]):
    """
    Ordered, append-only mapping from parameter name to bound value.

    Re-adding a name with an equal value is a no-op; re-adding it with a
    different value raises InvalidArgumentError, since one placeholder
    cannot carry two values.

    Example:
        >>> params = ParameterSet()
        >>> params.add("Text_0", "aaa")
        '@Text_0'
        >>> dict(params)
        {'Text_0': 'aaa'}
    """

    def __init__(self, items: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, Any] = {}
        if items:
            for name, value in items.items():
                self.add(name, value)

    def add(self, name: str, value: Any) -> str:
        """Bind ``value`` under ``name`` and return its SQL placeholder."""
        if name in self._values and not _same_value(self._values[name], value):
            raise InvalidArgumentError(
                f"Parameter '{name}' is already bound to a different value"
            )
        self._values[name] = value
        return placeholder(name)

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def items_ordered(self) -> Tuple[Tuple[str, Any], ...]:
        """Bindings in insertion order."""
        return tuple(self._values.items())

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def __repr__(self) -> str:
        return f"ParameterSet({self._values!r})"
