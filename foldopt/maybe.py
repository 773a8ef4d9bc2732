from __future__ import annotations
from typing import Callable, Generic, Optional, TypeVar

_T = TypeVar("_T")
_TRes = TypeVar("_TRes")


class Maybe(Generic[_T]):
    """A nullable Python value that only knows how to ``fold``.

    ``Maybe(None)`` is absent, any other value is present. It is not an
    ``Option``; every combinator in :mod:`foldopt.combinators` still works
    on it because it satisfies ``SupportsFold``.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Optional[_T]) -> None:
        self._value = value

    @property
    def value(self) -> Optional[_T]: return self._value

    def fold(self, default: _TRes, f: Callable[[_T], _TRes]) -> _TRes:
        return default if self._value is None else f(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int: return hash((Maybe, self._value))

    def __repr__(self) -> str: return f"Maybe({self._value!r})"
