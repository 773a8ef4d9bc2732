from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    def fold(self, default: U, f: Callable[[T], U]) -> U: raise NotImplementedError

    # Everything below is derived from fold via foldopt.combinators.
    def is_some(self) -> bool:
        from .combinators import is_some
        return is_some(self)

    def is_none(self) -> bool:
        from .combinators import is_none
        return is_none(self)

    def get_or_else(self, default: U) -> T | U:
        from .combinators import get_or_else
        return get_or_else(self, default)

    def get_or_else_with(self, default_fn: Callable[[], U]) -> T | U:
        from .combinators import get_or_else_with
        return get_or_else_with(self, default_fn)

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        from .combinators import map
        return map(self, f)

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        from .combinators import map_or
        return map_or(self, default, f)

    def and_then(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        from .combinators import and_then
        return and_then(self, f)

    flat_map = and_then

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        from .combinators import filter
        return filter(self, predicate)

    def or_else(self, default_fn: Callable[[], "Option[T]"]) -> "Option[T]":
        from .combinators import or_else
        return or_else(self, default_fn)

    def or_(self, other: "Option[T]") -> "Option[T]":
        from .combinators import or_
        return or_(self, other)

    def xor(self, other: "Option[T]") -> "Option[T]":
        from .combinators import xor
        return xor(self, other)

    def zip(self, other: "Option[U]") -> "Option[Tuple[T, U]]":
        from .combinators import zip
        return zip(self, other)

    def contains(self, x: object) -> bool:
        from .combinators import contains
        return contains(self, x)

    def to_list(self) -> List[T]:
        from .combinators import to_list
        return to_list(self)

    def to_nullable(self) -> Optional[T]:
        from .combinators import to_nullable
        return to_nullable(self)


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def fold(self, default: U, f: Callable[[T], U]) -> U: return f(self.value)


class _None(Option[None]):
    __slots__ = ()
    def __repr__(self) -> str: return "None"
    def __reduce__(self) -> str: return "NONE"
    def fold(self, default: U, f: Callable[[None], U]) -> U: return default


NONE: Option[None] = _None()


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE  # type: ignore[return-value]
