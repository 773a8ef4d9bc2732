from __future__ import annotations
from typing import Callable, Protocol, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
U = TypeVar("U")


class SupportsFold(Protocol[T_co]):
    """Anything that can reduce itself to a plain value.

    ``fold(default, f)`` returns ``f(value)`` when a value is present and
    ``default`` otherwise. ``f`` must not be called on the absent path.
    """

    def fold(self, default: U, f: Callable[[T_co], U]) -> U: ...


def fold(opt: SupportsFold[T], default: U, f: Callable[[T], U]) -> U:
    return opt.fold(default, f)
