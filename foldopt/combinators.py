"""Combinators derived from the single ``fold`` primitive.

Every function here accepts any :class:`~foldopt.fold.SupportsFold` and makes
exactly one ``fold`` call on each operand it inspects. Optional results are
always built from :class:`~foldopt.option.Some` and ``NONE``, whatever the
input container was.

These names deliberately shadow ``map``, ``filter`` and ``zip``; import the
module rather than star-importing it.
"""
from __future__ import annotations
from typing import Callable, List, Optional, Tuple, TypeVar

from .fold import SupportsFold
from .option import NONE, Option, Some

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


def _identity(v: T) -> T: return v


def get_or_else(opt: SupportsFold[T], default: U) -> T | U:
    return opt.fold(default, _identity)


def get_or_else_with(opt: SupportsFold[T], default_fn: Callable[[], U]) -> T | U:
    # fold picks a thunk; default_fn only runs on the absent path
    return opt.fold(default_fn, lambda v: lambda: v)()


def is_some(opt: SupportsFold[T]) -> bool:
    return opt.fold(False, lambda _: True)


def is_none(opt: SupportsFold[T]) -> bool:
    return opt.fold(True, lambda _: False)


def map(opt: SupportsFold[T], f: Callable[[T], U]) -> Option[U]:
    return opt.fold(NONE, lambda v: Some(f(v)))  # type: ignore[arg-type]


def map_or(opt: SupportsFold[T], default: U, f: Callable[[T], U]) -> U:
    return opt.fold(default, f)


def and_then(opt: SupportsFold[T], f: Callable[[T], Option[U]]) -> Option[U]:
    return opt.fold(NONE, f)  # type: ignore[arg-type]


flat_map = and_then


def filter(opt: SupportsFold[T], predicate: Callable[[T], bool]) -> Option[T]:
    return opt.fold(NONE, lambda v: Some(v) if predicate(v) else NONE)  # type: ignore[arg-type]


def or_else(opt: SupportsFold[T], default_fn: Callable[[], SupportsFold[T]]) -> SupportsFold[T]:
    """Return ``opt`` when it holds a value, else ``default_fn()``.

    ``default_fn`` is evaluated lazily: it is never called when ``opt`` is
    present. Use :func:`or_` when the fallback is already at hand.
    """
    pick: Callable[[], SupportsFold[T]] = opt.fold(default_fn, lambda _: lambda: opt)
    return pick()


def or_(opt: SupportsFold[T], other: SupportsFold[T]) -> SupportsFold[T]:
    return opt.fold(other, lambda _: opt)


def xor(opt: SupportsFold[T], other: SupportsFold[T]) -> Option[T]:
    """``Some`` of whichever operand is present, ``NONE`` if both or neither are.

    ``opt`` is folded once to capture its value; ``other`` is then folded once,
    either to see whether it is absent or to rebuild it as an ``Option``.
    """
    pick: Callable[[], Option[T]] = opt.fold(
        lambda: map(other, _identity),
        lambda v: lambda: other.fold(Some(v), lambda _: NONE),  # type: ignore[arg-type]
    )
    return pick()


def zip(opt: SupportsFold[T], other: SupportsFold[U]) -> Option[Tuple[T, U]]:
    return opt.fold(NONE, lambda a: map(other, lambda b: (a, b)))  # type: ignore[arg-type]


def flatten(opt: SupportsFold[SupportsFold[T]]) -> Option[T]:
    return opt.fold(NONE, lambda inner: map(inner, _identity))  # type: ignore[arg-type]


def contains(opt: SupportsFold[T], x: object) -> bool:
    return opt.fold(False, lambda v: v == x)


def to_list(opt: SupportsFold[T]) -> List[T]:
    return opt.fold([], lambda v: [v])


def to_nullable(opt: SupportsFold[T]) -> Optional[T]:
    return opt.fold(None, _identity)
