"""
Length-checked zipping of two iterables.

Python can't add methods to `list` or to third-party iterables, so the
combinators come in two shapes:

    combine_lazy(a, b)                        # free functions
    zip_eq(a).combine_eager(b)                # wrapper capability

Every zipper is itself a `ZipEq`, so combinations chain:
`zip_eq(out).combine_eager(a).combine_eager(b)` yields `((o, a), b)`.
"""

import functools
import itertools
import operator
from abc import abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, final, override

from zipeq.size_hint import is_exact, remaining, size_hint
from zipeq.utils.types import SizeHint

if TYPE_CHECKING:
    from zipeq.eager import EagerZipper
    from zipeq.lazy import LazyZipper


class ZipEq[T](Iterator[T]):
    """
    An iterator that can report its remaining length and be combined with
    another iterable under a length-equality check.
    """

    @abstractmethod
    def size_hint(self) -> SizeHint: ...

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    def combine_eager[U](self, other: Iterable[U]) -> "EagerZipper[T, U]":
        """
        Zip with `other`, checking lengths now if both sides know them exactly.

        Raises:
            LengthMismatchError: both lengths are known exactly and differ
        """
        from zipeq.eager import EagerZipper

        return EagerZipper(self, other)

    def combine_lazy[U](self, other: Iterable[U]) -> "LazyZipper[T, U]":
        """Zip with `other`; lengths are only checked as traversal reaches an end."""
        from zipeq.lazy import LazyZipper

        return LazyZipper(self, other)

    def count(self) -> int:
        """consumes the iterator, returning how many elements it produced"""
        return sum(1 for _ in self)

    def last[D](self, default: D = None) -> T | D:
        """consumes the iterator, returning its final element"""
        item = default
        for item in self:
            pass
        return item

    def nth[D](self, n: int, default: D = None) -> T | D:
        """
        Skips `n` elements and returns the next one, or `default` if the
        iterator runs out first.
        """
        if n < 0:
            raise ValueError(f"Expecting n ({n}) >= 0")
        return next(itertools.islice(self, n, None), default)

    def fold[R](self, initial: R, fn: Callable[[R, T], R]) -> R:
        """consumes the iterator, accumulating with `fn(acc, item)`"""
        return functools.reduce(fn, self, initial)


@final
class HintedIter[T](ZipEq[T]):
    """
    Adapts any iterable into a `ZipEq`.

    The iterable's hint is captured before `iter()` is called on it, since
    that is usually where `len()` gets lost. Exact hints are then tracked by
    counting; otherwise the live iterator is asked again, and its answer only
    ever counts as a lower bound.
    """

    def __init__(self, iterable: Iterable[T]):
        self._initial: SizeHint = size_hint(iterable)
        self._iterator: Iterator[T] = iter(iterable)
        self._consumed: int = 0

    @override
    def __next__(self) -> T:
        item = next(self._iterator)
        self._consumed += 1
        return item

    @override
    def size_hint(self) -> SizeHint:
        if is_exact(self._initial):
            return remaining(self._initial, self._consumed)
        return (operator.length_hint(self._iterator), None)


def zip_eq[T](iterable: Iterable[T]) -> ZipEq[T]:
    """Wraps `iterable` so it gains `combine_eager` / `combine_lazy`."""
    if isinstance(iterable, ZipEq):
        return iterable
    return HintedIter(iterable)


def combine_eager[T, U](left: Iterable[T], right: Iterable[U]) -> "EagerZipper[T, U]":
    """
    Zips `left` and `right`, insisting they have the same length.

    When both lengths are known exactly up front they are compared right here,
    before anything is consumed. Otherwise the check happens during traversal,
    exactly as with `combine_lazy`.

    Raises:
        LengthMismatchError: both lengths are known exactly and differ
    """
    return zip_eq(left).combine_eager(right)


def combine_lazy[T, U](left: Iterable[T], right: Iterable[U]) -> "LazyZipper[T, U]":
    """
    Zips `left` and `right`, insisting they have the same length.

    Nothing is checked up front. Iteration raises `LengthMismatchError` on the
    call where one side runs out while the other still has an element, so
    infinite or side-effecting inputs are fine as long as neither ends first.
    """
    return zip_eq(left).combine_lazy(right)
