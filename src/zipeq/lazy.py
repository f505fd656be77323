from collections.abc import Iterable
from typing import final, override

from zipeq.errors import LengthMismatchError, Side
from zipeq.size_hint import combine_hints
from zipeq.utils.types import SizeHint
from zipeq.zip_eq import ZipEq, zip_eq

_END = object()


@final
class LazyZipper[T, U](ZipEq[tuple[T, U]]):
    """
    streaming [...T], [...U] -> [... (T,U) ], lengths checked at the end

    Both sides are advanced on every step. When exactly one of them is
    exhausted, that step raises `LengthMismatchError` instead of ending.
    Afterwards (normal end or mismatch) the zipper stays exhausted.
    """

    def __init__(self, left: Iterable[T], right: Iterable[U]):
        self._left: ZipEq[T] = zip_eq(left)
        self._right: ZipEq[U] = zip_eq(right)
        self._produced: int = 0
        self._exhausted: bool = False
        self.mismatch: LengthMismatchError | None = None
        """the error this zipper raised itself, if any"""

    @property
    def produced(self) -> int:
        """pairs yielded so far"""
        return self._produced

    @override
    def __next__(self) -> tuple[T, U]:
        if self._exhausted:
            raise StopIteration

        try:
            left = next(self._left, _END)
            right = next(self._right, _END)
        except Exception:
            # a side failed (e.g. a chained zipper's own mismatch)
            self._exhausted = True
            raise

        if left is not _END and right is not _END:
            self._produced += 1
            return (left, right)  # pyright: ignore[reportReturnType]

        self._exhausted = True

        if left is _END and right is _END:
            raise StopIteration

        shorter = Side.LEFT if left is _END else Side.RIGHT
        self.mismatch = LengthMismatchError(shorter, position=self._produced)
        raise self.mismatch

    @override
    def size_hint(self) -> SizeHint:
        if self._exhausted:
            return (0, 0)
        return combine_hints(self._left.size_hint(), self._right.size_hint())
