from collections.abc import Iterable
from logging import debug, warning
from typing import final, override

from zipeq.errors import LengthMismatchError
from zipeq.lazy import LazyZipper
from zipeq.size_hint import is_exact
from zipeq.utils.types import SizeHint
from zipeq.zip_eq import ZipEq, zip_eq


@final
class EagerZipper[T, U](ZipEq[tuple[T, U]]):
    """
    streaming [...T], [...U] -> [... (T,U) ], lengths checked up front

    The upfront comparison only happens when both sides report an exact
    length. Either way, traversal still goes through a `LazyZipper`, so a
    length that was unknown, or misreported, is caught at the end.
    """

    def __init__(self, left: Iterable[T], right: Iterable[U]):
        left_it = zip_eq(left)
        right_it = zip_eq(right)
        left_hint = left_it.size_hint()
        right_hint = right_it.size_hint()

        self.validated: bool = is_exact(left_hint) and is_exact(right_hint)
        """True when both lengths were known exactly and compared at construction"""

        if self.validated:
            left_len, right_len = left_hint[0], right_hint[0]
            if left_len != right_len:
                raise LengthMismatchError.from_lengths(left_len, right_len)
        else:
            debug(
                f"EagerZipper: size hints {left_hint} and {right_hint} are not both "
                "exact; deferring the length check to traversal"
            )

        self._inner: LazyZipper[T, U] = LazyZipper(left_it, right_it)

    @override
    def __next__(self) -> tuple[T, U]:
        try:
            return next(self._inner)
        except LengthMismatchError as e:
            if self.validated and e is self._inner.mismatch:
                warning(
                    f"EagerZipper: inputs reported equal exact lengths but {e.shorter} "
                    f"ran out after {e.position} elements; a size hint was wrong"
                )
            raise

    @override
    def size_hint(self) -> SizeHint:
        return self._inner.size_hint()
