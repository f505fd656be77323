from .eager import EagerZipper
from .errors import LengthMismatchError, Side
from .lazy import LazyZipper
from .size_hint import combine_hints, is_exact, size_hint
from .zip_eq import HintedIter, ZipEq, combine_eager, combine_lazy, zip_eq

__all__ = [
    "EagerZipper",
    "HintedIter",
    "LazyZipper",
    "LengthMismatchError",
    "Side",
    "ZipEq",
    "combine_eager",
    "combine_hints",
    "combine_lazy",
    "is_exact",
    "size_hint",
    "zip_eq",
]
