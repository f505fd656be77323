"""
Remaining-length estimates for arbitrary iterables.

A hint is `(lower, upper)`; `upper` is None when unbounded or unknown.
A hint is exact when both bounds agree, and only exact hints are trusted by
the eager length check.
"""

import operator
from collections.abc import Sized
from typing import Any

import numpy as np
import torch
from torch.utils.data import DataLoader, IterableDataset

from zipeq.utils.types import SizeHint, SizeHinted

UNKNOWN: SizeHint = (0, None)


def exact(n: int) -> SizeHint:
    return (n, n)


def is_exact(hint: SizeHint) -> bool:
    lower, upper = hint
    return upper is not None and lower == upper


def size_hint(obj: Any) -> SizeHint:
    """
    Best known bounds on how many elements `obj` will yield, without consuming it.

    Checked in order: an explicit `size_hint()`, torch DataLoaders, tensors and
    arrays (rows along dim 0), anything Sized, then `__length_hint__`
    which only ever counts as a lower bound.
    """
    if isinstance(obj, SizeHinted):
        return obj.size_hint()

    if isinstance(obj, DataLoader):
        # len() of a loader over an IterableDataset is a guess, not a bound
        if isinstance(obj.dataset, IterableDataset):
            return UNKNOWN
        try:
            return exact(len(obj))
        except TypeError:
            return UNKNOWN

    if isinstance(obj, torch.Tensor | np.ndarray):
        if obj.ndim == 0:
            return UNKNOWN
        return exact(int(obj.shape[0]))

    if isinstance(obj, Sized):
        try:
            return exact(len(obj))
        except TypeError:
            return UNKNOWN

    return (operator.length_hint(obj), None)


def remaining(initial: SizeHint, consumed: int) -> SizeHint:
    """shifts a hint taken before iteration by the number of elements consumed"""

    lower, upper = initial
    return (
        max(lower - consumed, 0),
        None if upper is None else max(upper - consumed, 0),
    )


def combine_hints(left: SizeHint, right: SizeHint) -> SizeHint:
    """
    Hint for two iterables advanced in lockstep that are expected to have
    equal lengths: the larger lower bound and the smaller known upper bound.
    """
    left_lower, left_upper = left
    right_lower, right_upper = right

    match (left_upper, right_upper):
        case (None, None):
            upper = None
        case (int(), None):
            upper = left_upper
        case (None, int()):
            upper = right_upper
        case _:
            upper = min(left_upper, right_upper)

    return (max(left_lower, right_lower), upper)
