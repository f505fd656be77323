import itertools

import numpy as np
import pytest
import torch
from torch.utils.data import DataLoader, IterableDataset, TensorDataset

from zipeq import (
    LengthMismatchError,
    Side,
    combine_eager,
    combine_hints,
    combine_lazy,
    is_exact,
    size_hint,
)
from zipeq.size_hint import remaining


class CountingDataset(IterableDataset):
    def __init__(self, n):
        self.n = n

    def __iter__(self):
        return iter(range(self.n))

    def __len__(self):
        return self.n


def test_sized():
    assert size_hint([1, 2, 3]) == (3, 3)
    assert size_hint("") == (0, 0)
    assert size_hint(range(10)) == (10, 10)
    assert size_hint({"a": 1}) == (1, 1)


def test_unsized():
    assert size_hint(x for x in range(3)) == (0, None)
    assert size_hint(itertools.count()) == (0, None)
    # __length_hint__ only counts as a lower bound
    assert size_hint(iter([1, 2])) == (2, None)
    assert size_hint(itertools.repeat(None, 4)) == (4, None)


def test_tensors_and_arrays():
    assert size_hint(torch.zeros(5, 3)) == (5, 5)
    assert size_hint(torch.tensor(1.0)) == (0, None)
    assert size_hint(np.zeros((2, 7))) == (2, 2)
    assert size_hint(np.array(1.0)) == (0, None)


def test_data_loaders():
    mapped = DataLoader(TensorDataset(torch.arange(10)), batch_size=3)
    assert size_hint(mapped) == (4, 4)

    streamed = DataLoader(CountingDataset(10), batch_size=3)
    assert size_hint(streamed) == (0, None)


def test_is_exact():
    assert is_exact((3, 3))
    assert is_exact((0, 0))
    assert not is_exact((3, None))
    assert not is_exact((2, 3))


def test_remaining():
    assert remaining((5, 5), 2) == (3, 3)
    assert remaining((5, None), 2) == (3, None)
    assert remaining((1, 1), 4) == (0, 0)


def test_combine_hints():
    assert combine_hints((3, 3), (3, 3)) == (3, 3)
    assert combine_hints((2, None), (0, None)) == (2, None)
    assert combine_hints((2, 5), (0, None)) == (2, 5)
    assert combine_hints((0, None), (1, 4)) == (1, 4)
    assert combine_hints((2, 5), (3, 4)) == (3, 4)


def test_eager_with_tensor_rows():
    embeds = torch.arange(6).reshape(3, 2)
    labels = ["a", "b", "c"]

    pairs = [(row.tolist(), label) for row, label in combine_eager(embeds, labels)]
    assert pairs == [([0, 1], "a"), ([2, 3], "b"), ([4, 5], "c")]


def test_eager_tensor_mismatch():
    with pytest.raises(LengthMismatchError) as info:
        combine_eager(torch.zeros(3, 2), np.zeros(4))

    assert info.value.left_len == 3
    assert info.value.right_len == 4


class StreamDataset(IterableDataset):
    """no __len__, so the loader can't tell how many items it will yield"""

    def __init__(self, n):
        self.n = n

    def __iter__(self):
        return iter(range(self.n))


def test_loader_without_length():
    loader = DataLoader(StreamDataset(4), batch_size=None)
    assert size_hint(loader) == (0, None)

    zipped = combine_eager(loader, [1, 2, 3, 4])
    assert zipped.validated is False
    assert [(int(x), y) for x, y in zipped] == [(0, 1), (1, 2), (2, 3), (3, 4)]

    zipped = combine_lazy(DataLoader(StreamDataset(4), batch_size=None), "abcd")
    assert zipped.size_hint() == (4, 4)
    assert [(int(x), y) for x, y in zipped] == [(0, "a"), (1, "b"), (2, "c"), (3, "d")]


def test_loader_without_length_mismatch():
    zipped = combine_eager(DataLoader(StreamDataset(3), batch_size=None), range(4))

    with pytest.raises(LengthMismatchError) as info:
        list(zipped)

    assert info.value.shorter == Side.LEFT
    assert info.value.position == 3


def test_unusable_len_is_unknown():
    class BrokenLen:
        def __len__(self):
            raise TypeError("no length")

        def __iter__(self):
            return iter("ab")

    assert size_hint(BrokenLen()) == (0, None)
