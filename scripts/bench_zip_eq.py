#!/usr/bin/env python3

"""
bench_zip_eq.py

Times builtin `zip`, `zip(strict=True)`, `combine_lazy` and `combine_eager`
over the same inputs: element-wise addition of float lists and deques, a
character checksum over strings (no exact length once iterated), and row
pairing of tensors.
"""

import argparse
import random
import string
import sys
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass

import torch

from zipeq import combine_eager, combine_lazy
from zipeq.utils.time_this import Timing, time_this

type Zip = Callable[[Iterable, Iterable], Iterable[tuple]]

ZIPS: dict[str, Zip] = {
    "std": zip,
    "strict": lambda a, b: zip(a, b, strict=True),
    "lazy": combine_lazy,
    "eager": combine_eager,
}


@dataclass
class BenchConfig:
    n: int = 0x1000
    repeats: int = 20
    seed: int = 0

    def __post_init__(self):
        if self.n < 1:
            raise ValueError(f"Expecting n ({self.n}) >= 1")
        if self.repeats < 1:
            raise ValueError(f"Expecting repeats ({self.repeats}) >= 1")


def add_slices(zipper: Zip, out: list[float], a: Iterable[float], b: Iterable[float]):
    for i, (x, y) in enumerate(zipper(a, b)):
        out[i] = x + y


def add_chars(zipper: Zip, a: str, b: str) -> int:
    return sum(ord(x) + ord(y) for x, y in zipper(iter(a), iter(b)))


def pair_rows(zipper: Zip, a: torch.Tensor, b: torch.Tensor) -> int:
    return sum(1 for _ in zipper(a, b))


def run(config: BenchConfig) -> list[Timing]:
    rng = random.Random(config.seed)
    lhs = [rng.random() for _ in range(config.n)]
    rhs = [rng.random() for _ in range(config.n)]
    out = [0.0] * config.n
    lhs_dq, rhs_dq = deque(lhs), deque(rhs)
    text = "".join(rng.choices(string.ascii_letters + " ", k=config.n))
    rows_a = torch.rand(config.n, 4)
    rows_b = torch.rand(config.n, 4)

    cases: dict[str, Callable[[Zip], object]] = {
        "slices": lambda z: add_slices(z, out, lhs, rhs),
        "chunks": lambda z: add_slices(z, out, lhs_dq, rhs_dq),
        "unknown len": lambda z: add_chars(z, text, text),
        "tensor rows": lambda z: pair_rows(z, rows_a, rows_b),
    }

    timings = list()

    for case, body in cases.items():
        for name, zipper in ZIPS.items():
            with time_this(f"{case} {name}", verbose=False) as timing:
                for _ in range(config.repeats):
                    body(zipper)
            timings.append(timing)

    return timings


def main():
    parser = argparse.ArgumentParser(
        description="Benchmarks length-checked zipping against builtin zip.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-n", type=int, default=BenchConfig.n, help="Elements per input"
    )
    parser.add_argument(
        "-r",
        "--repeats",
        type=int,
        default=BenchConfig.repeats,
        help="Passes over each input per measurement",
    )
    parser.add_argument(
        "--seed", type=int, default=BenchConfig.seed, help="Seed for the inputs"
    )
    args = parser.parse_args()

    try:
        config = BenchConfig(n=args.n, repeats=args.repeats, seed=args.seed)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"n={config.n}, repeats={config.repeats}")
    for timing in run(config):
        per_item = timing.seconds / (config.n * config.repeats) * 1e9
        print(f"{timing.label:<20} {timing.seconds:8.4f}s  {per_item:7.1f} ns/item")


if __name__ == "__main__":
    main()
