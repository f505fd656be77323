import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass


@dataclass
class Timing:
    label: str
    seconds: float = 0.0

    def __str__(self) -> str:
        return f"{self.label}: {self.seconds:.4f} seconds"


@contextmanager
def time_this(label: str = "", verbose: bool = True) -> Iterator[Timing]:
    """
    A context manager to time the execution of a code block.

    Yields a `Timing` that is filled in when the block exits, even if the
    block raises.
    """
    timing = Timing(label)
    start_time = time.perf_counter()

    try:
        if verbose and label:
            print(f">>> {label}...")
        yield timing
    finally:
        timing.seconds = time.perf_counter() - start_time
        if verbose:
            print(f"<<< {timing}")
