from typing import Protocol, runtime_checkable

type SizeHint = tuple[int, int | None]
"""(lower bound, optional upper bound) on the number of remaining elements."""


@runtime_checkable
class SizeHinted(Protocol):
    def size_hint(self) -> SizeHint: ...
