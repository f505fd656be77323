from enum import StrEnum


class Side(StrEnum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def other(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class LengthMismatchError(ValueError):
    """
    Raised when the two zipped iterables turn out to have different lengths.

    This signals a caller bug, not a data condition: the traversal is aborted
    and the zipper stays exhausted. Pairs produced before the error remain valid.

    Attributes:
        shorter: the side that ran out first
        left_len, right_len: the disagreeing exact lengths (upfront check only)
        position: pairs produced before the asymmetry was seen (traversal only)
    """

    def __init__(
        self,
        shorter: Side,
        left_len: int | None = None,
        right_len: int | None = None,
        position: int | None = None,
    ):
        self.shorter = shorter
        self.left_len = left_len
        self.right_len = right_len
        self.position = position
        super().__init__(self._describe())

    @classmethod
    def from_lengths(cls, left_len: int, right_len: int) -> "LengthMismatchError":
        if left_len == right_len:
            raise ValueError(f"Lengths are equal ({left_len}); nothing mismatched")
        shorter = Side.LEFT if left_len < right_len else Side.RIGHT
        return cls(shorter, left_len=left_len, right_len=right_len)

    def _describe(self) -> str:
        if self.left_len is not None and self.right_len is not None:
            return (
                f"zip_eq: left has {self.left_len} elements "
                f"but right has {self.right_len}"
            )

        msg = f"zip_eq: {self.shorter} is shorter than {self.shorter.other}"
        if self.position is not None:
            msg += f" ({self.shorter} exhausted after {self.position} elements)"
        return msg
