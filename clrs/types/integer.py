from __future__ import annotations

from clrs.errors import ClrsInvalidArgument
from clrs.types.atom import Atom

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def check_range(value: int) -> int:
    """Return `value` if it fits a signed 64-bit integer, else raise."""
    if not INT_MIN <= value <= INT_MAX:
        raise ClrsInvalidArgument("integer overflow")
    return value


class Integer(Atom):
    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value = check_range(int(value))

    def as_integer(self) -> int:
        return self.value

    def equals(self, other: Atom) -> bool:
        return isinstance(other, Integer) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def format(self, tagged: bool = False) -> str:
        return str(self.value)
