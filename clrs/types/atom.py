"""Common interface shared by every runtime value.

The value set is closed: Nil, Integer, Symbol, List, HostFunction and Closure.
Each variant overrides only the operations that apply to it; everything else
falls through to the failing defaults defined here.
"""

from __future__ import annotations

from typing import Sequence

from clrs.errors import ClrsTypeMismatch, ClrsNotCallable


class Atom:
    __slots__ = ()

    # --- Accessors ---
    def as_integer(self) -> int:
        raise ClrsTypeMismatch("integer", self.format(tagged=True))

    def as_list(self) -> tuple[Atom, ...]:
        raise ClrsTypeMismatch("list", self.format(tagged=True))

    def as_symbol(self) -> str:
        raise ClrsTypeMismatch("symbol", self.format(tagged=True))

    # --- Equality ---
    def equals(self, other: Atom) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Atom) and self.equals(other)

    # --- Rendering ---
    def format(self, tagged: bool = False) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return self.format(tagged=True)

    # --- Application ---
    def apply(self, args: Sequence[Atom]) -> Atom:
        raise ClrsNotCallable(self)
