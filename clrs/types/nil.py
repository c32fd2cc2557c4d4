from __future__ import annotations

from clrs.types.atom import Atom


class NilType(Atom):
    __slots__ = ()

    def __bool__(self): return False

    # Every NilType instance is the same logical value
    def equals(self, other: Atom) -> bool:
        return isinstance(other, NilType)

    def __hash__(self) -> int:
        return hash(NilType)

    def format(self, tagged: bool = False) -> str:
        return "Nil()" if tagged else "nil"


Nil = NilType()
