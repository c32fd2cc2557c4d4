from __future__ import annotations
import sys

from clrs.types.atom import Atom


class Symbol(Atom):
    __slots__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)

    def as_symbol(self) -> str:
        return self.name

    def equals(self, other: Atom) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def format(self, tagged: bool = False) -> str:
        return f"Symbol({self.name})" if tagged else self.name
