from __future__ import annotations

from typing import Callable, Sequence

from clrs.types.atom import Atom

HostCallable = Callable[[list[Atom]], Atom]


class HostFunction(Atom):
    """A native Python callable exposed to the language."""

    __slots__ = ("fn", "name")

    def __init__(self, fn: HostCallable, name: str | None = None):
        self.fn = fn
        self.name = name or getattr(fn, "__name__", "builtin")

    # Function identity is not a supported comparison
    def equals(self, other: Atom) -> bool:
        return False

    __hash__ = object.__hash__

    def format(self, tagged: bool = False) -> str:
        return "#builtin_func()"

    def apply(self, args: Sequence[Atom]) -> Atom:
        return self.fn(list(args))
