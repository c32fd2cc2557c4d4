from __future__ import annotations

from typing import Iterable, Iterator

from clrs.types.atom import Atom


class List(Atom):
    """Immutable ordered sequence of values.

    Elements are held by reference in a tuple, so quoting a list or taking a
    sub-list never copies the elements themselves.
    """

    __slots__ = ("items",)

    def __init__(self, items: Iterable[Atom] = ()):
        self.items: tuple[Atom, ...] = tuple(items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Atom]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def as_list(self) -> tuple[Atom, ...]:
        return self.items

    def equals(self, other: Atom) -> bool:
        if not isinstance(other, List) or len(self.items) != len(other.items):
            return False
        return all(a.equals(b) for a, b in zip(self.items, other.items))

    __hash__ = None

    def format(self, tagged: bool = False) -> str:
        inner = " ".join(item.format(tagged) for item in self.items)
        return f"List({inner})" if tagged else f"({inner})"
