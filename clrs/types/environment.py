"""Runtime environment for clrs.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via a `parent` link. A child frame keeps its parent alive, so a
closure's captured scope lives as long as the closure does.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional, Sequence

from clrs import LispValue
from clrs.errors import ClrsTypeMismatch, ClrsUndefinedSymbol
from clrs.types.nil import Nil
from clrs.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "parent")

    def __init__(self, parent: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.parent: Environment | None = parent

    def set(self, key: Symbol, value: LispValue) -> None:
        """Bind `key` to `value` in this frame only; ancestors are never touched.

        Raises ClrsTypeMismatch if `key` is not a Symbol.
        """
        if not isinstance(key, Symbol):
            raise ClrsTypeMismatch("symbol", key.format(tagged=True))
        self.vars[key] = value

    def find(self, key: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `key`."""
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.parent
        return None

    def get(self, key: Symbol) -> Optional[LispValue]:
        """Return the nearest binding of `key`, or None when the chain has none."""
        env = self.find(key)
        return None if env is None else env.vars[key]

    def lookup(self, key: Symbol) -> LispValue:
        """Like `get`, but raises ClrsUndefinedSymbol on a miss."""
        value = self.get(key)
        if value is None:
            raise ClrsUndefinedSymbol(str(key))
        return value

    def bind(self, params: Sequence[Symbol], args: Sequence[LispValue]) -> None:
        """Bind params positionally; missing trailing args bind to Nil, extras are dropped."""
        for index, param in enumerate(params):
            self.set(param, args[index] if index < len(args) else Nil)

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-set a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def format(self, tagged: bool = True) -> str:
        """Render this frame's bindings, sorted by name."""
        entries = sorted(
            f"{k.name} {v.format(tagged)}" for k, v in self.vars.items()
        )
        with StringIO() as buffer:
            buffer.write("Env { data: {")
            buffer.write(" ".join(entries))
            buffer.write("} }")
            return buffer.getvalue()

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        text = self.format(tagged=False)
        return text + " -> ..." if self.parent is not None else text

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            chain.append(env.format(tagged=True))
            env = env.parent
        return "<Environment chain: " + " -> ".join(chain) + ">"
