"""User-defined functions and macros, and their argument binding."""

from __future__ import annotations

import logging
from typing import Sequence

from clrs import SExpression, LispValue
from clrs.errors import ClrsInvalidArgument
from clrs.types.atom import Atom
from clrs.types.environment import Environment
from clrs.types.list_atom import List
from clrs.types.nil import Nil
from clrs.types.symbol import Symbol

logger = logging.getLogger(__name__)

REST_MARKER = Symbol("&")


class Closure(Atom):
    """A first-class function with parameter list, body, and captured env.

    The captured environment is held by reference: bindings added or replaced
    there after the closure was built are visible when it runs.
    """

    __slots__ = ("body", "params", "env", "is_macro")

    def __init__(
        self,
        body: SExpression,
        params: SExpression,
        env: Environment,
        is_macro: bool = False,
    ):
        self.body = body
        self.params = params
        self.env = env
        self.is_macro = is_macro

    def to_macro(self) -> Closure:
        """Return a macro sharing this closure's body, params and scope."""
        return Closure(self.body, self.params, self.env, is_macro=True)

    def equals(self, other: Atom) -> bool:
        return False

    __hash__ = object.__hash__

    def format(self, tagged: bool = False) -> str:
        return "#macro()" if self.is_macro else "#func()"

    # --- Evaluation helpers ---
    def extend_env(self, args: Sequence[LispValue]) -> Environment:
        """
        Bind the given arguments to this closure's parameters and return a new
        Environment, child of the captured one, for evaluating the body.

        A `&` in the parameter list binds the following symbol to a List of the
        remaining arguments, or to Nil when there are none.
        """
        formals = self.params.as_list()
        for formal in formals:
            formal.as_symbol()

        local_env = Environment(self.env)
        if REST_MARKER not in formals:
            local_env.bind(formals, args)
            return local_env

        split = formals.index(REST_MARKER)
        if split + 1 >= len(formals):
            raise ClrsInvalidArgument("& must be followed by a rest parameter name")
        local_env.bind(formals[:split], args)
        rest = args[split:]
        local_env.set(formals[split + 1], List(rest) if rest else Nil)
        return local_env

    def apply(self, args: Sequence[LispValue]) -> LispValue:
        # Deferred import: the evaluator depends on this module
        from clrs.evaluation.evaluator import evaluate

        call_env = self.extend_env(list(args))
        logger.debug("apply %s to %s", self, args)
        return evaluate(self.body, call_env)
