"""Application engine for clrs.

Centralizes what happens once the head of a list form has been evaluated:
- Macro closures receive the raw argument forms, and their expansion is
  evaluated again in the calling environment.
- Host functions and closures receive already-evaluated arguments.
- Anything else is not callable.
"""

from __future__ import annotations

from clrs import SExpression, LispValue, EvaluatorFn
from clrs.errors import ClrsNotCallable
from clrs.types.closure import Closure
from clrs.types.environment import Environment
from clrs.types.host_function import HostFunction


def is_macro(fn: LispValue) -> bool:
    return isinstance(fn, Closure) and fn.is_macro


def apply_macro(
    fn: Closure,
    forms: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Expand `fn` over unevaluated `forms`, then evaluate the expansion in `env`."""
    expansion = fn.apply(forms)
    return evaluate_fn(expansion, env)


def apply(
    fn: LispValue,
    args: list[LispValue],
    operator: SExpression | None = None,
) -> LispValue:
    """Apply a host function or closure to evaluated arguments.

    `operator` is the unevaluated head form, reported when `fn` is not callable.
    """
    if isinstance(fn, (HostFunction, Closure)):
        return fn.apply(args)
    raise ClrsNotCallable(fn, operator)
