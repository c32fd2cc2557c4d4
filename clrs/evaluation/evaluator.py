"""Core evaluator for the clrs interpreter.

Plain recursive descent: every sub-expression is evaluated by a recursive call
and closure bodies re-enter `evaluate`. Errors are raised where they occur and
abort the whole evaluation.
"""

from __future__ import annotations

import logging

from clrs import SExpression, LispValue
from clrs.types.environment import Environment
from clrs.types.list_atom import List
from clrs.types.symbol import Symbol
from clrs.evaluation.apply import apply, apply_macro, is_macro
from clrs.evaluation.special_forms import SPECIAL_FORMS

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    if not isinstance(expr, List):
        if isinstance(expr, Symbol):
            return env.lookup(expr)
        # --- Atoms return as-is ---
        return expr

    if not expr:
        return expr

    head, *tail_args = expr.items
    logger.debug("eval %s", expr)

    # --- Special forms handling ---
    if isinstance(head, Symbol) and head in SPECIAL_FORMS:
        return SPECIAL_FORMS[head](tail_args, env, evaluate)

    fn = evaluate(head, env)
    if is_macro(fn):
        return apply_macro(fn, tail_args, env, evaluate)

    args = [evaluate(arg, env) for arg in tail_args]
    return apply(fn, args, operator=head)
