import logging

from clrs import EvaluatorFn
from clrs import SExpression, LispValue
from clrs.errors import ClrsInvalidArgument, ClrsTypeMismatch
from clrs.types.environment import Environment
from clrs.types.nil import Nil
from clrs.types.symbol import Symbol

logger = logging.getLogger(__name__)


def def_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    The value is evaluated in a fresh child of `env`, then bound in `env` itself.
    """
    if not tail:
        raise ClrsInvalidArgument("def requires a symbol as its name")

    name = tail[0]
    if not isinstance(name, Symbol):
        raise ClrsTypeMismatch("symbol", name.format(tagged=True))

    val_expr = tail[1] if len(tail) > 1 else Nil
    value = evaluate_fn(val_expr, Environment(env))
    env.set(name, value)
    logger.debug("def %s = %r", name, value)
    return Nil
