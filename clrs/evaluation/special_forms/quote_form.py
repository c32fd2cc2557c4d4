from clrs import SExpression, LispValue, EvaluatorFn
from clrs.types.environment import Environment
from clrs.types.nil import Nil


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(quote expr) returns expr unevaluated; (quote) is nil."""
    return tail[0] if tail else Nil
