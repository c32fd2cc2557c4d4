from clrs import EvaluatorFn
from clrs import SExpression, LispValue
from clrs.types.closure import Closure
from clrs.types.environment import Environment
from clrs.types.nil import Nil


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn* (params) body): the body is evaluated on each call, not now.
    # The parameter list is only checked when the closure is applied.
    params = tail[0] if tail else Nil
    body = tail[1] if len(tail) > 1 else Nil
    return Closure(body, params, env)
