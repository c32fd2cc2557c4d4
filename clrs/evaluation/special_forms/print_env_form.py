from clrs import SExpression, LispValue, EvaluatorFn
from clrs.types.environment import Environment
from clrs.types.nil import Nil


def print_env_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(print_env) dumps the current frame in tagged form to stdout."""
    print(env.format(tagged=True))
    return Nil
