from __future__ import annotations
from typing import Literal

from clrs import LispValue
from clrs.bootstrap import bootstrap, load_prelude
from clrs.builtin.env_builtin import register
from clrs.evaluation.evaluator import evaluate
from clrs.reader.parser import read
from clrs.types.environment import Environment
from clrs.types.nil import Nil


class Interpreter:
    """
    Reads and evaluates clrs code against one global Environment kept across calls.

    prelude='auto' loads the packaged bootstrap script, a string is used as the
    bootstrap script itself, and None installs only the host functions.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        if prelude is None:
            register(self.env)
        elif prelude == 'auto':
            load_prelude(self.env)
        else:
            bootstrap(prelude, self.env)

    def eval(self, code: str) -> LispValue | list[LispValue]:
        """Evaluate every form in `code`.

        Returns Nil when there are no forms, the value itself for a single
        form, and a Python list of the values, in order, for several forms.
        """
        results: list[LispValue] = [evaluate(expr, self.env) for expr in read(code)]
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results
