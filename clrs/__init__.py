# Core type aliases for the clrs data model.
# Code (forms) and runtime values share one representation: the Atom classes
# in clrs.types. Forms handed to the evaluator are built from Nil, Integer,
# Symbol and List only; HostFunction and Closure appear only as results.
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type, passed into special forms
EvaluatorFn = Callable[..., LispValue]
