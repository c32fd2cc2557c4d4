"""Built-in functions for the clrs runtime environment.

This module defines the host function table: integer arithmetic, list
processing, predicates, equality and console output, plus the registration
helper that installs them into an Environment.
"""
from __future__ import annotations

import logging
from typing import Callable

from clrs import LispValue
from clrs.errors import ClrsInvalidArgument
from clrs.types.environment import Environment
from clrs.types.host_function import HostFunction
from clrs.types.integer import Integer, check_range
from clrs.types.list_atom import List
from clrs.types.nil import Nil, NilType
from clrs.types.symbol import Symbol

logger = logging.getLogger(__name__)

TRUE = Integer(1)


def _arg(args: list[LispValue], index: int) -> LispValue:
    """Positional argument, or Nil when it was not supplied."""
    return args[index] if index < len(args) else Nil


# -------------------------------
# Arithmetic
# -------------------------------
def _int_fold(op: Callable[[int, int], int], empty: int, args: list[LispValue]) -> Integer:
    if not args:
        return Integer(empty)
    acc = args[0].as_integer()
    for arg in args[1:]:
        acc = check_range(op(acc, arg.as_integer()))
    return Integer(acc)


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise ClrsInvalidArgument("Division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def add(args: list[LispValue]) -> Integer:
    return _int_fold(lambda acc, v: acc + v, 0, args)


def sub(args: list[LispValue]) -> Integer:
    return _int_fold(lambda acc, v: acc - v, 0, args)


def mul(args: list[LispValue]) -> Integer:
    return _int_fold(lambda acc, v: acc * v, 1, args)


def div(args: list[LispValue]) -> Integer:
    """Integer division, truncating toward zero."""
    return _int_fold(_truncating_div, 1, args)


# -------------------------------
# List operations
# -------------------------------
def cons(args: list[LispValue]) -> List:
    return List((_arg(args, 0), *_arg(args, 1).as_list()))


def list_builtin(args: list[LispValue]) -> List:
    return List(args)


def count(args: list[LispValue]) -> Integer:
    return Integer(len(_arg(args, 0).as_list()))


def nth(args: list[LispValue]) -> LispValue:
    """Element at an index; a bad or out-of-range index gives nil."""
    logger.debug("nth args=%s", args)
    seq = _arg(args, 0).as_list()
    index = _arg(args, 1)
    if not isinstance(index, Integer) or not 0 <= index.value < len(seq):
        return Nil
    return seq[index.value]


def rest(args: list[LispValue]) -> LispValue:
    seq = _arg(args, 0)
    if not isinstance(seq, List):
        return Nil
    return List(seq.items[1:])


# -------------------------------
# Predicates
# -------------------------------
def is_list(args: list[LispValue]) -> LispValue:
    return TRUE if isinstance(_arg(args, 0), List) else Nil


def is_nil(args: list[LispValue]) -> LispValue:
    return TRUE if isinstance(_arg(args, 0), NilType) else Nil


def equals(args: list[LispValue]) -> LispValue:
    """Chained equality: truthy if every adjacent pair is equal (or zero/one arg)."""
    for a, b in zip(args, args[1:]):
        if not a.equals(b):
            return Nil
    return TRUE


# -------------------------------
# Output
# -------------------------------
def _format_args(args: list[LispValue], tagged: bool) -> str:
    return " ".join(arg.format(tagged) for arg in args)


def print_builtin(args: list[LispValue]) -> LispValue:
    print(_format_args(args, False), end="")
    return _arg(args, 0)


def println_builtin(args: list[LispValue]) -> LispValue:
    print(_format_args(args, False))
    return _arg(args, 0)


def print_tagged(args: list[LispValue]) -> LispValue:
    print(_format_args(args, True), end="")
    return _arg(args, 0)


def println_tagged(args: list[LispValue]) -> LispValue:
    print(_format_args(args, True))
    return _arg(args, 0)


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Callable[[list[LispValue]], LispValue]] = {
    "print": print_builtin,
    "println": println_builtin,
    "_print": print_tagged,
    "_println": println_tagged,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "cons": cons,
    "list": list_builtin,
    "list?": is_list,
    "nil?": is_nil,
    "nth": nth,
    "rest": rest,
    "count": count,
    "=": equals,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update({Symbol(name): HostFunction(fn, name) for name, fn in BUILTINS.items()})
