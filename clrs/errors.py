from __future__ import annotations


class ClrsError(Exception):
    """ Base class for all clrs errors"""
    pass


class ClrsTypeMismatch(ClrsError):
    """ Raised when a value of the wrong variant is used"""

    def __init__(self, expected: str, actual: str):
        super().__init__(f"Expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class ClrsNotCallable(ClrsError):
    """ Raised when the head of an application is not a function"""

    def __init__(self, value, operator=None):
        shown = operator if operator is not None else value
        super().__init__(f"Cannot apply non-function {shown!r}")
        self.value = value
        # Unevaluated operator form, kept for diagnostics
        self.operator = operator


class ClrsUndefinedSymbol(ClrsError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

    def __init__(self, name: str):
        super().__init__(f"Undefined symbol {name}")
        self.name = name


class ClrsInvalidArgument(ClrsError):
    """ Raised when a special form or builtin receives malformed arguments"""


class ClrsSyntaxError(ClrsError):
    """ Raised when the reader cannot parse source text"""


class ClrsBootstrapError(ClrsError):
    """ Raised when the bootstrap script fails to load"""
