"""
  Reader: lexer and parser producing expression trees for the evaluator.

- Streaming, lazy parsing
- Emits value-model atoms directly:

    - nil -> Nil
    - lists -> List
    - integers -> Integer
    - everything else -> Symbol
    - 'x -> (quote x)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from clrs import SExpression
from clrs.errors import ClrsInvalidArgument, ClrsSyntaxError
from clrs.types.integer import Integer
from clrs.types.list_atom import List
from clrs.types.nil import Nil
from clrs.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<symbol>[^\s()';]+)"  # fallback: symbols and numbers
    r")"
)

INTEGER_RE = re.compile(r"[+-]?\d+")

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples, comments skipped."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos:].isspace():
                break
            raise ClrsSyntaxError(f"Unknown token at {pos}: {source[pos]!r}")
        pos = m.end()
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                if nm != "comment":
                    yield nm, m.group(nm)
                break


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression | None:
        """Parse the next expression, or return None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            if tok_val.lower() == "nil":
                return Nil
            if INTEGER_RE.fullmatch(tok_val):
                try:
                    return Integer(int(tok_val))
                except (ValueError, ClrsInvalidArgument) as e:
                    raise ClrsSyntaxError(f"Integer literal out of range: {tok_val[:20]}...") from e
            return Symbol(tok_val)

        if tok_type == "quote":
            self.advance()
            expr = self.parse_expr()
            if expr is None:
                raise ClrsSyntaxError("Expected an expression after quote")
            return List([QUOTE, expr])

        if tok_type == "lparen":
            self.advance()
            items = []
            while True:
                if self.peek()[0] == "rparen":
                    self.advance()
                    break
                if self.peek()[0] is None:
                    raise ClrsSyntaxError("Unmatched '('")
                items.append(self.parse_expr())
            return List(items)

        if tok_type == "rparen":
            raise ClrsSyntaxError("Unexpected ')'")

        raise ClrsSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def read(source: str) -> list[SExpression]:
    """Parse every expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
