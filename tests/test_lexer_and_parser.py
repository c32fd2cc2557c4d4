import pytest
from hypothesis import given, strategies as st

from clrs.errors import ClrsSyntaxError
from clrs.reader.parser import lex, read, TokenStream
from clrs.types import Integer, List, Nil, Symbol


# Convert a nested Python list of ints to source text
def _to_source(expr):
    if isinstance(expr, list):
        return f"({' '.join(_to_source(e) for e in expr)})"
    return str(expr)


def _to_atoms(expr):
    if isinstance(expr, list):
        return List([_to_atoms(e) for e in expr])
    return Integer(expr)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("(+ 1 -2)", [("lparen", "("), ("symbol", "+"), ("symbol", "1"), ("symbol", "-2"), ("rparen", ")")]),
        ("x;tail comment", [("symbol", "x")]),
        ("   ", []),
        ("", []),
    ]
)
def test_lex(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", Nil),
        ("NIL", Nil),
        ("123", Integer(123)),
        ("-45", Integer(-45)),
        ("+7", Integer(7)),
        ("-", Symbol("-")),
        ("fn*", Symbol("fn*")),
        ("list?", Symbol("list?")),
        ("1a", Symbol("1a")),
        ("'a", List([Symbol("quote"), Symbol("a")])),
        ("'(1 2)", List([Symbol("quote"), List([Integer(1), Integer(2)])])),
        ("(a b c)", List([Symbol("a"), Symbol("b"), Symbol("c")])),
        ("()", List()),
        ("((1) ())", List([List([Integer(1)]), List()])),
    ]
)
def test_parse_expr(source, expected):
    assert TokenStream(lex(source)).parse_expr() == expected


def test_read_returns_every_form():
    forms = read("(def x 1) ; set x\nx 2")
    assert forms == [
        List([Symbol("def"), Symbol("x"), Integer(1)]),
        Symbol("x"),
        Integer(2),
    ]


def test_parse_expr_returns_none_at_end():
    assert TokenStream(lex("  ; nothing\n")).parse_expr() is None


@pytest.mark.parametrize(
    "source", ["(", "(a (b)", ")", "(a))", "'", "9223372036854775808", "(-9223372036854775809)"]
)
def test_syntax_errors(source):
    with pytest.raises(ClrsSyntaxError):
        read(source)


nested = st.recursive(
    st.integers(min_value=-1000, max_value=1000),
    lambda children: st.lists(children, max_size=4),
    max_leaves=12,
)


@given(nested)
def test_nested_integer_lists_read_back(expr):
    assert read(_to_source(expr)) == [_to_atoms(expr)]


def test_integer_literal_limits():
    assert read("9223372036854775807 -9223372036854775808") == [
        Integer(2 ** 63 - 1),
        Integer(-(2 ** 63)),
    ]


def test_oversized_integer_literal():
    with pytest.raises(ClrsSyntaxError):
        read("(def x " + "9" * 5000 + ")")
