import pytest

from clrs.errors import ClrsTypeMismatch, ClrsUndefinedSymbol
from clrs.types import Environment, Integer, List, Nil, Symbol


@pytest.fixture
def chain():
    root = Environment()
    root.set(Symbol("Test"), Integer(10))
    child = Environment(root)
    child.set(Symbol("TestChild"), Integer(20))
    grandchild = Environment(child)
    return root, child, grandchild


def test_new_environment_is_empty():
    env = Environment()
    assert env.vars == {}
    assert env.parent is None
    assert env.format() == "Env { data: {} }"


def test_get_walks_parent_chain(chain):
    root, child, grandchild = chain
    assert grandchild.get(Symbol("Test")) == Integer(10)
    assert grandchild.get(Symbol("TestChild")) == Integer(20)
    assert root.get(Symbol("TestChild")) is None


def test_get_missing_value():
    assert Environment().get(Symbol("Missing")) is None
    with pytest.raises(ClrsUndefinedSymbol) as info:
        Environment().lookup(Symbol("Missing"))
    assert info.value.name == "Missing"


def test_set_only_touches_local_frame(chain):
    root, child, _ = chain
    child.set(Symbol("Test"), Integer(99))
    assert child.get(Symbol("Test")) == Integer(99)
    assert root.get(Symbol("Test")) == Integer(10)


def test_nearest_binding_wins(chain):
    _, child, grandchild = chain
    grandchild.set(Symbol("TestChild"), Integer(30))
    assert grandchild.get(Symbol("TestChild")) == Integer(30)
    assert child.get(Symbol("TestChild")) == Integer(20)


def test_set_overwrites():
    env = Environment()
    env.set(Symbol("x"), Integer(1))
    env.set(Symbol("x"), Integer(2))
    assert env.get(Symbol("x")) == Integer(2)


def test_set_requires_symbol_key():
    with pytest.raises(ClrsTypeMismatch):
        Environment().set(Integer(1), Nil)


def test_bind_pads_missing_args_with_nil_and_drops_extras():
    env = Environment()
    env.bind([Symbol("a"), Symbol("b"), Symbol("c")], [Integer(1)])
    assert env.get(Symbol("a")) == Integer(1)
    assert env.get(Symbol("b")) is Nil
    assert env.get(Symbol("c")) is Nil

    env = Environment()
    env.bind([Symbol("a")], [Integer(1), Integer(2)])
    assert list(env.vars) == [Symbol("a")]


def test_format_is_sorted_and_tagged():
    env = Environment()
    env.set(Symbol("Test"), Integer(10))
    env.set(Symbol("Gra"), List([Symbol("q")]))
    assert env.format() == "Env { data: {Gra List(Symbol(q)) Test 10} }"
    assert env.format(tagged=False) == "Env { data: {Gra (q) Test 10} }"


def test_str_marks_parent():
    child = Environment(Environment())
    assert str(child).endswith(" -> ...")
    assert repr(child).startswith("<Environment chain: ")
