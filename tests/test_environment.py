import pytest
from hypothesis import given, strategies as st

from corelang.errors import InvalidSyntax, UnboundIdentifier
from corelang.types.environment import Environment
from corelang.types.symbol import Symbol

names = st.sampled_from(["a", "b", "c", "x", "y", "loop"]).map(Symbol)


def test_root_is_single_empty_frame():
    env = Environment.create_root()
    assert env.vars == {}
    assert env.outer is None
    assert env.depth() == 1


def test_define_and_lookup():
    env = Environment.create_root()
    env.define(Symbol("x"), 42)
    assert env.lookup(Symbol("x")) == 42
    env.define(Symbol("x"), 43)
    assert env.lookup(Symbol("x")) == 43


def test_lookup_unbound_carries_name():
    env = Environment.create_root()
    with pytest.raises(UnboundIdentifier) as exc:
        env.lookup(Symbol("missing"))
    assert exc.value.name == Symbol("missing")
    assert "missing" in str(exc.value)


def test_define_rejects_non_symbol():
    env = Environment.create_root()
    with pytest.raises(InvalidSyntax):
        env.define("x", 1)


def test_extend_walks_outward():
    root = Environment.create_root()
    root.define(Symbol("x"), 1)
    inner = root.extend().extend()
    assert inner.depth() == 3
    assert inner.lookup(Symbol("x")) == 1
    assert inner.find(Symbol("x")) is root
    assert inner.find(Symbol("y")) is None


def test_shadowing_leaves_outer_binding_alone():
    root = Environment.create_root()
    root.define(Symbol("x"), "outer")
    inner = root.extend()
    inner.define(Symbol("x"), "inner")
    assert inner.lookup(Symbol("x")) == "inner"
    assert root.lookup(Symbol("x")) == "outer"
    del inner
    assert root.lookup(Symbol("x")) == "outer"


def test_str_and_repr():
    root = Environment.create_root()
    root.define(Symbol("x"), 1)
    inner = root.extend()
    inner.define(Symbol("y"), 2)
    assert str(inner) == "{y: 2} -> ..."
    assert repr(inner) == "<Environment chain: {y: 2} -> {x: 1}>"


@given(st.lists(st.tuples(names, st.integers())))
def test_lookup_returns_last_define(bindings):
    env = Environment.create_root()
    expected = {}
    for name, value in bindings:
        env.define(name, value)
        expected[name] = value
    for name, value in expected.items():
        assert env.lookup(name) == value


@given(st.dictionaries(names, st.integers()), st.dictionaries(names, st.integers()))
def test_inner_defines_never_touch_outer_frame(outer_bindings, inner_bindings):
    root = Environment.create_root()
    for name, value in outer_bindings.items():
        root.define(name, value)
    inner = root.extend()
    for name, value in inner_bindings.items():
        inner.define(name, value)
    assert root.vars == outer_bindings
    for name in set(outer_bindings) | set(inner_bindings):
        want = inner_bindings.get(name, outer_bindings.get(name))
        assert inner.lookup(name) == want
