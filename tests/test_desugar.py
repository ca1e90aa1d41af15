import pytest
from hypothesis import given, strategies as st

from corelang.builtin.env_builtin import register
from corelang.errors import InvalidSyntax
from corelang.evaluation.desugar import NameAllocator, desugar, symbols_in
from corelang.evaluation.evaluator import evaluate
from corelang.reader.forms import read_form
from corelang.types.expressions import (
    BINARY_OPERATORS,
    Apply,
    Begin,
    BinaryOp,
    BoolLiteral,
    Define,
    For,
    Identifier,
    If,
    Lambda,
    LetRec,
    NumberLiteral,
    Quote,
    StringLiteral,
)
from corelang.types.environment import Environment
from corelang.types.symbol import Symbol as S

I = S("i")


def _root(output):
    env = Environment.create_root()
    register(env, output)
    return env


def _count_loop(body):
    return For(
        I,
        NumberLiteral(0),
        BinaryOp("<", Identifier(I), NumberLiteral(5)),
        I,
        BinaryOp("+", Identifier(I), NumberLiteral(1)),
        body,
    )


def _contains_for(expr) -> bool:
    match expr:
        case For():
            return True
        case Define(_, value):
            return _contains_for(value)
        case LetRec(_, binding, body):
            return _contains_for(binding) or _contains_for(body)
        case Lambda(_, body):
            return _contains_for(body)
        case BinaryOp(_, lhs, rhs) | Apply(lhs, rhs):
            return _contains_for(lhs) or _contains_for(rhs)
        case If(cond, then, orelse):
            return any(_contains_for(e) for e in (cond, then, orelse))
        case Begin(body):
            return any(_contains_for(e) for e in body)
    return False


# -----------------------------------------------------
# Strategies
# -----------------------------------------------------

symbols = st.sampled_from(["a", "b", "x", "i"]).map(S)

leaves = st.one_of(
    st.integers().map(NumberLiteral),
    st.booleans().map(BoolLiteral),
    st.text(max_size=5).map(StringLiteral),
    symbols.map(Identifier),
    st.lists(st.integers(), max_size=3).map(Quote),
)


def _compound(children, with_for):
    options = [
        st.tuples(symbols, children).map(lambda t: Define(*t)),
        st.tuples(symbols, children, children).map(lambda t: LetRec(*t)),
        st.tuples(st.sampled_from(BINARY_OPERATORS), children, children).map(lambda t: BinaryOp(*t)),
        st.tuples(children, children, children).map(lambda t: If(*t)),
        st.lists(children, min_size=1, max_size=3).map(lambda b: Begin(tuple(b))),
        st.tuples(symbols, children).map(lambda t: Lambda(*t)),
        st.tuples(children, children).map(lambda t: Apply(*t)),
    ]
    if with_for:
        options.append(
            st.tuples(symbols, children, children, children, children).map(
                lambda t: For(t[0], t[1], t[2], t[0], t[3], t[4])
            )
        )
    return st.one_of(*options)


core_expressions = st.recursive(leaves, lambda c: _compound(c, False), max_leaves=15)
sugared_expressions = st.recursive(leaves, lambda c: _compound(c, True), max_leaves=15)


# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_for_expands_to_letrec_loop():
    body = Apply(Identifier(S("print")), Identifier(I))
    loop = S("loop%1")
    assert desugar(_count_loop(body)) == LetRec(
        loop,
        Lambda(
            I,
            If(
                BinaryOp("<", Identifier(I), NumberLiteral(5)),
                Begin((body, Apply(Identifier(loop), BinaryOp("+", Identifier(I), NumberLiteral(1))))),
                Quote(S("done")),
            ),
        ),
        Apply(Identifier(loop), NumberLiteral(0)),
    )


def test_nested_sugar_is_found():
    inner = _count_loop(Identifier(I))
    expr = If(BoolLiteral(True), Begin((Lambda(S("y"), inner),)), NumberLiteral(0))
    out = desugar(expr)
    assert not _contains_for(out)
    assert isinstance(out.then.body[0].body, LetRec)


def test_each_loop_gets_a_fresh_name():
    expr = Begin((_count_loop(Identifier(I)), _count_loop(_count_loop(Identifier(I)))))
    out = desugar(expr)
    names = {out.body[0].name, out.body[1].name, out.body[1].binding.body.then.body[0].name}
    assert names == {S("loop%1"), S("loop%2"), S("loop%3")}


def test_generated_names_are_reproducible_per_call():
    expr = _count_loop(Identifier(I))
    assert desugar(expr) == desugar(expr)


def test_generated_name_avoids_user_identifiers():
    expr = Begin((Define(S("loop%1"), NumberLiteral(1)), _count_loop(Identifier(S("loop%1")))))
    out = desugar(expr)
    assert out.body[1].name == S("loop%2")


def test_shared_allocator_across_calls():
    names = NameAllocator()
    first = desugar(_count_loop(Identifier(I)), names)
    second = desugar(_count_loop(Identifier(I)), names)
    assert first.name != second.name


def test_shared_allocator_still_reserves_user_names(output):
    user = S("loop%1")
    program = Begin((Define(user, NumberLiteral(7)), _count_loop(Apply(Identifier(S("print")), Identifier(user)))))
    out = desugar(program, NameAllocator())
    assert out.body[1].name != user
    evaluate(out, _root(output))
    assert output.getvalue() == "7\n" * 5


def test_loop_prefix_argument():
    assert desugar(_count_loop(Identifier(I)), NameAllocator(prefix="step")).name == S("step%1")


def test_update_must_target_loop_variable():
    expr = For(I, NumberLiteral(0), BoolLiteral(False), S("j"), NumberLiteral(1), NumberLiteral(0))
    with pytest.raises(InvalidSyntax):
        desugar(expr)


def test_atoms_returned_unchanged():
    for atom in (NumberLiteral(1), StringLiteral("s"), BoolLiteral(False), Identifier(S("x")), Quote([1])):
        assert desugar(atom) is atom


def test_quoted_for_shape_is_not_expanded():
    datum = [S("for"), [S("i"), 0], True, [S("i"), 1], 0]
    assert desugar(read_form([S("quote"), datum])) == Quote(datum)


def test_rejects_non_expressions():
    with pytest.raises(InvalidSyntax):
        desugar([S("for")])


def test_symbols_in_collects_bindings_and_references():
    expr = read_form([S("begin"), [S("define"), S("a"), S("b")], [S("lambda"), [S("c")], [S("d"), 1]]])
    assert set(symbols_in(expr)) == {S("a"), S("b"), S("c"), S("d")}


@given(core_expressions)
def test_core_trees_are_left_alone(expr):
    assert desugar(expr) == expr


@given(sugared_expressions)
def test_desugar_is_idempotent(expr):
    once = desugar(expr)
    assert not _contains_for(once)
    assert desugar(once) == once
