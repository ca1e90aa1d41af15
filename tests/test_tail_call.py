import pytest

from corelang.errors import CoreRecursionError
from corelang.runner import run
from corelang.types.symbol import Symbol as S


def _counting_loop(n, body):
    return [S("for"), [S("i"), 0], [S("<"), S("i"), n], [S("i"), [S("+"), S("i"), 1]], body]


def test_long_for_loop_runs_in_constant_stack(output):
    """A desugared loop recurses once per iteration; the trampoline keeps it flat."""
    program = [S("begin"),
               [S("define"), S("total"), 0],
               _counting_loop(10_000, [S("define"), S("last"), S("i")])]
    assert run(program, output) == S("done")


def test_large_tail_recursive_accumulator():
    fact = [S("lambda"), [S("n")],
            [S("lambda"), [S("acc")],
             [S("if"), [S("="), S("n"), 0],
              S("acc"),
              [[S("fact"), [S("-"), S("n"), 1]], [S("*"), S("n"), S("acc")]]]]]
    program = [S("letrec"), [[S("fact"), fact]], [[S("fact"), 1500], 1]]
    result = run(program)
    assert isinstance(result, int)
    assert result > 0


def test_deep_non_tail_recursion_raises():
    count = [S("lambda"), [S("n")],
             [S("if"), [S("="), S("n"), 0], 0, [S("+"), 1, [S("count"), [S("-"), S("n"), 1]]]]]
    program = [S("letrec"), [[S("count"), count]], [S("count"), 1_000_000]]
    with pytest.raises(CoreRecursionError) as exc:
        run(program)
    assert isinstance(exc.value.__cause__, RecursionError)


def test_deeply_nested_program_raises_recursion_error():
    program = 0
    for _ in range(100_000):
        program = [S("+"), 1, program]
    with pytest.raises(CoreRecursionError) as exc:
        run(program)
    assert isinstance(exc.value.__cause__, RecursionError)
