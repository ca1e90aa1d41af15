import io
from timeit import timeit

from corelang.builtin.env_builtin import register
from corelang.evaluation.desugar import desugar
from corelang.evaluation.evaluator import evaluate
from corelang.reader.forms import read_form
from corelang.runner import Runner
from corelang.types.environment import Environment
from corelang.types.symbol import Symbol as S


def time_evaluator(data, rounds: int) -> float:
    """Time evaluation only: read and desugar once, then evaluate in fresh roots."""
    expr = desugar(read_form(data))
    sink = io.StringIO()

    def once():
        env = Environment.create_root()
        register(env, sink)
        evaluate(expr, env)

    # Warmup
    once()
    return timeit(once, number=rounds)


def time_desugar(data, rounds: int) -> float:
    expr = read_form(data)
    return timeit(lambda: desugar(expr), number=rounds)


# Environment lookup through a long chain of frames

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    root = Environment.create_root()
    key = S("answer")
    root.define(key, 42)
    env = root
    for _ in range(n_envs):
        env = env.extend()
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    return timeit(lambda: env.lookup(key), number=n_lookups)


LAMBDA_APPLY = [[S("lambda"), [S("x")], [S("+"), S("x"), 1]], 2]

FACT = [S("lambda"), [S("n")],
        [S("lambda"), [S("acc")],
         [S("if"), [S("<"), S("n"), 2],
          S("acc"),
          [[S("fact"), [S("-"), S("n"), 1]], [S("*"), S("n"), S("acc")]]]]]
TAIL_RECURSION = [S("letrec"), [[S("fact"), FACT]], [[S("fact"), 100], 1]]

FOR_LOOP = [S("for"), [S("i"), 0], [S("<"), S("i"), 1000], [S("i"), [S("+"), S("i"), 1]],
            [S("*"), S("i"), S("i")]]

NESTED_FOR = [S("for"), [S("i"), 0], [S("<"), S("i"), 30], [S("i"), [S("+"), S("i"), 1]],
              [S("for"), [S("j"), 0], [S("<"), S("j"), 30], [S("j"), [S("+"), S("j"), 1]], S("j")]]


if __name__ == "__main__":
    print("Benchmark: environment lookup chain")
    print(f"  time: {bench_lookup_chain():.6f}s")

    for name, data, rounds in [
        ("lambda application", LAMBDA_APPLY, 20000),
        ("tail recursion (curried factorial)", TAIL_RECURSION, 500),
        ("for loop 0..1000", FOR_LOOP, 50),
        ("nested for 30x30", NESTED_FOR, 50),
    ]:
        print(f"Benchmark: {name}")
        print(f"  evaluate: {time_evaluator(data, rounds):.6f}s  [rounds={rounds}]")

    print("Benchmark: desugar nested for")
    print(f"  time: {time_desugar(NESTED_FOR, 20000):.6f}s")
    print(f"  full run: {timeit(lambda: Runner(io.StringIO()).run(NESTED_FOR), number=20):.6f}s")
