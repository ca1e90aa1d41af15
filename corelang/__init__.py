# Core type aliases for corelang's data model.
# Runtime values are plain Python objects (int, float, Fraction, str, bool) plus
# the few wrappers in corelang.types.values (Closure, NativeFunction, Unit).
#
# Naming guidance:
# - RawForm:   Use in reader code to denote nested input data (lists, Symbols, atoms).
# - LispValue: Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Raw, not yet converted input data
RawForm = Any

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
