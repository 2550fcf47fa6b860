"""Allow-list definitions for the configuration sandbox."""

from __future__ import annotations

import math

# Builtins with no access to the filesystem, processes, the environment or the
# import machinery.
SAFE_BUILTIN_NAMES: tuple[str, ...] = (
    "abs",
    "all",
    "any",
    "bool",
    "dict",
    "divmod",
    "enumerate",
    "filter",
    "float",
    "frozenset",
    "int",
    "isinstance",
    "iter",
    "len",
    "list",
    "map",
    "max",
    "min",
    "next",
    "pow",
    "range",
    "repr",
    "reversed",
    "round",
    "set",
    "sorted",
    "str",
    "sum",
    "tuple",
    "zip",
    "Exception",
    "KeyError",
    "TypeError",
    "ValueError",
)

BLOCKED_BUILTIN_NAMES: frozenset[str] = frozenset(
    {
        "__build_class__",
        "__import__",
        "breakpoint",
        "compile",
        "delattr",
        "eval",
        "exec",
        "exit",
        "getattr",
        "globals",
        "input",
        "locals",
        "open",
        "quit",
        "setattr",
        "vars",
    }
)

MATH_FUNCTION_NAMES: tuple[str, ...] = (
    "ceil",
    "comb",
    "copysign",
    "exp",
    "fabs",
    "factorial",
    "floor",
    "fmod",
    "gcd",
    "hypot",
    "isclose",
    "isfinite",
    "isinf",
    "isnan",
    "lcm",
    "log",
    "log10",
    "log2",
    "perm",
    "prod",
    "sqrt",
    "trunc",
)

MATH_CONSTANTS: dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
    "tau": math.tau,
    "inf": math.inf,
    "nan": math.nan,
}

DEFAULT_TIME_FORMAT: str = "%Y-%m-%dT%H:%M:%S"

SELECT_COUNT: str = "#"

CONFIG_LOGGER_NAME: str = "cairn.dsl.config"

# Names beginning with this prefix are rejected at compile time; they are the
# doorway to interpreter internals such as ``__class__`` and ``__globals__``.
PRIVATE_NAME_PREFIX: str = "_"

# Introspection attributes that lead from plain values back to interpreter
# frames and their globals. String formatting resolves attribute and item
# paths inside replacement fields, out of reach of the name check.
BLOCKED_ATTRIBUTE_NAMES: frozenset[str] = frozenset(
    {
        "ag_frame",
        "cr_frame",
        "f_back",
        "f_builtins",
        "f_globals",
        "f_locals",
        "format",
        "format_map",
        "gi_code",
        "gi_frame",
        "gi_yieldfrom",
        "tb_frame",
        "tb_next",
    }
)
