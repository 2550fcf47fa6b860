"""Tests for configuration compilation checks."""

from __future__ import annotations

from pathlib import Path
from types import CodeType

import pytest

from cairn.dsl import compile_configuration
from cairn.exceptions import ConfigurationLoadError

PATH = Path("conf/site.conf.py")


def test_compiles_plain_configuration() -> None:
    code = compile_configuration("value = 1\nfor _ in range(2):\n    value += 1\n", PATH)

    assert isinstance(code, CodeType)
    assert code.co_filename == str(PATH)


def test_syntax_error_is_wrapped() -> None:
    with pytest.raises(ConfigurationLoadError) as exc_info:
        compile_configuration("value = (\n", PATH)

    assert exc_info.value.path == PATH
    assert isinstance(exc_info.value.cause, SyntaxError)
    assert str(PATH) in str(exc_info.value)


@pytest.mark.parametrize(
    "source",
    [
        "x = ().__class__\n",
        "x = __builtins__\n",
        "def _helper():\n    pass\n",
        "def f(_secret):\n    return 1\n",
        "import os as _os\n",
        "g = (i for i in [])\nframe = g.gi_frame\n",
        "def f():\n    yield 1\nback = f().gi_frame.f_back\n",
        "leak = \"{0.__globals__[logging].os.environ}\".format(log)\n",
        "leak = str.format(\"{0.__globals__}\", log)\n",
        "leak = \"{x.__globals__}\".format_map({\"x\": log})\n",
    ],
    ids=[
        "dunder_attr",
        "dunder_name",
        "private_def",
        "private_arg",
        "private_alias",
        "gi_frame",
        "f_back",
        "format_field_path",
        "unbound_format",
        "format_map",
    ],
)
def test_rejects_interpreter_escape_routes(source: str) -> None:
    with pytest.raises(ConfigurationLoadError) as exc_info:
        compile_configuration(source, PATH)

    cause = exc_info.value.cause
    assert isinstance(cause, SyntaxError)
    assert cause.lineno is not None
    assert "not allowed" in str(cause)
