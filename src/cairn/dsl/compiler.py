"""Compile configuration source into code objects for sandboxed execution.

Besides ordinary syntax errors, compilation rejects any name or attribute
that starts with an underscore and the frame-introspection attributes listed
in :data:`BLOCKED_ATTRIBUTE_NAMES`. Those are the routes from plain values
back to the host interpreter, so refusing them up front keeps the runtime
allow-list the only source of capabilities.
"""

from __future__ import annotations

import ast
import logging
from pathlib import Path
from types import CodeType

from cairn.constants.sandbox import BLOCKED_ATTRIBUTE_NAMES, PRIVATE_NAME_PREFIX
from cairn.exceptions import ConfigurationLoadError

logger = logging.getLogger(__name__)


def compile_configuration(source: str, path: Path) -> CodeType:
    """Parse, check and compile ``source``; raise ConfigurationLoadError on failure."""
    filename = str(path)
    try:
        tree = ast.parse(source, filename=filename, mode="exec")
        _check_names(tree, source, filename)
        code = compile(tree, filename, "exec", dont_inherit=True)
    except (SyntaxError, ValueError) as exc:
        raise ConfigurationLoadError(path, exc) from exc
    logger.debug("Compiled configuration %s", path)
    return code


def _check_names(tree: ast.AST, source: str, filename: str) -> None:
    for node in ast.walk(tree):
        if isinstance(node, ast.Name):
            name = node.id
        elif isinstance(node, ast.Attribute):
            name = node.attr
            if name in BLOCKED_ATTRIBUTE_NAMES:
                raise _violation(f"access to attribute '{name}' is not allowed", node, source, filename)
        elif isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
            name = node.name
        elif isinstance(node, ast.arg):
            name = node.arg
        elif isinstance(node, ast.alias):
            name = node.asname or node.name
        else:
            continue
        if name != PRIVATE_NAME_PREFIX and name.startswith(PRIVATE_NAME_PREFIX):
            raise _violation(f"name '{name}' is not allowed (underscore-prefixed)", node, source, filename)


def _violation(message: str, node: ast.AST, source: str, filename: str) -> SyntaxError:
    lineno = getattr(node, "lineno", 1)
    col = getattr(node, "col_offset", 0) + 1
    lines = source.splitlines()
    text = lines[lineno - 1] if 0 < lineno <= len(lines) else ""
    return SyntaxError(message, (filename, lineno, col, text))
