"""Sandboxed configuration language: allow-list, compiler and evaluator."""

from .compiler import compile_configuration
from .runtime import ConfigurationEvaluator
from .sandbox import SandboxBuilder, SandboxContext

__all__ = ["ConfigurationEvaluator", "SandboxBuilder", "SandboxContext", "compile_configuration"]
