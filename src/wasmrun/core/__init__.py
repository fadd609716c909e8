"""Core runner components.

Runner class, context, and exception hierarchy.
"""
from __future__ import annotations
from .runner import WasmRunner, run, format_value, default_stubs
from .context import Context
from .exceptions import (
    RunnerError, ModuleReadError, FormatError, ModuleInstantiationError,
    ExportNotFoundError, ExecutionError, MemoryAccessError
)

__all__ = [
    "WasmRunner", "run", "format_value", "default_stubs", "Context",
    "RunnerError", "ModuleReadError", "FormatError", "ModuleInstantiationError",
    "ExportNotFoundError", "ExecutionError", "MemoryAccessError"
]
