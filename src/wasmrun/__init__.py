"""wasmrun: load a WebAssembly module, link host imports, call an export."""
from __future__ import annotations
from .core import (
    WasmRunner, run, format_value, default_stubs, Context,
    RunnerError, ModuleReadError, FormatError, ModuleInstantiationError,
    ExportNotFoundError, ExecutionError, MemoryAccessError
)
from .stubs import Stubs, Proto
from .formats import Factory

__version__ = "0.1.0"

__all__ = [
    "WasmRunner", "run", "format_value", "default_stubs", "Context",
    "RunnerError", "ModuleReadError", "FormatError", "ModuleInstantiationError",
    "ExportNotFoundError", "ExecutionError", "MemoryAccessError",
    "Stubs", "Proto", "Factory",
]
