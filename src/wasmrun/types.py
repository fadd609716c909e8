"""Common type aliases for wasmrun.

Provides consistent type hints across the codebase.
"""
from __future__ import annotations
from typing import Callable, Any, Optional, Union, Tuple

# Linear memory addresses and sizes
Addr = int  # Offset into linear memory
Size = int  # Size in bytes

# Binary data
Data = Union[bytes, bytearray]

# Host import callback: positional numeric args -> result
StubCallback = Callable[..., Any]

# Import naming
Namespace = str  # Import namespace like 'env'
SymbolName = str  # Import or export name
StubKey = Tuple[Namespace, SymbolName]

# Paths and limits
ModulePath = str  # Path to a .wasm or .wat module
Fuel = Optional[int]  # Fuel budget, None for unmetered

__all__ = [
    "Addr", "Size", "Data",
    "StubCallback",
    "Namespace", "SymbolName", "StubKey",
    "ModulePath", "Fuel",
]
