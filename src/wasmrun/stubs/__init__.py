"""Stub management package for host imports.

Provides the host environment descriptor and the built-in
'env' namespace functions.
"""
from __future__ import annotations
from .core import Stubs, Proto, Callback, register_builtins
from .env import negate, register_env_stubs, get_builtin_env_stubs

__all__ = [
    # Core
    "Stubs", "Proto", "Callback", "register_builtins",
    # Built-in stubs
    "negate", "register_env_stubs", "get_builtin_env_stubs",
]
