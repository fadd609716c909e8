"""Module image loaders.

Provides binary and text WebAssembly loading.
"""
from __future__ import annotations
from .factory import Factory
from .base import Loader, Import, Export
from .wasm import WASM, WASMLoader, WAT, WATLoader

__all__ = ["Factory", "Loader", "Import", "Export", "WASM", "WASMLoader", "WAT", "WATLoader"]
