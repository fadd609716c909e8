"""Loaders for binary and text WebAssembly modules."""
from __future__ import annotations

import wasmtime

from ..core.exceptions import ModuleInstantiationError
from ..utils.logger import log
from .base import Loader


class WASM(Loader):
    """Binary module image, handed to the engine as-is."""

    def parse(self) -> None:
        self.binary = bytes(self.raw)


class WAT(Loader):
    """WebAssembly text format, assembled to binary before compiling."""

    def parse(self) -> None:
        try:
            text = self.raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ModuleInstantiationError(f"Text module {self.path} is not valid UTF-8") from e
        try:
            self.binary = bytes(wasmtime.wat2wasm(text))
        except wasmtime.WasmtimeError as e:
            raise ModuleInstantiationError(f"Invalid text module {self.path}: {e}") from e
        log.debug(f"WAT: assembled {len(text)} chars into {len(self.binary)} bytes")


# Aliases matching the factory naming
WASMLoader = WASM
WATLoader = WAT
