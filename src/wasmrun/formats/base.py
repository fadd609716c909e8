"""Abstract base class for module image loaders."""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional, TYPE_CHECKING

import wasmtime

from ..core.exceptions import FormatError, ModuleInstantiationError
from ..utils.logger import log

if TYPE_CHECKING:
    from wasmtime import Engine, Module


@dataclass
class Import:
    """Represents an import declared by a module.

    Attributes:
        module: Import namespace (e.g., 'env')
        name: Symbol name (e.g., 'negate')
        kind: 'func', 'memory', 'global' or 'table'
        type: wasmtime type object describing the import
    """
    module: str
    name: str
    kind: str
    type: Any


@dataclass
class Export:
    """Represents an export provided by a module."""
    name: str
    kind: str
    type: Any


def extern_kind(ty: Any) -> str:
    """Map a wasmtime extern type to its short kind name."""
    if isinstance(ty, wasmtime.FuncType):
        return "func"
    if isinstance(ty, wasmtime.MemoryType):
        return "memory"
    if isinstance(ty, wasmtime.GlobalType):
        return "global"
    if isinstance(ty, wasmtime.TableType):
        return "table"
    return type(ty).__name__


class Loader(ABC):
    """Abstract base class for module image loaders."""

    def __init__(self, path: str, data: bytes):
        """Initialize loader with the raw file contents.

        Args:
            path: Path the image was read from (for messages)
            data: Raw file contents
        """
        self.path = path
        self.raw = data
        self.binary = b""
        self.module: Optional[Module] = None

    @abstractmethod
    def parse(self) -> None:
        """Convert the raw contents into a binary module in self.binary."""
        ...

    def compile(self, engine: Engine) -> Module:
        """Validate and compile the binary module for an engine.

        Raises:
            ModuleInstantiationError: If the bytes are not a well-formed module
        """
        try:
            self.module = wasmtime.Module(engine, self.binary)
        except wasmtime.WasmtimeError as e:
            raise ModuleInstantiationError(f"Invalid module {self.path}: {e}") from e
        log.debug(f"{self.format}: compiled {self.path} ({len(self.binary)} bytes)")
        return self.module

    def release(self) -> None:
        """Drop the image bytes once the module is compiled."""
        self.raw = b""
        self.binary = b""

    def _compiled(self) -> Module:
        if self.module is None:
            raise FormatError(f"Module {self.path} has not been compiled")
        return self.module

    def imports(self) -> List[Import]:
        """Get the imports the module declares."""
        return [
            Import(imp.module, imp.name or "", extern_kind(imp.type), imp.type)
            for imp in self._compiled().imports
        ]

    def exports(self) -> List[Export]:
        """Get the exports the module provides."""
        return [
            Export(exp.name, extern_kind(exp.type), exp.type)
            for exp in self._compiled().exports
        ]

    @property
    def format(self) -> str:
        """Get module format name (WASM, WAT)."""
        return self.__class__.__name__.replace("Loader", "")
