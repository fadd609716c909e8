"""Module runner: load, instantiate, call an export, print the result."""
from __future__ import annotations
import math
import sys
from typing import Any, Dict, List, Optional, TextIO

import wasmtime

from ..utils.constants import DEFAULT_PATH, ENTRY_POINT, NO_RESULT
from ..utils.logger import log
from ..formats.factory import Factory
from ..formats.base import Loader
from ..stubs import Stubs, register_env_stubs
from ..debug.tracer import Tracer
from ..types import Fuel, ModulePath
from ..mem.memory import Mem
from ..data.strings import Strings
from .context import Context
from .exceptions import ModuleInstantiationError, ExportNotFoundError, ExecutionError


def format_value(value: Any) -> str:
    """Render an export's return value for the result line.

    Whole floats drop their fractional part so an f32 -5.0 prints as -5.
    Negative zero and non-finite floats print as -0, NaN and Infinity.
    """
    if value is None:
        return NO_RESULT
    if isinstance(value, (list, tuple)):
        return " ".join(format_value(v) for v in value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value == 0.0 and math.copysign(1.0, value) < 0:
            return "-0"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def default_stubs(tracer: Optional[Tracer] = None) -> Stubs:
    """Host environment with the built-in env imports."""
    stubs = Stubs(tracer)
    register_env_stubs(stubs)
    return stubs


class WasmRunner:
    """Loads a WebAssembly module and calls its exports.

    Each run works in a fresh wasmtime context: read the image,
    compile and link it against the host stubs, instantiate, call.
    """

    def __init__(self, path: ModulePath = DEFAULT_PATH, verbose: bool = False,
                 fuel: Fuel = None, stubs: Optional[Stubs] = None):
        """Initialize runner.

        Args:
            path: Path to module image (.wasm or .wat)
            verbose: Enable verbose debug logging
            fuel: Optional fuel budget per run (None for unlimited)
            stubs: Host environment (default: built-in env imports)
        """
        log.set_verbose(verbose)
        log.info(f"Initializing WasmRunner with {path}")

        self.path = path
        self.fuel = fuel
        self.stubs = stubs if stubs is not None else default_stubs()
        self.tracer = self.stubs.tracer

        self.loader: Optional[Loader] = None
        self.ctx: Optional[Context] = None
        self.instance: Optional[wasmtime.Instance] = None

    def load(self) -> Loader:
        """Read and parse the module image.

        Raises:
            ModuleReadError: If the path cannot be read
        """
        self.loader = Factory.create(self.path)
        log.debug(f"load: {self.loader.format} image from {self.path}")
        return self.loader

    def instantiate(self) -> wasmtime.Instance:
        """Compile, link and instantiate the loaded image.

        Raises:
            ModuleInstantiationError: If the image is invalid, an import is
                missing or mistyped, or the start function traps
        """
        if self.loader is None:
            self.load()

        self.ctx = Context(self.fuel)
        module = self.loader.compile(self.ctx.engine)
        imports = self.loader.imports()
        log.debug(f"instantiate: imports={[f'{i.module}.{i.name}' for i in imports]}")

        linked = self.stubs.link(self.ctx.linker, imports)
        log.debug(f"instantiate: linked {linked} host function(s)")

        try:
            self.instance = self.ctx.linker.instantiate(self.ctx.store, module)
        except (wasmtime.WasmtimeError, wasmtime.Trap) as e:
            raise ModuleInstantiationError(f"Cannot instantiate {self.path}: {e}") from e
        self.loader.release()
        log.debug("instantiate: done")
        return self.instance

    def _require_instance(self) -> wasmtime.Instance:
        if self.instance is None:
            raise ModuleInstantiationError("Module has not been instantiated")
        return self.instance

    def exports(self) -> Dict[str, Any]:
        """Get the instance's exports by name."""
        instance = self._require_instance()
        exports = instance.exports(self.ctx.store)
        return {exp.name: exports[exp.name] for exp in self.loader.exports()}

    def export_names(self) -> List[str]:
        self._require_instance()
        return [exp.name for exp in self.loader.exports()]

    def export(self, name: str) -> wasmtime.Func:
        """Look up a callable export.

        Raises:
            ExportNotFoundError: If absent or not a function
        """
        instance = self._require_instance()
        item = instance.exports(self.ctx.store).get(name)
        if item is None:
            raise ExportNotFoundError(name)
        if not isinstance(item, wasmtime.Func):
            raise ExportNotFoundError(name, type(item).__name__.lower())
        return item

    def call(self, name: str = ENTRY_POINT, *args: Any) -> Any:
        """Call an exported function.

        Args:
            name: Export name
            *args: Function arguments

        Returns:
            None, a single value, or a list for multi-value results

        Raises:
            ExportNotFoundError: If the export is missing or not callable
            ExecutionError: If the call traps or runs out of fuel
        """
        func = self.export(name)
        log.debug(f"call: {name}{args}")
        try:
            ret = func(self.ctx.store, *args)
        except (wasmtime.Trap, wasmtime.WasmtimeError) as e:
            raise ExecutionError(f"{name} failed: {e}") from e
        log.debug(f"call: {name} returned {ret!r}")
        return ret

    def memory(self, name: str = "memory") -> Mem:
        """Get a view over an exported linear memory.

        Raises:
            ExportNotFoundError: If absent or not a memory
        """
        instance = self._require_instance()
        item = instance.exports(self.ctx.store).get(name)
        if item is None:
            raise ExportNotFoundError(name)
        if not isinstance(item, wasmtime.Memory):
            raise ExportNotFoundError(name, type(item).__name__.lower(), expected="memory")
        return Mem(self.ctx.store, item)

    def text(self, name: str = "memory", addr: int = 0, size: Optional[int] = None) -> str:
        """Decode an exported memory region as UTF-8 text."""
        return Strings(self.memory(name)).decode(addr, size)

    def run(self, export: str = ENTRY_POINT, out: Optional[TextIO] = None) -> Any:
        """Load, instantiate, call one export with no arguments and print it.

        Writes one line, '<export>: <value>', to out (default: stdout).

        Returns:
            The export's return value
        """
        self.instance = None
        self.load()
        self.instantiate()
        value = self.call(export)
        print(f"{export}: {format_value(value)}", file=out or sys.stdout)
        return value


def run(path: ModulePath = DEFAULT_PATH, export: str = ENTRY_POINT, stubs: Optional[Stubs] = None,
        out: Optional[TextIO] = None, verbose: bool = False, fuel: Fuel = None) -> Any:
    """Run a module once. See WasmRunner.run."""
    return WasmRunner(path, verbose=verbose, fuel=fuel, stubs=stubs).run(export, out)
