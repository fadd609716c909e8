"""Core stub management for host imports."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, TYPE_CHECKING

import wasmtime

from ..core.exceptions import ModuleInstantiationError
from ..debug.tracer import Tracer
from ..types import StubCallback, StubKey
from ..utils.constants import DEFAULT_NUMERIC, INT_BITS, NUMERIC_TYPES, TRACE_HISTORY, wrap_signed
from ..utils.logger import log

if TYPE_CHECKING:
    from wasmtime import Linker
    from ..formats.base import Import

# ---- Function prototypes ----

_VALTYPES = {
    "i32": wasmtime.ValType.i32,
    "i64": wasmtime.ValType.i64,
    "f32": wasmtime.ValType.f32,
    "f64": wasmtime.ValType.f64,
}


@dataclass
class Proto:
    """Host function prototype using value type names."""
    name: str
    params: List[str] = field(default_factory=list)
    results: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Normalize type names and reject unknown ones."""
        self.params = [str(p).lower() for p in self.params]
        self.results = [str(r).lower() for r in self.results]
        for t in self.params + self.results:
            if t not in _VALTYPES:
                raise ValueError(f"Unsupported value type {t!r} in prototype {self.name}")

    def functype(self) -> wasmtime.FuncType:
        """Build the matching wasmtime function type."""
        return wasmtime.FuncType(
            [_VALTYPES[p]() for p in self.params],
            [_VALTYPES[r]() for r in self.results],
        )

    @classmethod
    def unary(cls, name: str, ty: str) -> "Proto":
        """Prototype for a (T) -> (T) function."""
        return cls(name, [ty], [ty])


Callback = StubCallback


class Stubs:
    """Host environment descriptor.

    Maps (namespace, name) to a prototype and a Python callback, and
    defines those callbacks in a wasmtime linker before instantiation.
    A stub registered without a prototype is numeric-polymorphic: its
    signature follows the module's declaration when that is (T) -> (T),
    and falls back to (f32) -> (f32) otherwise.
    """

    def __init__(self, tracer: Optional[Tracer] = None) -> None:
        self.tracer = tracer if tracer is not None else Tracer(max_history=TRACE_HISTORY)
        self._stubs: Dict[StubKey, Tuple[Optional[Proto], Callback]] = {}

    def register(self, module: str, name: str, proto: Optional[Proto], callback: Callback) -> None:
        """Register a host function.

        Args:
            module: Import namespace (e.g., 'env')
            name: Function name (e.g., 'negate')
            proto: Fixed prototype, or None for numeric-polymorphic
            callback: Called with the guest's arguments, returns the result
        """
        self._stubs[(module, name)] = (proto, callback)
        log.debug(f"Stubs: registered {module}.{name}")

    def get(self, module: str, name: str) -> Optional[Callback]:
        """Get the callback registered for an import, if any."""
        entry = self._stubs.get((module, name))
        return entry[1] if entry else None

    def keys(self) -> List[Tuple[str, str]]:
        return list(self._stubs)

    def __contains__(self, key: Tuple[str, str]) -> bool:
        return key in self._stubs

    def __len__(self) -> int:
        return len(self._stubs)

    def resolve(self, imp: Import) -> Proto:
        """Pick the prototype a stub is defined with for one import."""
        proto, _ = self._stubs[(imp.module, imp.name)]
        if proto is not None:
            return proto

        ty = imp.type
        if isinstance(ty, wasmtime.FuncType) and len(ty.params) == 1 and len(ty.results) == 1:
            param, result = str(ty.params[0]), str(ty.results[0])
            if param == result and param in NUMERIC_TYPES:
                return Proto.unary(imp.name, param)

        log.debug(f"Stubs.resolve: {imp.module}.{imp.name} declared as {ty}, using default {DEFAULT_NUMERIC}")
        return Proto.unary(imp.name, DEFAULT_NUMERIC)

    def link(self, linker: Linker, imports: Iterable[Import]) -> int:
        """Define registered stubs for the imports a module declares.

        Imports with no registered stub are left undefined; the linker
        rejects them when the module is instantiated.

        Returns:
            Number of stubs defined
        """
        defined = set()
        for imp in imports:
            key = (imp.module, imp.name)
            if key not in self._stubs:
                log.debug(f"Stubs.link: no stub for {imp.module}.{imp.name}")
                continue
            if key in defined:
                continue
            proto = self.resolve(imp)
            _, callback = self._stubs[key]
            try:
                linker.define_func(imp.module, imp.name, proto.functype(),
                                   self._wrap(imp.module, proto, callback))
            except wasmtime.WasmtimeError as e:
                raise ModuleInstantiationError(f"Cannot define {imp.module}.{imp.name}: {e}") from e
            log.debug(f"Stubs.link: {imp.module}.{imp.name} {proto.params} -> {proto.results}")
            defined.add(key)
        return len(defined)

    def _wrap(self, module: str, proto: Proto, callback: Callback) -> Callable[..., Any]:
        """Adapt a callback to its prototype and record each call."""
        def enter(*args):
            ret = _coerce(callback(*args), proto.results)
            self.tracer.record(module, proto.name, args, ret)
            return ret
        return enter


def _coerce(value: Any, results: List[str]) -> Any:
    """Fit a callback's return value to the declared result types."""
    if not results:
        return None
    if len(results) == 1:
        return _fit(value, results[0])
    return [_fit(v, t) for v, t in zip(value, results)]


def _fit(value: Any, ty: str) -> Any:
    if ty in INT_BITS:
        return wrap_signed(int(value), INT_BITS[ty])
    return float(value)


def register_builtins(stubs: Stubs, builtins: dict, selection: Optional[List[str]] = None) -> None:
    """Register built-in stubs from a dictionary.

    Args:
        stubs: Stubs manager instance
        builtins: Dictionary mapping (module, name) to (proto, callback)
        selection: Optional list of function names to register.
                  If None, registers all available stubs.
    """
    for (module, name), (proto, callback) in builtins.items():
        if selection is None or name in selection:
            stubs.register(module, name, proto, callback)
