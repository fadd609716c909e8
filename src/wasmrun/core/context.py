"""Execution context that owns the wasmtime engine state."""
from __future__ import annotations
from typing import Optional

import wasmtime

from ..utils.logger import log
from ..types import Fuel


class Context:
    """Per-run wasmtime state.

    One engine, one store and one linker. A fresh context per run means
    nothing a module does survives into the next run.
    """

    def __init__(self, fuel: Fuel = None):
        """Create engine, store and linker.

        Args:
            fuel: Optional fuel budget; execution traps once it is spent
        """
        self.fuel = fuel
        config = wasmtime.Config()
        if fuel is not None:
            config.consume_fuel = True
        self.engine = wasmtime.Engine(config)
        self.store = wasmtime.Store(self.engine)
        if fuel is not None:
            self.store.set_fuel(fuel)
        self.linker = wasmtime.Linker(self.engine)
        log.debug(f"Context created: fuel={'unlimited' if fuel is None else fuel}")

    @property
    def fuel_left(self) -> Optional[int]:
        """Remaining fuel, or None when fuel is not metered."""
        if self.fuel is None:
            return None
        return self.store.get_fuel()
