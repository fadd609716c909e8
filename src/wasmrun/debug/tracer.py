"""Host import call tracing for debugging and analysis."""
from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple
from ..utils.logger import log


@dataclass(frozen=True)
class Call:
    """One host import invocation."""
    module: str
    name: str
    args: Tuple[Any, ...]
    result: Any


class Tracer:
    """Records every host import the guest calls.

    Supports ring-buffer mode for long executions by keeping only the
    most recent N calls.
    """

    def __init__(self, max_history: Optional[int] = None):
        """Initialize tracer.

        Args:
            max_history: Maximum calls to store (None for unlimited)
        """
        self._history = deque(maxlen=max_history) if max_history else deque()
        self.max_history = max_history
        self.enabled = True
        self._total = 0  # Track total even with ring buffer

    def record(self, module: str, name: str, args: Tuple[Any, ...], result: Any) -> None:
        """Store a host call if tracing is enabled."""
        if not self.enabled:
            return
        self._total += 1
        self._history.append(Call(module, name, tuple(args), result))
        log.debug(f"Tracer: {module}.{name}{tuple(args)} -> {result}")

    def history(self) -> List[Call]:
        """Get recorded calls, oldest first."""
        return list(self._history)

    def calls(self, name: str) -> List[Call]:
        """Get recorded calls to one import name."""
        return [c for c in self._history if c.name == name]

    @property
    def total(self) -> int:
        """Total calls seen, including ones dropped from the ring buffer."""
        return self._total

    def clear(self) -> None:
        self._history.clear()
        self._total = 0
