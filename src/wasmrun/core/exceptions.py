"""Custom exception classes for wasmrun."""
from __future__ import annotations


class RunnerError(Exception):
    """Base class for all runner exceptions."""
    pass


class ModuleReadError(RunnerError):
    """Raised when the module image path cannot be opened or read."""
    def __init__(self, path: str, reason: str = "not found"):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read module image {path!r}: {reason}")


class FormatError(RunnerError):
    """Raised when the module image is not in a recognised format."""
    pass


class ModuleInstantiationError(RunnerError):
    """Raised when compiling, linking or starting a module fails."""
    pass


class ExportNotFoundError(RunnerError):
    """Raised when an export is absent or is not callable."""
    def __init__(self, name: str, kind: str | None = None, expected: str = "func"):
        self.name = name
        self.kind = kind
        self.expected = expected
        if kind is None:
            msg = f"Export not found: {name}"
        else:
            msg = f"Export {name} is a {kind}, expected a {expected}"
        super().__init__(msg)


class ExecutionError(RunnerError):
    """Raised when code execution traps or runs out of fuel."""
    pass


class MemoryAccessError(RunnerError):
    """Raised when a linear memory access falls outside the memory."""
    def __init__(self, address: int, size: int, limit: int):
        self.address = address
        self.size = size
        self.limit = limit
        super().__init__(
            f"Memory access out of bounds: 0x{address:08X}+{size} (memory size 0x{limit:08X})"
        )
