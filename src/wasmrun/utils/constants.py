"""Fixed names and limits shared across the runner."""
from __future__ import annotations

# Default module image, relative to the working directory
DEFAULT_PATH = "out.wasm"

# Import namespace the host environment is published under
ENV_NAMESPACE = "env"

# Export invoked by a run and the label printed in front of its result
ENTRY_POINT = "main"

# File format magic
WASM_MAGIC = b"\x00asm"
WAT_PREFIX = "(module"

# Numeric value types a polymorphic host import may take
NUMERIC_TYPES = ("i32", "i64", "f32", "f64")
DEFAULT_NUMERIC = "f32"

# Bit widths of the integer value types
INT_BITS = {"i32": 32, "i64": 64}

# WebAssembly linear memory page
PAGE = 0x10000

# Maximum string length for memory reads (prevent runaway reads)
MAX_STR = 0x10000

# Host calls kept by the default tracer (ring buffer)
TRACE_HISTORY = 1024

# Printed when an export returns no value
NO_RESULT = "undefined"


def wrap_signed(value: int, bits: int) -> int:
    """Wrap an integer into the two's complement range of a given width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value
