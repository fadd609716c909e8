"""Linear memory access for an instantiated module."""
from __future__ import annotations
import struct
from typing import TYPE_CHECKING
from ..core.exceptions import MemoryAccessError
from ..utils.constants import PAGE
from ..utils.logger import log
from ..types import Addr, Size, Data

if TYPE_CHECKING:
    from wasmtime import Memory, Store

# Cache struct.Struct objects for performance (WebAssembly is little-endian)
_STRUCT_CACHE = {
    8: struct.Struct("<B"),
    16: struct.Struct("<H"),
    32: struct.Struct("<I"),
    64: struct.Struct("<Q"),
}

class Mem:
    """Bounds-checked view over one exported linear memory.

    Reads and writes go through the wasmtime store, so the view stays
    valid when the guest grows its memory.
    """

    def __init__(self, store: Store, memory: Memory):
        self.store = store
        self.memory = memory

    @property
    def size(self) -> int:
        """Current memory size in bytes."""
        return self.memory.data_len(self.store)

    @property
    def pages(self) -> int:
        """Current memory size in 64 KiB pages."""
        return self.size // PAGE

    def _check(self, addr: Addr, size: Size) -> None:
        limit = self.size
        if addr < 0 or size < 0 or addr + size > limit:
            raise MemoryAccessError(addr, size, limit)

    def read(self, addr: Addr, size: Size) -> bytes:
        """Read bytes from memory."""
        self._check(addr, size)
        return bytes(self.memory.read(self.store, addr, addr + size))

    def write(self, addr: Addr, data: Data) -> None:
        """Write bytes to memory."""
        self._check(addr, len(data))
        self.memory.write(self.store, data, addr)

    def pack(self, addr: int, value: int, bits: int = 32) -> None:
        """Pack value into memory (treats value as unsigned two's complement)."""
        if bits not in _STRUCT_CACHE:
            raise ValueError(f"Unsupported bit size: {bits}")
        mask = (1 << bits) - 1
        self.write(addr, _STRUCT_CACHE[bits].pack(value & mask))

    def unpack(self, addr: int, size: int) -> int:
        """Unpack an unsigned value of size bytes from memory."""
        bits = size * 8
        if bits not in _STRUCT_CACHE:
            raise ValueError(f"Unsupported size for unpack: {size}")
        return _STRUCT_CACHE[bits].unpack(self.read(addr, size))[0]

    def dump(self, limit: int | None = None) -> bytes:
        """Read memory from offset 0, up to limit bytes."""
        size = self.size if limit is None else min(limit, self.size)
        log.debug(f"Mem.dump: {size} of {self.size} bytes ({self.pages} pages)")
        return self.read(0, size)
