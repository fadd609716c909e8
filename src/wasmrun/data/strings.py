"""String read/write operations for linear memory."""
from __future__ import annotations
from typing import TYPE_CHECKING
from ..utils.constants import MAX_STR
from ..utils.logger import log

if TYPE_CHECKING:
    from ..mem.memory import Mem


class Strings:
    """UTF-8 string operations over a module's linear memory."""

    def __init__(self, mem: Mem):
        """Initialize with memory view.

        Args:
            mem: Memory view instance
        """
        self.mem = mem

    def cstring(self, addr: int, max_len: int = MAX_STR) -> str:
        """Read a NUL-terminated UTF-8 string.

        Stops at the terminator, at max_len bytes or at the end of
        memory, whichever comes first.
        """
        if max_len <= 0:
            return ""
        end = min(addr + min(max_len, MAX_STR), self.mem.size)
        data = self.mem.read(addr, max(0, end - addr))
        nul = data.find(b"\x00")
        if nul >= 0:
            data = data[:nul]
        elif end - addr >= MAX_STR:
            log.debug(f"String read truncated at {MAX_STR} bytes")
        return data.decode("utf-8", errors="replace")

    def decode(self, addr: int = 0, size: int | None = None) -> str:
        """Decode a memory region as UTF-8 text.

        Invalid sequences become U+FFFD and trailing NULs are dropped,
        so an untouched memory decodes to an empty string.

        Args:
            addr: Start offset
            size: Bytes to decode (default: to end of memory)
        """
        if size is None:
            size = self.mem.size - addr
        data = self.mem.read(addr, size)
        return data.rstrip(b"\x00").decode("utf-8", errors="replace")

    def write(self, addr: int, text: str, null: bool = True) -> int:
        """Write a UTF-8 string to memory.

        Returns:
            Number of bytes written
        """
        data = text.encode("utf-8")
        if null:
            data += b"\x00"
        self.mem.write(addr, data)
        return len(data)
