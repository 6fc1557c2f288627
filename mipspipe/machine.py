"""Register file, data memory and instruction memory."""

from __future__ import annotations

import os
import warnings

from .isa import DATA_MEM_SIZE, INST_MEM_SIZE, NUM_REGS, to_int32

_MASK32 = 0xFFFFFFFF


class MemoryAccessError(IndexError):
    """A data-memory access fell outside the memory."""


class RegisterFile:
    """General-purpose registers; register 0 always reads as zero."""

    def __init__(self):
        self._regs = [0] * NUM_REGS

    def reset(self) -> None:
        """Clear every register to zero."""
        self._regs = [0] * NUM_REGS

    def read(self, index: int) -> int:
        """Return a register's value; out-of-range indices and $zero read 0."""
        if not 0 < index < NUM_REGS:
            return 0
        return self._regs[index]

    def write(self, index: int, value: int) -> None:
        """Store a 32-bit value; writes to $zero or out of range are ignored."""
        if 0 < index < NUM_REGS:
            self._regs[index] = to_int32(value)


class DataMemory:
    """Byte-addressed little-endian data memory."""

    def __init__(self, size: int = DATA_MEM_SIZE):
        self.size = size
        self._bytes = bytearray(size)

    def reset(self) -> None:
        """Clear memory to zero."""
        self._bytes = bytearray(self.size)

    def _check(self, address: int, action: str) -> int:
        address &= _MASK32
        if address + 3 >= self.size:
            raise MemoryAccessError(
                f"Data memory {action} out of bounds at 0x{address:08x}"
            )
        return address

    def read_word(self, address: int) -> int:
        """Read a signed 32-bit word starting at ``address``."""
        address = self._check(address, "read")
        return int.from_bytes(self._bytes[address:address + 4], "little", signed=True)

    def write_word(self, address: int, value: int) -> None:
        """Write a 32-bit word starting at ``address``."""
        address = self._check(address, "write")
        self._bytes[address:address + 4] = (value & _MASK32).to_bytes(4, "little")


class InstructionMemory:
    """Word-addressed instruction memory loaded from big-endian bytes."""

    def __init__(self, capacity: int = INST_MEM_SIZE):
        self.capacity = capacity
        self._words = [0] * capacity
        self._count = 0

    def load_bytes(self, data: bytes) -> int:
        """Load a program image and return the number of instructions loaded.

        A trailing partial word is zero-padded. Words beyond the capacity
        are dropped with a RuntimeWarning.
        """
        self._words = [0] * self.capacity
        self._count = 0
        whole = len(data) - len(data) % 4
        for offset in range(0, whole, 4):
            if self._count >= self.capacity:
                warnings.warn(
                    "Instruction memory overflow, too many instructions",
                    RuntimeWarning,
                    stacklevel=2,
                )
                return self._count
            self._words[self._count] = int.from_bytes(data[offset:offset + 4], "big")
            self._count += 1
        tail = data[whole:]
        if tail and self._count < self.capacity:
            self._words[self._count] = int.from_bytes(tail.ljust(4, b"\0"), "big")
            self._count += 1
        return self._count

    def load_file(self, path: str | os.PathLike) -> int:
        """Load a program image from a file; raises OSError if it cannot be read."""
        with open(path, "rb") as handle:
            data = handle.read()
        return self.load_bytes(data)

    def read(self, index: int) -> int:
        """Return the word at ``index``, or 0 beyond the capacity."""
        if 0 <= index < self.capacity:
            return self._words[index]
        return 0

    def __len__(self) -> int:
        return self._count