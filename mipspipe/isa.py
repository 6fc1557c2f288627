"""Instruction-set constants, ALU operation codes and MIPS field decoding."""

from enum import IntEnum

NUM_REGS = 32
INST_MEM_SIZE = 1024
DATA_MEM_SIZE = 4096

_MASK32 = 0xFFFFFFFF


class AluOp(IntEnum):
    """Operations understood by the ALU."""

    NOP = 0
    ADD = 1
    SUB = 2
    AND = 3
    OR = 4
    XOR = 5
    NOR = 6
    SLT = 7
    SLL = 8
    SRL = 9


def to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def opcode(instr: int) -> int:
    """Bits 31..26: the primary opcode."""
    return (instr >> 26) & 0x3F


def rs(instr: int) -> int:
    """Bits 25..21: the first source register."""
    return (instr >> 21) & 0x1F


def rt(instr: int) -> int:
    """Bits 20..16: the second source or target register."""
    return (instr >> 16) & 0x1F


def rd(instr: int) -> int:
    """Bits 15..11: the destination register of an R-type instruction."""
    return (instr >> 11) & 0x1F


def shamt(instr: int) -> int:
    """Bits 10..6: the shift amount."""
    return (instr >> 6) & 0x1F


def funct(instr: int) -> int:
    """Bits 5..0: the function code of an R-type instruction."""
    return instr & 0x3F


def imm16(instr: int) -> int:
    """The low 16 bits as an unsigned immediate."""
    return instr & 0xFFFF


def imm_se(instr: int) -> int:
    """The low 16 bits sign-extended to a signed integer."""
    value = imm16(instr)
    return value - 0x10000 if value & 0x8000 else value


def addr26(instr: int) -> int:
    """The 26-bit target address of a jump."""
    return instr & 0x03FFFFFF