"""The arithmetic logic unit."""

from .isa import AluOp, to_int32

_MASK32 = 0xFFFFFFFF


def execute(op: int, operand1: int, operand2: int) -> int:
    """Apply an ALU operation to two 32-bit operands.

    Unknown operations, and NOP, pass the first operand through.
    """
    a = to_int32(operand1)
    b = to_int32(operand2)
    try:
        op = AluOp(op)
    except ValueError:
        return a

    if op is AluOp.ADD:
        return to_int32(a + b)
    if op is AluOp.SUB:
        return to_int32(a - b)
    if op is AluOp.AND:
        return to_int32(a & b)
    if op is AluOp.OR:
        return to_int32(a | b)
    if op is AluOp.XOR:
        return to_int32(a ^ b)
    if op is AluOp.NOR:
        return to_int32(~(a | b))
    if op is AluOp.SLT:
        return 1 if a < b else 0
    if op is AluOp.SLL:
        return to_int32((a & _MASK32) << (b & 0x1F))
    if op is AluOp.SRL:
        return to_int32((a & _MASK32) >> (b & 0x1F))
    return a