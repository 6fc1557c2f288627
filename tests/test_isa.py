import pytest

from mipspipe.isa import (
    AluOp,
    addr26,
    funct,
    imm16,
    imm_se,
    opcode,
    rd,
    rs,
    rt,
    shamt,
    to_int32,
)


def _r_type(op, src, tgt, dst, sh, fn):
    return (op << 26) | (src << 21) | (tgt << 16) | (dst << 11) | (sh << 6) | fn


@pytest.mark.parametrize(
    "fields",
    [(0, 1, 2, 3, 4, 0x20), (0x3F, 31, 31, 31, 31, 0x3F), (0x23, 17, 9, 0, 0, 0)],
)
def test_r_type_fields_round_trip(fields):
    instr = _r_type(*fields)
    assert (opcode(instr), rs(instr), rt(instr), rd(instr), shamt(instr), funct(instr)) == fields


def test_imm16_is_low_half():
    instr = (0x08 << 26) | 0xBEEF
    assert imm16(instr) == 0xBEEF


def test_imm_se_negative():
    assert imm_se(0xFFFF) == -1


def test_imm_se_positive_unchanged():
    assert imm_se(0x7FFF) == 0x7FFF


def test_imm_se_matches_to_int32_of_extension():
    for value in (0x0000, 0x8000, 0x1234, 0xABCD):
        extended = imm_se(value)
        assert extended & 0xFFFF == value
        assert -0x8000 <= extended <= 0x7FFF


def test_addr26_strips_opcode():
    instr = (0x02 << 26) | 0x03FFFFFF
    assert addr26(instr) == 0x03FFFFFF


def test_to_int32_wraps():
    assert to_int32(0x80000000) == -(2**31)
    assert to_int32(0xFFFFFFFF) == -1
    assert to_int32(2**32 + 7) == 7


def test_to_int32_keeps_in_range_values():
    for value in (0, 1, -1, 2**31 - 1, -(2**31)):
        assert to_int32(value) == value


@pytest.mark.parametrize(
    "code, name",
    list(
        enumerate(
            ["NOP", "ADD", "SUB", "AND", "OR", "XOR", "NOR", "SLT", "SLL", "SRL"]
        )
    ),
)
def test_alu_op_lookup_by_code(code, name):
    assert AluOp(code).name == name


def test_alu_op_unknown_code_rejected():
    with pytest.raises(ValueError):
        AluOp(10)