import pytest

from mipspipe.alu import execute
from mipspipe.isa import AluOp

VALUES = [0, 1, -1, 7, -7, 12345, 2**31 - 1, -(2**31)]


@pytest.mark.parametrize("a", VALUES)
@pytest.mark.parametrize("b", VALUES)
def test_sub_undoes_add(a, b):
    assert execute(AluOp.SUB, execute(AluOp.ADD, a, b), b) == a


def test_add_wraps_on_overflow():
    assert execute(AluOp.ADD, 2**31 - 1, 1) == -(2**31)


@pytest.mark.parametrize("a", VALUES)
def test_bitwise_identities(a):
    assert execute(AluOp.AND, a, a) == a
    assert execute(AluOp.OR, a, 0) == a
    assert execute(AluOp.XOR, a, a) == 0
    inverted = execute(AluOp.NOR, a, a)
    assert execute(AluOp.NOR, inverted, inverted) == a
    assert execute(AluOp.AND, a, inverted) == 0


@pytest.mark.parametrize("a", VALUES)
@pytest.mark.parametrize("b", VALUES)
def test_slt_is_signed_and_asymmetric(a, b):
    forward = execute(AluOp.SLT, a, b)
    backward = execute(AluOp.SLT, b, a)
    assert forward in (0, 1)
    assert forward + backward == (0 if a == b else 1)


def test_slt_treats_negative_as_smaller():
    assert execute(AluOp.SLT, -1, 1) == 1


def test_shift_amount_uses_low_five_bits():
    assert execute(AluOp.SLL, 3, 33) == execute(AluOp.SLL, 3, 1)
    assert execute(AluOp.SRL, -8, 34) == execute(AluOp.SRL, -8, 2)


def test_shift_round_trip():
    value = 0x00FF00FF
    assert execute(AluOp.SRL, execute(AluOp.SLL, value, 8), 8) == value


def test_sll_into_sign_bit():
    assert execute(AluOp.SLL, 1, 31) == -(2**31)


def test_srl_is_logical():
    assert execute(AluOp.SRL, -1, 28) == 0xF


@pytest.mark.parametrize("op", [AluOp.NOP, 99, -3])
def test_nop_and_unknown_pass_first_operand(op):
    assert execute(op, 42, 17) == 42