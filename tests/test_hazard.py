import pytest

from mipspipe.hazard import detect_data_hazard


@pytest.mark.parametrize("source", ["rs", "rt"])
def test_ex_stage_write_stalls(source):
    regs = {"rs": 0, "rt": 0}
    regs[source] = 5
    assert detect_data_hazard(1, 0, 5, 0, regs["rs"], regs["rt"], 0)


@pytest.mark.parametrize("source", ["rs", "rt"])
def test_mem_stage_write_stalls(source):
    regs = {"rs": 0, "rt": 0}
    regs[source] = 9
    assert detect_data_hazard(0, 1, 0, 9, regs["rs"], regs["rt"], 0)


def test_no_write_no_stall():
    assert not detect_data_hazard(0, 0, 5, 5, 5, 5, 0)


def test_register_zero_never_stalls():
    assert not detect_data_hazard(1, 1, 0, 0, 0, 0, 1)


def test_unrelated_registers_no_stall():
    assert not detect_data_hazard(1, 1, 3, 4, 5, 6, 0)


def test_load_flag_does_not_change_result():
    for mem_read in (0, 1):
        assert detect_data_hazard(1, 0, 2, 0, 2, 7, mem_read)
        assert not detect_data_hazard(1, 0, 2, 0, 8, 7, mem_read)