"""Data-hazard detection for a pipeline without forwarding."""


def detect_data_hazard(
    id_ex_reg_write,
    ex_mem_reg_write,
    id_ex_dest,
    ex_mem_dest,
    if_id_rs,
    if_id_rt,
    id_ex_mem_read,
) -> bool:
    """Return True when the instruction in decode must stall.

    A stall is needed when an instruction in EX or MEM will write a
    non-zero register that the decoding instruction reads. The load flag
    is accepted for interface completeness; without forwarding every
    pending write already stalls.
    """
    sources = (if_id_rs, if_id_rt)
    if id_ex_reg_write and id_ex_dest != 0 and id_ex_dest in sources:
        return True
    if ex_mem_reg_write and ex_mem_dest != 0 and ex_mem_dest in sources:
        return True
    return False