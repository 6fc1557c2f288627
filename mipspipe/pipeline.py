"""Five-stage pipeline simulator without forwarding, and its command."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum

from .alu import execute
from .hazard import detect_data_hazard
from .isa import AluOp, addr26, funct, imm_se, opcode, rd, rs, rt, shamt
from .machine import DataMemory, InstructionMemory, MemoryAccessError, RegisterFile

_MASK32 = 0xFFFFFFFF
_SQUARES_BASE = 0x0100
_SQUARES_LAST = 200

_R_TYPE_OPS = {
    0x20: AluOp.ADD,
    0x21: AluOp.ADD,
    0x22: AluOp.SUB,
    0x23: AluOp.SUB,
    0x24: AluOp.AND,
    0x25: AluOp.OR,
    0x26: AluOp.XOR,
    0x27: AluOp.NOR,
    0x2A: AluOp.SLT,
}


class _Branch(IntEnum):
    NONE = 0
    BEQ = 1
    BNE = 2


class _Jump(IntEnum):
    NONE = 0
    J = 1
    JR = 2


@dataclass
class IfId:
    """The IF/ID pipeline register."""

    valid: bool = False
    instr: int = 0
    pc: int = 0


@dataclass
class IdEx:
    """The ID/EX pipeline register."""

    valid: bool = False
    instr: int = 0
    pc: int = 0
    rs: int = 0
    rt: int = 0
    rd: int = 0
    rs_val: int = 0
    rt_val: int = 0
    imm: int = 0
    dest_reg: int = 0
    reg_write: bool = False
    mem_read: bool = False
    mem_write: bool = False
    alu_op: AluOp = AluOp.NOP
    branch: _Branch = _Branch.NONE
    jump: _Jump = _Jump.NONE


@dataclass
class ExMem:
    """The EX/MEM pipeline register."""

    valid: bool = False
    instr: int = 0
    pc: int = 0
    alu_result: int = 0
    store_val: int = 0
    dest_reg: int = 0
    reg_write: bool = False
    mem_read: bool = False
    mem_write: bool = False


@dataclass
class MemWb:
    """The MEM/WB pipeline register."""

    valid: bool = False
    instr: int = 0
    write_val: int = 0
    dest_reg: int = 0
    reg_write: bool = False


@dataclass(frozen=True)
class SimulationResult:
    """Totals gathered by a finished simulation."""

    cycles: int
    instructions_executed: int


class Simulator:
    """Cycle-by-cycle simulation of a MIPS subset on a stalling pipeline."""

    def __init__(self, program):
        if isinstance(program, InstructionMemory):
            self.instructions = program
        else:
            self.instructions = InstructionMemory()
            self.instructions.load_bytes(bytes(program))
        self.registers = RegisterFile()
        self.memory = DataMemory()
        self.pc = 0
        self.fetch_enable = True
        self.cycle = 0
        self.instructions_executed = 0
        self.finished = False
        self.if_id = IfId()
        self.id_ex = IdEx()
        self.ex_mem = ExMem()
        self.mem_wb = MemWb()

    def _pipeline_empty(self) -> bool:
        return not (
            self.if_id.valid or self.id_ex.valid or self.ex_mem.valid or self.mem_wb.valid
        )

    def _memory_stage(self) -> MemWb:
        ex = self.ex_mem
        result = MemWb(
            valid=ex.valid, instr=ex.instr, dest_reg=ex.dest_reg, reg_write=ex.reg_write
        )
        if not ex.valid:
            return result
        if ex.mem_read:
            try:
                result.write_val = self.memory.read_word(ex.alu_result)
            except MemoryAccessError as exc:
                print(exc, file=sys.stderr)
                result.write_val = 0
        else:
            result.write_val = ex.alu_result
        if ex.mem_write:
            try:
                self.memory.write_word(ex.alu_result, ex.store_val)
            except MemoryAccessError as exc:
                print(exc, file=sys.stderr)
        return result

    def _execute_stage(self) -> tuple[ExMem, int | None]:
        idex = self.id_ex
        result = ExMem(
            valid=idex.valid,
            instr=idex.instr,
            pc=idex.pc,
            dest_reg=idex.dest_reg,
            reg_write=idex.reg_write,
            mem_read=idex.mem_read,
            mem_write=idex.mem_write,
        )
        target = None
        if not idex.valid:
            return result, None

        if idex.jump is _Jump.J:
            target = (idex.pc & 0xF0000000) | ((idex.imm << 2) & _MASK32)
        elif idex.jump is _Jump.JR:
            target = idex.rs_val & _MASK32
        elif idex.branch is not _Branch.NONE:
            equal = idex.rs_val == idex.rt_val
            taken = (idex.branch is _Branch.BEQ) == equal
            if taken:
                target = (idex.pc + 4 + (idex.imm << 2)) & _MASK32

        if idex.jump is _Jump.NONE:
            if idex.mem_read or idex.mem_write or (
                idex.instr != 0 and opcode(idex.instr) == 0x08
            ):
                operand2 = idex.imm
            elif idex.alu_op in (AluOp.SLL, AluOp.SRL):
                operand2 = idex.imm & 0x1F
            else:
                operand2 = idex.rt_val
            result.alu_result = execute(idex.alu_op, idex.rs_val, operand2)

        if idex.mem_write:
            result.store_val = idex.rt_val
        return result, target

    def _decode_stage(self) -> IdEx:
        if not self.if_id.valid:
            return IdEx()
        instr = self.if_id.instr
        decoded = IdEx(
            valid=True,
            instr=instr,
            pc=self.if_id.pc,
            rs=rs(instr),
            rt=rt(instr),
            rd=rd(instr),
        )
        rs_val = self.registers.read(decoded.rs)
        rt_val = self.registers.read(decoded.rt)
        op = opcode(instr)

        if op == 0x00:
            decoded.reg_write = True
            decoded.dest_reg = decoded.rd
            code = funct(instr)
            if code in _R_TYPE_OPS:
                decoded.alu_op = _R_TYPE_OPS[code]
            elif code in (0x00, 0x02):
                decoded.alu_op = AluOp.SLL if code == 0x00 else AluOp.SRL
                rs_val = rt_val
                decoded.imm = shamt(instr)
            elif code == 0x08:
                decoded.reg_write = False
                decoded.jump = _Jump.JR
        else:
            decoded.imm = imm_se(instr)
            if op == 0x08:
                decoded.reg_write = True
                decoded.dest_reg = decoded.rt
                decoded.alu_op = AluOp.ADD
            elif op == 0x23:
                decoded.reg_write = True
                decoded.mem_read = True
                decoded.dest_reg = decoded.rt
                decoded.alu_op = AluOp.ADD
            elif op == 0x2B:
                decoded.mem_write = True
                decoded.alu_op = AluOp.ADD
            elif op in (0x04, 0x05):
                decoded.branch = _Branch.BEQ if op == 0x04 else _Branch.BNE
                decoded.alu_op = AluOp.SUB
            elif op == 0x02:
                decoded.jump = _Jump.J
                decoded.imm = addr26(instr)

        decoded.rs_val = rs_val
        decoded.rt_val = rt_val
        return decoded

    def _fetch_stage(self) -> IfId:
        fetched = IfId(pc=self.pc)
        if self.fetch_enable:
            index = self.pc // 4
            if index < len(self.instructions):
                fetched.instr = self.instructions.read(index)
                fetched.valid = True
            else:
                self.fetch_enable = False
        return fetched

    def step(self) -> bool:
        """Advance one clock cycle; return False once the pipeline has drained."""
        if self.finished:
            return False
        self.cycle += 1

        wb = self.mem_wb
        if wb.valid and wb.reg_write:
            self.registers.write(wb.dest_reg, wb.write_val)

        if not self.fetch_enable and self._pipeline_empty():
            self.finished = True
            return False

        mem_wb_new = self._memory_stage()
        ex_mem_new, target = self._execute_stage()
        branch_taken = target is not None
        if branch_taken:
            self.pc = target
            self.if_id = IfId()
            self.id_ex = IdEx()

        id_ex_new = self._decode_stage()
        if_id_new = self._fetch_stage()

        stall = False
        if self.if_id.valid:
            stall = detect_data_hazard(
                self.id_ex.reg_write,
                self.ex_mem.reg_write,
                self.id_ex.dest_reg,
                self.ex_mem.dest_reg,
                rs(self.if_id.instr),
                rt(self.if_id.instr),
                self.id_ex.mem_read,
            )

        if branch_taken:
            self.if_id = IfId()
            self.id_ex = IdEx()
        elif stall:
            self.id_ex = IdEx()
            self.pc = self.if_id.pc
        else:
            self.id_ex = id_ex_new
            self.if_id = if_id_new
            self.pc = (self.pc + 4) & _MASK32

        self.ex_mem = ex_mem_new
        self.mem_wb = mem_wb_new
        if mem_wb_new.valid and mem_wb_new.instr != 0:
            self.instructions_executed += 1
        return True

    def run(self) -> SimulationResult:
        """Run until the pipeline drains and return the totals."""
        while self.step():
            pass
        return SimulationResult(self.cycle, self.instructions_executed)


def format_report(result: SimulationResult, memory: DataMemory) -> str:
    """Render the run totals and the table of squares stored in memory."""
    lines = [
        f"Simulation completed in {result.cycles} cycles.",
        f"Total instructions executed (completed): {result.instructions_executed}",
        f"Square table 0^2 to {_SQUARES_LAST}^2:",
    ]
    for n in range(_SQUARES_LAST + 1):
        value = memory.read_word(_SQUARES_BASE + n * 4)
        lines.append(f"{n:3d}^2 = {value}")
    return "\n".join(lines)


def main(argv=None) -> int:
    """Simulate the program image named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: mipspipe <program.bin>")
        return 1
    path = args[0]
    instructions = InstructionMemory()
    try:
        instructions.load_file(path)
    except OSError:
        print(f"Failed to open program file: {path}", file=sys.stderr)
        return 1
    simulator = Simulator(instructions)
    result = simulator.run()
    print(format_report(result, simulator.memory))
    return 0