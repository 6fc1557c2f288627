# mipspipe

A cycle-level simulator of a classic five-stage MIPS pipeline (IF, ID, EX,
MEM, WB). It has no forwarding. Data hazards are handled by stalling the
decode stage and inserting a bubble. Taken branches and jumps are resolved in
EX and flush the younger stages.

## Supported instructions

- R-type: `add`, `addu`, `sub`, `subu`, `and`, `or`, `xor`, `nor`, `slt`,
  `sll`, `srl`, `jr`
- I-type: `addi`, `lw`, `sw`, `beq`, `bne`
- J-type: `j`

Any other opcode or function code passes through the pipeline without
writing a register or memory.

The machine has 32 registers, and register 0 always reads as zero. It has
4096 bytes of little-endian data memory and room for 1024 instruction words.

## Installation

```
pip install .
```

## Command line

```
mipspipe program.bin
```

`program.bin` is a raw binary holding big-endian 32-bit instruction words.
If the file length is not a multiple of four, the last word is padded with
zero bytes. If the file cannot be opened, the command prints an error and
exits with status 1. When the pipeline drains, the simulator prints the
number of cycles and the number of completed instructions. It then prints
the words stored from data address `0x0100` onward as a table of squares,
`0^2` through `200^2`.

During a run, a load or store outside data memory prints a message to
standard error and the run goes on. The load yields 0 and the store is
skipped.

## Library use

```python
from mipspipe.machine import InstructionMemory
from mipspipe.pipeline import Simulator, format_report

program = InstructionMemory(1024)
program.load_file("program.bin")

sim = Simulator(program)
result = sim.run()
print(result.cycles, result.instructions_executed)
print(format_report(result, sim.memory))
```

`Simulator` also accepts the program image directly as bytes. Call
`Simulator.step()` to advance one clock cycle at a time. It returns `False`
once the pipeline has drained. While the simulation runs, its state can be
inspected:

- `registers`, `memory` and `pc`
- `cycle`
- the pipeline registers `if_id`, `id_ex`, `ex_mem` and `mem_wb`

The modules can also be used on their own:

- `mipspipe.isa`: the instruction field extractors `opcode`, `rs`, `rt`,
  `rd`, `shamt`, `funct`, `imm16`, `imm_se` and `addr26`, along with the
  `AluOp` enum and `to_int32`.
- `mipspipe.alu.execute(op, operand1, operand2)`: the 32-bit ALU. An unknown
  operation, or `NOP`, returns the first operand.
- `mipspipe.hazard.detect_data_hazard(...)`: stall detection for a pipeline
  without forwarding.
- `mipspipe.machine`:
  - `RegisterFile`.
  - `DataMemory`. An out-of-range access raises `MemoryAccessError`, a
    subclass of `IndexError`.
  - `InstructionMemory`. Words beyond its capacity are dropped with a
    `RuntimeWarning`.

## Limitations

There is no assembler. Programs must already be encoded as binary
instruction words. The command's report always shows the same fixed table of
words at `0x0100`. There is no option to dump other memory or the
registers.

## Running the tests

```
pip install .[test]
pytest
```