"""Five-stage MIPS pipeline simulator with stall-based hazard handling."""

__version__ = "0.1.0"
__all__ = ["isa", "alu", "hazard", "machine", "pipeline"]