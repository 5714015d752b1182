"""Turing machine simulation (tape, program, machine, configuration files) and repair-firm domain errors."""

__version__ = "0.1.0"
__all__ = ["transition", "tape", "program", "machine", "repair_errors"]