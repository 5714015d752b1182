"""A single rule of a Turing machine program."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Transition:
    """What to write, where to move and which state to enter on reading a symbol."""

    read_symbol: str = " "
    write_symbol: str = " "
    move_direction: str = "S"
    next_state: str = ""

    def __str__(self) -> str:
        return (
            f"{self.read_symbol} {self.write_symbol} "
            f"{self.move_direction} {self.next_state}"
        )