"""The rule table of a Turing machine."""

from __future__ import annotations

import io
import sys
from typing import TextIO

from labtools.transition import Transition


class Program:
    """Transitions keyed by state name and read symbol."""

    def __init__(self) -> None:
        self._rules: dict[str, dict[str, Transition]] = {}

    def add_rule(
        self,
        current_state: str,
        read_symbol: str,
        write_symbol: str,
        move_direction: str,
        next_state: str,
    ) -> None:
        """Add or replace the rule for (current_state, read_symbol)."""
        self._rules.setdefault(current_state, {})[read_symbol] = Transition(
            read_symbol, write_symbol, move_direction, next_state
        )

    def remove_rule(self, current_state: str, read_symbol: str) -> None:
        """Remove a rule if present; a state with no rules left is dropped."""
        table = self._rules.get(current_state)
        if table is None:
            return
        table.pop(read_symbol, None)
        if not table:
            del self._rules[current_state]

    def print_rules(self, state: str, out: TextIO | None = None) -> None:
        """Write the rules of one state, one per line."""
        if out is None:
            out = sys.stdout
        for transition in self._rules.get(state, {}).values():
            out.write(f"  {state} {transition}\n")

    def print_all_rules(self, out: TextIO | None = None) -> None:
        for state in self._rules:
            self.print_rules(state, out)

    def get_transition(self, current_state: str, current_symbol: str) -> Transition | None:
        """Return the matching transition, or None when there is no rule."""
        return self._rules.get(current_state, {}).get(current_symbol)

    def has_rule(self, state: str, symbol: str) -> bool:
        return symbol in self._rules.get(state, {})

    def __len__(self) -> int:
        return sum(len(table) for table in self._rules.values())

    def __bool__(self) -> bool:
        return bool(self._rules)

    def clear(self) -> None:
        self._rules.clear()

    def states(self) -> list[str]:
        """Return the names of all states that have rules."""
        return list(self._rules)

    def copy(self) -> Program:
        other = Program()
        other._rules = {
            state: {
                symbol: Transition(t.read_symbol, t.write_symbol, t.move_direction, t.next_state)
                for symbol, t in table.items()
            }
            for state, table in self._rules.items()
        }
        return other

    def serialize(self) -> str:
        buffer = io.StringIO()
        self.save_stream(buffer)
        return buffer.getvalue()

    @classmethod
    def deserialize(cls, data: str) -> Program:
        program = cls()
        program.load_stream(io.StringIO(data))
        return program

    def save_stream(self, stream: TextIO) -> None:
        """Write the rule table in the text format read by :meth:`load_stream`."""
        stream.write(f"{len(self._rules)}\n")
        for state, table in self._rules.items():
            stream.write(f"{state} {len(table)}\n")
            for symbol, transition in table.items():
                stream.write(f"{symbol} {transition}\n")

    def load_stream(self, stream: TextIO) -> None:
        """Replace the rules with those read from a stream."""
        self._rules.clear()
        tokens = iter(stream.read().split())
        try:
            state_count = int(next(tokens))
            for _ in range(state_count):
                state = next(tokens)
                transition_count = int(next(tokens))
                for _ in range(transition_count):
                    next(tokens)  # key symbol, repeated as the read symbol
                    read_symbol = next(tokens)
                    write_symbol = next(tokens)
                    move_direction = next(tokens)
                    next_state = next(tokens)
                    self.add_rule(state, read_symbol, write_symbol, move_direction, next_state)
        except StopIteration:
            raise ValueError("truncated program data") from None