"""A Turing machine built from a tape and a rule table."""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from labtools.program import Program
from labtools.tape import Tape

DEFAULT_MAX_STEPS = 100000


class TuringMachineError(RuntimeError):
    """Base class for errors raised by the machine."""


class MaxStepsExceededError(TuringMachineError):
    """Raised when a run goes past the step limit."""

    def __init__(self, steps: int) -> None:
        super().__init__(f"Maximum steps exceeded: {steps}")
        self.steps = steps


class InvalidConfigurationError(TuringMachineError):
    """Raised when a configuration file cannot be read or written."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid configuration: {message}")


def _parse_rule_line(line: str) -> Optional[tuple[str, str, str, str, str]]:
    """Parse 'state read write move next'; return None if the line is not a rule."""
    tokens = line.split()
    if len(tokens) < 5:
        return None
    state, read_symbol, write_symbol, move_direction, next_state = tokens[:5]
    if len(read_symbol) == 1 and len(write_symbol) == 1 and len(move_direction) == 1:
        return state, read_symbol, write_symbol, move_direction, next_state
    return None


class TuringMachine:
    """A single-tape deterministic Turing machine."""

    def __init__(self, blank_symbol: str = "B") -> None:
        self.tape = Tape("", blank_symbol)
        self.program = Program()
        self.current_state = "q0"
        self._initial_state = "q0"
        self.halt_state = "halt"
        self.step_count = 0
        self.max_steps = DEFAULT_MAX_STEPS

    @property
    def initial_state(self) -> str:
        return self._initial_state

    @initial_state.setter
    def initial_state(self, state: str) -> None:
        """Set the initial state; the current state moves to it as well."""
        self._initial_state = state
        self.current_state = state

    def copy(self) -> TuringMachine:
        """Return an independent copy of the machine."""
        other = TuringMachine(self.tape.blank_symbol)
        other.tape = self.tape.copy()
        other.program = self.program.copy()
        other.current_state = self.current_state
        other._initial_state = self._initial_state
        other.halt_state = self.halt_state
        other.step_count = self.step_count
        other.max_steps = self.max_steps
        return other

    def load_program(self, stream: TextIO) -> None:
        """Add rules from lines of 'state read write move next'; '#' starts a comment line."""
        for raw in stream:
            line = raw.rstrip("\n")
            if not line or line.startswith("#"):
                continue
            rule = _parse_rule_line(line)
            if rule is not None:
                self.program.add_rule(*rule)

    def load_tape(self, stream: TextIO) -> None:
        """Replace the tape with the first line of the stream, if there is one."""
        line = stream.readline()
        if line:
            self.tape = Tape(line.rstrip("\n"), self.tape.blank_symbol)

    def load_from_file(self, filename: str) -> None:
        load_configuration(self, filename)

    def save_to_file(self, filename: str) -> None:
        save_configuration(self, filename)

    def step(self) -> bool:
        """Apply one rule; return False when no rule matches or the halt state is reached."""
        if self.step_count >= self.max_steps:
            raise MaxStepsExceededError(self.max_steps)
        transition = self.program.get_transition(self.current_state, self.tape.read())
        if transition is None:
            return False
        self.tape.write(transition.write_symbol)
        self.tape.move(transition.move_direction)
        self.current_state = transition.next_state
        self.step_count += 1
        return self.current_state != self.halt_state

    def run(self, logging: bool = False) -> None:
        self.run_with_callback(logging)

    def run_with_callback(
        self,
        logging: bool = False,
        callback: Optional[Callable[[TuringMachine], None]] = None,
    ) -> None:
        """Run until the machine stops, reporting the state before and after every step."""
        self.step_count = 0

        def report() -> None:
            if logging:
                self.print_state()
            if callback is not None:
                callback(self)

        report()
        while self.step():
            report()
        if logging:
            print("Final state:")
        report()

    def print_state(self, out: Optional[TextIO] = None) -> None:
        if out is None:
            out = sys.stdout
        out.write(
            f"Step {self.step_count}: State={self.current_state}, "
            f"Tape={self.tape}, Head at position {self.tape.position}\n"
        )

    def add_rule(
        self,
        current_state: str,
        read_symbol: str,
        write_symbol: str,
        move_direction: str,
        next_state: str,
    ) -> None:
        self.program.add_rule(current_state, read_symbol, write_symbol, move_direction, next_state)

    def remove_rule(self, current_state: str, read_symbol: str) -> None:
        self.program.remove_rule(current_state, read_symbol)

    def print_rules(self, out: Optional[TextIO] = None) -> None:
        if out is None:
            out = sys.stdout
        out.write("Program rules:\n")
        self.program.print_all_rules(out)

    def reset(self) -> None:
        """Clear the tape and return to the initial state."""
        self.tape.clear()
        self.current_state = self._initial_state
        self.step_count = 0

    @classmethod
    def from_file(cls, filename: str) -> TuringMachine:
        machine = cls()
        machine.load_from_file(filename)
        return machine

    def serialize(self) -> str:
        return (
            f"{self.current_state}\n"
            f"{self._initial_state}\n"
            f"{self.halt_state}\n"
            f"{self.step_count}\n"
            f"{self.max_steps}\n"
            f"{self.tape.serialize()}\n"
            f"{self.program.serialize()}"
        )

    def deserialize(self, data: str) -> None:
        """Restore the machine from text produced by :meth:`serialize`."""
        lines = data.split("\n")
        if len(lines) < 6:
            raise ValueError("truncated machine data")
        self.current_state = lines[0]
        self._initial_state = lines[1]
        self.halt_state = lines[2]
        try:
            self.step_count = int(lines[3].strip())
            self.max_steps = int(lines[4].strip())
        except ValueError:
            raise ValueError("malformed step counters in machine data") from None
        self.tape = Tape.deserialize(lines[5])
        self.program = Program.deserialize("\n".join(lines[6:]))


def load_configuration(machine: TuringMachine, filename: str) -> None:
    """Read [Config], [Tape] and [Program] sections from a file into the machine."""
    try:
        handle = open(filename, encoding="utf-8")
    except OSError:
        raise InvalidConfigurationError(f"Cannot open file: {filename}") from None

    section = "config"
    with handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if not line:
                continue
            if line == "[Tape]":
                section = "tape"
                continue
            if line == "[Program]":
                section = "program"
                continue
            if line == "[Config]":
                section = "config"
                continue

            if section == "tape":
                machine.tape = Tape(line, machine.tape.blank_symbol)
            elif section == "program":
                rule = _parse_rule_line(line)
                if rule is not None:
                    machine.add_rule(*rule)
            else:
                tokens = line.split()
                if len(tokens) < 2:
                    continue
                key, value = tokens[0], tokens[1]
                if key == "initialState:":
                    machine.initial_state = value
                elif key == "haltState:":
                    machine.halt_state = value
                elif key == "maxSteps:":
                    try:
                        machine.max_steps = int(value)
                    except ValueError:
                        raise InvalidConfigurationError(
                            f"Bad maxSteps value: {value}"
                        ) from None


def save_configuration(machine: TuringMachine, filename: str) -> None:
    """Write the machine's settings and rules in the configuration file format."""
    try:
        handle = open(filename, "w", encoding="utf-8")
    except OSError:
        raise InvalidConfigurationError(f"Cannot open file for writing: {filename}") from None

    with handle:
        handle.write("[Config]\n")
        handle.write(f"initialState: {machine.initial_state}\n")
        handle.write(f"haltState: {machine.halt_state}\n")
        handle.write(f"maxSteps: {machine.max_steps}\n")
        handle.write("[Tape]\n")
        handle.write("Initial tape data\n")
        handle.write("[Program]\n")
        machine.program.save_stream(handle)