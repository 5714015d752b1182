# labtools

A small Turing machine simulator with no dependencies. The package also
provides a set of exception classes for a repair-firm domain model.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Turing machine

The machine is made of three parts:

- `labtools.transition.Transition` is a dataclass that holds one rule:
  `read_symbol`, `write_symbol`, `move_direction` and `next_state`. Its
  `str()` is `"1 0 R q1"`.
- `labtools.tape.Tape(initial_data="", blank="B")` is a tape that stores only
  the cells it needs and extends without limit in both directions. It provides
  `read()`, `write(symbol)`, `move(direction)`, `bounds()`, `clear()` and
  `copy()`. The head's place is held in `position`. `move("R")` moves the head
  right, `move("L")` moves it left, and any other value leaves it where it is.
  When you write the blank symbol, the cell is erased. `str(tape)` shows the
  cells from the lowest stored position to the highest, with the head's cell in
  brackets.
- `labtools.program.Program` holds the rules, indexed by state and by the symbol
  read. It provides `add_rule`, `remove_rule`, `has_rule`, `get_transition`
  (which returns `None` when no rule matches), `states()`, `clear()`,
  `print_rules` and `print_all_rules`. `len(program)` gives the number of rules.

`labtools.machine.TuringMachine(blank_symbol="B")` joins these parts. It starts
in state `q0` and halts in state `halt`. When `step_count` reaches `max_steps`
(100000 by default), the next step raises `MaxStepsExceededError`. If you set
`initial_state`, `current_state` is set to the same value.

```python
from labtools.machine import TuringMachine
from labtools.tape import Tape

tm = TuringMachine()
tm.tape = Tape("101", "B")
tm.add_rule("q0", "1", "0", "R", "q0")
tm.add_rule("q0", "0", "1", "R", "q0")
tm.add_rule("q0", "B", "B", "S", "halt")

tm.run(logging=True)
print(tm.current_state)   # halt
print(tm.tape)            # 0 1 0 [B]
```

### Stepping and running

- `step()` applies one rule. It returns `False` when no rule matches or when
  the machine has entered the halt state.
- `run(logging=False)` resets `step_count` to 0 and then steps until `step()`
  returns `False`. When `logging` is on, it prints the state after each step.
- `run_with_callback(logging, callback)` works the same way. It also calls
  `callback(machine)` at three points:
  - once before the first step;
  - after each step that lets the run go on;
  - once more at the end.
- `print_state(out)` writes one line with the current state and the tape.
  `print_rules(out)` lists every rule. Both write to standard output by
  default.
- `reset()` clears the tape and returns the machine to its initial state.

`load_program(stream)` adds rules from lines of the form
`state read write move next`. It skips blank lines and lines that start with
`#`, and it ignores any line that does not fit this form.
`load_tape(stream)` replaces the tape with the first line of the stream.

### Configuration files

`load_from_file` does the same work as the function `load_configuration`, and
`save_to_file` does the same work as `save_configuration`. They read and write
a text format with sections:

```
[Config]
initialState: q0
haltState: halt
maxSteps: 1000
[Tape]
111
[Program]
q0 1 0 R q1
q1 0 1 L halt
```

`TuringMachine.from_file(path)` builds a new machine from such a file.
`InvalidConfigurationError` is raised in two cases: when the file cannot be
opened, and when `maxSteps` is not an integer.

Saving does not record the tape. The `[Tape]` section is written with the fixed
line `Initial tape data`, and the `[Program]` section is written in the
`Program` serialization format, not as one rule per line.

### Serialization

`Tape`, `Program` and `TuringMachine` each provide `serialize()`, which returns
a compact text form. To rebuild an object from that text:

- use `Tape.deserialize(data)` for a tape;
- use `Program.deserialize(data)` for a program;
- on an existing machine, call `machine.deserialize(data)`.

Each of these raises `ValueError` when the data is truncated or malformed.

## Repair-firm errors

`labtools.repair_errors` defines `RuntimeError` subclasses with fixed messages:

- `ClientBlacklistedError`
- `DoubleAssignmentError`
- `DuplicateEmployeeIdError`
- `InsufficientFundsError`
- `InvalidOrderStatusError`
- `InvalidRepairObjectAddressError`
- `MaterialNotAvailableError`
- `NegativeInventoryError`
- `QualificationMismatchError`
- `ScheduleConflictError`
- `TaskAlreadyCompletedError`
- `UnapprovedSupplierError`

For example, `InsufficientFundsError()` has the message "Insufficient funds for
payment". `MaterialNotAvailableError("Cement")` has the message "Material not
available: Cement" and keeps the name in its `material` attribute.

## What the package does not do

The package provides the repair-firm exceptions only. It has no model of the
firm itself: no clients, orders, employees, warehouses or departments. It also
has no command-line program; you use the machine from Python.