"""An unbounded Turing machine tape stored sparsely."""

from __future__ import annotations


class Tape:
    """A tape of symbols indexed by integer position, with a read/write head."""

    def __init__(self, initial_data: str = "", blank: str = "B") -> None:
        self._cells: dict[int, str] = dict(enumerate(initial_data))
        self.position = 0
        self._blank = blank

    @property
    def blank_symbol(self) -> str:
        return self._blank

    @property
    def used_cells(self) -> int:
        """Number of cells holding a stored symbol."""
        return len(self._cells)

    def read(self) -> str:
        """Return the symbol under the head, or the blank symbol."""
        return self._cells.get(self.position, self._blank)

    def write(self, symbol: str) -> None:
        """Write a symbol under the head; writing the blank erases the cell."""
        if symbol != self._blank:
            self._cells[self.position] = symbol
        else:
            self._cells.pop(self.position, None)

    def move(self, direction: str) -> None:
        """Move the head: 'R' right, 'L' left, anything else stays put."""
        if direction == "R":
            self.position += 1
        elif direction == "L":
            self.position -= 1

    def bounds(self) -> tuple[int, int]:
        """Return the lowest and highest positions covering the cells and the head."""
        if not self._cells:
            return self.position, self.position
        return (
            min(self.position, min(self._cells)),
            max(self.position, max(self._cells)),
        )

    def __str__(self) -> str:
        low, high = self.bounds()
        parts = []
        for pos in range(low, high + 1):
            if pos == self.position:
                parts.append(f"[{self.read()}]")
            else:
                parts.append(self._cells.get(pos, self._blank))
        return " ".join(parts)

    def clear(self) -> None:
        """Erase every cell and return the head to position 0."""
        self._cells.clear()
        self.position = 0

    def copy(self) -> Tape:
        other = Tape(blank=self._blank)
        other._cells = dict(self._cells)
        other.position = self.position
        return other

    def serialize(self) -> str:
        """Return the tape as 'head blank count pos sym ...' text."""
        text = f"{self.position} {self._blank} {len(self._cells)} "
        for pos in sorted(self._cells):
            text += f"{pos} {self._cells[pos]} "
        return text

    @classmethod
    def deserialize(cls, data: str) -> Tape:
        """Build a tape from text produced by :meth:`serialize`."""
        tokens = iter(data.split())
        try:
            position = int(next(tokens))
            blank = next(tokens)
            count = int(next(tokens))
            cells = {}
            for _ in range(count):
                pos = int(next(tokens))
                cells[pos] = next(tokens)
        except StopIteration:
            raise ValueError("truncated tape data") from None
        tape = cls(blank=blank)
        tape.position = position
        tape._cells = cells
        return tape