import numpy as np

from simulator.machine_types import Symbol

DEFAULT_TAPE_CELLS = 101


class Tape:
    """
    Bidirectionally growable tape.
    Cells live in a contiguous numpy window; window index = position - offset.
    """

    def __init__(self, initial_cells=DEFAULT_TAPE_CELLS):
        if initial_cells < 1:
            raise ValueError("Tape needs at least one initial cell.")
        self.initial_cells = initial_cells
        self.clear()

    def clear(self):
        """Drop every symbol and go back to the initial window centered on 0."""
        self.cells = np.full((self.initial_cells,), Symbol.BLANK.value, dtype=np.int8)
        self.offset = -(self.initial_cells // 2)

    @property
    def lowest(self):
        return self.offset

    @property
    def highest(self):
        return self.offset + len(self.cells) - 1

    def __len__(self):
        return len(self.cells)

    def ensure(self, pos):
        idx = pos - self.offset
        if idx < 0:
            prefix = np.full((-idx,), Symbol.BLANK.value, dtype=np.int8)
            self.cells = np.concatenate((prefix, self.cells))
            self.offset = pos
        elif idx >= len(self.cells):
            suffix = np.full((idx - len(self.cells) + 1,), Symbol.BLANK.value, dtype=np.int8)
            self.cells = np.concatenate((self.cells, suffix))

    def read(self, pos):
        self.ensure(pos)
        return Symbol(int(self.cells[pos - self.offset]))

    def write(self, pos, symbol):
        self.ensure(pos)
        self.cells[pos - self.offset] = symbol.value

    def window(self, center, width, head=None):
        """Return [(position, Symbol, is_head)] for `width` cells around `center`."""
        if head is None:
            head = center
        start = center - width // 2
        cells = []
        for pos in range(start, start + width):
            cells.append((pos, self.read(pos), pos == head))
        return cells

    def as_string(self, start, stop):
        return "".join(self.read(pos).display for pos in range(start, stop + 1))
