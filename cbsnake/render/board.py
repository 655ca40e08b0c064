"""
Cell sinks for Checkbox Snake.

The engine never draws anything itself. It only switches grid cells on and
off through an object with set/clear/clear_all, so any front-end that can
toggle a cell can display the game.
"""

from typing import Protocol

import numpy as np


class CellSink(Protocol):
    def set(self, index: int) -> None: ...
    def clear(self, index: int) -> None: ...
    def clear_all(self) -> None: ...


class CheckboxBoard:
    """Headless board of checkboxes backed by a numpy bool array"""

    def __init__(self, grid_size):
        self.grid_size = grid_size
        self.cells = np.zeros(grid_size * grid_size, dtype=np.bool_)

    def _in_range(self, index):
        return 0 <= index < self.cells.size

    def set(self, index):
        if self._in_range(index):
            self.cells[index] = True

    def clear(self, index):
        if self._in_range(index):
            self.cells[index] = False

    def clear_all(self):
        self.cells[:] = False

    def is_checked(self, index):
        return self._in_range(index) and bool(self.cells[index])

    def checked_indices(self):
        """Sorted list of all checked cell indices"""
        return np.flatnonzero(self.cells).tolist()

    def count(self):
        return int(np.count_nonzero(self.cells))

    def as_grid(self):
        """Rows x columns view of the board (shares memory with `cells`)"""
        return self.cells.reshape(self.grid_size, self.grid_size)
