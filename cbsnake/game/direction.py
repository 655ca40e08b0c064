"""
Directions and grid index helpers for Checkbox Snake.

The board is a flat row-major array, so a direction is just an index delta
that depends on the row width.
"""

from enum import Enum


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def delta(self, width):
        """Index delta for one step in this direction on a grid of the given width"""
        dx, dy = self.value
        return dx + dy * width

    @property
    def opposite(self):
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class DirectionalInput(Enum):
    """Discrete input events understood by the engine"""
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'
    PAUSE = 'pause'

    @property
    def direction(self):
        # None for PAUSE
        return _INPUT_DIRECTIONS.get(self)


_INPUT_DIRECTIONS = {
    DirectionalInput.UP: Direction.UP,
    DirectionalInput.DOWN: Direction.DOWN,
    DirectionalInput.LEFT: Direction.LEFT,
    DirectionalInput.RIGHT: Direction.RIGHT,
}


def build_direction_table(width):
    """Map every direction to its index delta for a grid of the given width"""
    return {direction: direction.delta(width) for direction in Direction}


def wrap_index(index, direction, width):
    """Wrap an index that just stepped in `direction` back onto the board.

    `index` is the raw value after adding the delta. Leaving through the top
    or bottom shifts by a whole board, leaving through a side shifts by one
    row width.
    """
    cell_count = width * width

    if direction == Direction.UP:
        if index < 0:
            index += cell_count
    elif direction == Direction.DOWN:
        if index >= cell_count:
            index -= cell_count
    elif direction == Direction.RIGHT:
        # Stepped from the last column into column 0 of the next row
        if index % width == 0:
            index -= width
    elif direction == Direction.LEFT:
        # Stepped from column 0 into the last column of the previous row (or to -1)
        if index % width == width - 1:
            index += width

    return index


def row_col(index, width):
    """Return (row, col) for a flat grid index"""
    return divmod(index, width)
