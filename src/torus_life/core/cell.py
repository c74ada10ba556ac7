"""Cell state for the Game of Life."""

from enum import IntEnum


class Cell(IntEnum):
    """Two-valued cell state.

    An ``IntEnum`` so live neighbors can be summed directly.
    """

    DEAD = 0
    ALIVE = 1
