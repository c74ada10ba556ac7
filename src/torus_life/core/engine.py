"""Conway's Game of Life engine with per-generation change tracking."""

import logging
from typing import Iterator, List, Tuple

import numpy as np

from .cell import Cell
from .grid import Grid
from .seeding import SeedFn, modulo_seed

logger = logging.getLogger(__name__)

ChangedCell = Tuple[int, int, Cell]

SEEDED = "seeded"
STEPPED = "stepped"


class GridEngine:
    """Game of Life simulation engine on a fixed-size toroidal grid.

    Implements the classic rules, applied to every cell simultaneously:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Every generation the engine records which cells changed so a renderer
    can redraw only those. The record is replaced by each ``step()``; it
    never accumulates across generations.
    """

    def __init__(self, width: int, height: int, seed_fn: SeedFn = modulo_seed) -> None:
        """Initialize the engine with a freshly seeded grid.

        Args:
            width: Number of columns, must be positive
            height: Number of rows, must be positive
            seed_fn: Maps each cell's linear index to its initial state

        Raises:
            ValueError: If either dimension is not a positive integer
        """
        self._grid = Grid.seeded(width, height, seed_fn)
        self._generation = 0
        self._state = SEEDED

        # The first render draws the seed without a prior step
        self._changed_cells: List[ChangedCell] = [
            (column, row, Cell.ALIVE) for column, row in self._grid.live_cells()
        ]

        logger.debug(
            "Created %dx%d engine with %d initially live cells", width, height, len(self._changed_cells)
        )

    @property
    def grid(self) -> Grid:
        """The underlying cell grid."""
        return self._grid

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._grid.width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._grid.height

    @property
    def generation(self) -> int:
        """Number of generations advanced since construction."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._grid.population

    @property
    def state(self) -> str:
        """``"seeded"`` until the first step, ``"stepped"`` afterwards."""
        return self._state

    @property
    def cells(self) -> np.ndarray:
        """Copy of the flat row-major cell array."""
        return self._grid.cells.copy()

    def cell_at(self, row: int, column: int) -> Cell:
        """Get the state of a cell.

        Raises:
            IndexError: If the coordinates are outside the grid
        """
        return self._grid.cell_at(row, column)

    def live_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield ``(column, row)`` of every living cell in row-major order."""
        return self._grid.live_cells()

    def live_neighbor_count(self, row: int, column: int) -> int:
        """Count living neighbors of a cell, wrapping at the grid edges.

        Raises:
            IndexError: If the coordinates are outside the grid
        """
        return self._grid.neighbor_count(row, column)

    def step(self) -> None:
        """Advance the simulation by one generation."""
        current = self._grid.cells
        neighbor_counts = self._grid.count_all_neighbors()

        # Next generation goes into its own buffer; current stays untouched
        next_cells = current.copy()

        # Birth: dead cell with exactly 3 neighbors
        birth_mask = (current == Cell.DEAD) & (neighbor_counts == 3)

        # Death: live cell with < 2 or > 3 neighbors
        death_mask = (current == Cell.ALIVE) & ((neighbor_counts < 2) | (neighbor_counts > 3))

        next_cells[birth_mask] = Cell.ALIVE
        next_cells[death_mask] = Cell.DEAD

        # flatnonzero walks the row-major array, so changes come out row by row
        width = self._grid.width
        changed = []
        for index in np.flatnonzero(next_cells != current):
            row, column = divmod(int(index), width)
            changed.append((column, row, Cell(int(next_cells[index]))))

        self._grid.swap(next_cells)
        self._changed_cells = changed
        self._generation += 1
        self._state = STEPPED

        logger.debug("Generation %d: %d cells changed", self._generation, len(changed))

    def changed_cells(self) -> List[ChangedCell]:
        """Cells changed by the most recent step, as (column, row, new_state).

        Before the first step this lists every initially live cell.
        """
        return list(self._changed_cells)

    def clear_changed_cells(self) -> None:
        """Empty the change record. Safe to call repeatedly."""
        self._changed_cells = []

    def __str__(self) -> str:
        return str(self._grid)
