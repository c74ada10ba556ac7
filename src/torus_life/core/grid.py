"""Fixed-size toroidal grid for Conway's Game of Life."""

import logging
from typing import Callable, Iterator, Tuple

import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell

logger = logging.getLogger(__name__)


class Grid:
    """A fixed-size 2D grid whose edges wrap around (toroidal topology).

    Cells are stored in a flat row-major numpy array, so the cell at
    ``(row, column)`` lives at ``row * width + column``. Dimensions never
    change after construction.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize an all-dead grid.

        Args:
            width: Number of columns, must be positive
            height: Number of rows, must be positive

        Raises:
            ValueError: If either dimension is not a positive integer
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"Grid {name} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"Grid {name} must be positive, got {value}")

        self._width = int(width)
        self._height = int(height)
        self._cells = np.zeros(self._width * self._height, dtype=np.int8)

        # Single-threaded: evaluation is deterministic, generation by generation
        torch.set_num_threads(1)

        # Neighbor counting kernel, reused by every count_all_neighbors() call
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @classmethod
    def seeded(cls, width: int, height: int, seed_fn: Callable[[int], object]) -> "Grid":
        """Create a grid whose cells are set from their linear index.

        Args:
            width: Number of columns
            height: Number of rows
            seed_fn: Maps a linear index to a truthy (alive) or falsy (dead) value

        Returns:
            New Grid instance
        """
        grid = cls(width, height)
        size = grid.size
        grid._cells[:] = np.fromiter((1 if seed_fn(i) else 0 for i in range(size)), dtype=np.int8, count=size)
        logger.debug("Seeded %dx%d grid with %d live cells", width, height, grid.population)
        return grid

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self._width * self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self._width, self._height)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the flat row-major cell array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def index_of(self, row: int, column: int) -> int:
        """Linear index of ``(row, column)``.

        Raises:
            IndexError: If the coordinates are outside the grid
        """
        if not (0 <= row < self._height and 0 <= column < self._width):
            raise IndexError(f"Coordinates (row={row}, column={column}) out of bounds for {self._width}x{self._height} grid")
        return row * self._width + column

    def position_of(self, index: int) -> Tuple[int, int]:
        """Inverse of index_of(): ``(row, column)`` for a linear index."""
        if not 0 <= index < self.size:
            raise IndexError(f"Index {index} out of bounds for {self._width}x{self._height} grid")
        return divmod(index, self._width)

    def cell_at(self, row: int, column: int) -> Cell:
        """Get the state of a cell. Coordinates are not wrapped."""
        return Cell(int(self._cells[self.index_of(row, column)]))

    def neighbor_count(self, row: int, column: int) -> int:
        """Count living neighbors of a cell, wrapping at the edges.

        Args:
            row: Row coordinate
            column: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        self.index_of(row, column)

        count = 0
        for d_row in (-1, 0, 1):
            for d_col in (-1, 0, 1):
                if d_row == 0 and d_col == 0:
                    continue

                n_row = (row + d_row) % self._height
                n_col = (column + d_col) % self._width
                count += int(self._cells[n_row * self._width + n_col])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Returns:
            Flat row-major int8 array of neighbor counts, aligned with ``cells``
        """
        plane = torch.from_numpy(self._cells.reshape(self._height, self._width).astype(np.float32))
        padded = F.pad(plane.unsqueeze(0).unsqueeze(0), (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, self._torch_kernel)
        return neighbors[0, 0].numpy().astype(np.int8).reshape(-1)

    def swap(self, next_cells: np.ndarray) -> None:
        """Replace every cell with a fully computed next generation.

        Raises:
            ValueError: If ``next_cells`` has the wrong length
        """
        if next_cells.shape != self._cells.shape:
            raise ValueError(f"Next generation shape {next_cells.shape} doesn't match grid {self._cells.shape}")
        self._cells = next_cells.astype(np.int8, copy=False)

    def live_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield ``(column, row)`` of every living cell in row-major order."""
        for index in np.flatnonzero(self._cells):
            row, column = divmod(int(index), self._width)
            yield (column, row)

    def copy(self) -> "Grid":
        """Return an independent grid with the same cells."""
        other = Grid(self._width, self._height)
        other._cells[:] = self._cells
        return other

    def __len__(self) -> int:
        return self.size

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        rows = self._cells.reshape(self._height, self._width)
        return "\n".join("".join("*" if cell else "." for cell in row) for row in rows)
