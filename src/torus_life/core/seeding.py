"""Seeding strategies deciding each cell's initial state from its linear index."""

from typing import Callable, Optional

import numpy as np

from .patterns import Pattern

SeedFn = Callable[[int], bool]


def modulo_seed(index: int) -> bool:
    """Deterministic pseudo-random-looking pattern.

    A cell starts alive when its linear index is divisible by 2 or by 7.
    """
    return index % 2 == 0 or index % 7 == 0


def empty_seed(index: int) -> bool:
    """Every cell starts dead."""
    return False


def pattern_seed(
    pattern: Pattern,
    width: int,
    height: int,
    column_offset: int = 0,
    row_offset: int = 0,
) -> SeedFn:
    """Seed from a pattern placed on a ``width`` x ``height`` torus.

    Pattern cells falling past an edge wrap to the opposite edge.

    Args:
        pattern: Pattern whose cells are (column, row) pairs
        width: Grid width the seed will be used with
        height: Grid height the seed will be used with
        column_offset: Horizontal offset
        row_offset: Vertical offset

    Returns:
        Seed function for the placed pattern
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

    live = frozenset(
        ((row + row_offset) % height) * width + (column + column_offset) % width
        for column, row in pattern.cells
    )

    def seed(index: int) -> bool:
        return index in live

    return seed


def random_seed(probability: float = 0.5, seed: Optional[int] = None) -> SeedFn:
    """Randomly populate cells with the given density.

    Draws are produced in index order from one generator and cached, so a
    given index always gets the same state regardless of query order, and
    two seeds built with the same ``seed`` agree cell for cell.

    Args:
        probability: Chance each cell will be alive (0.0 to 1.0)
        seed: Seed for ``numpy.random.default_rng``; None for fresh entropy

    Returns:
        Seed function
    """
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"Probability must be between 0 and 1, got {probability}")

    rng = np.random.default_rng(seed)
    draws = np.empty(0, dtype=np.float64)

    def seed_fn(index: int) -> bool:
        nonlocal draws
        if index < 0:
            raise IndexError(f"Negative cell index {index}")
        if index >= len(draws):
            draws = np.concatenate([draws, rng.random(max(index + 1 - len(draws), 1024))])
        return bool(draws[index] < probability)

    return seed_fn
