"""Common Conway's Game of Life patterns."""

from typing import Any, Dict, List, Optional, Tuple

from .grid import Grid


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(
        self,
        name: str,
        cells: List[Tuple[int, int]],
        description: str = "",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (column, row) coordinates for living cells
            description: Optional description
            metadata: Optional metadata dictionary
        """
        self.name = name
        self.cells = cells
        self.description = description
        self.metadata = metadata or {}

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_column, min_row, max_column, max_row)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        columns, rows = zip(*self.cells)
        return (min(columns), min(rows), max(columns), max(rows))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height)."""
        min_col, min_row, max_col, max_row = self.get_bounding_box()
        return (max_col - min_col + 1, max_row - min_row + 1)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates normalized to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description, self.metadata.copy())

        min_col, min_row, _, _ = self.get_bounding_box()
        cells = [(column - min_col, row - min_row) for column, row in self.cells]
        return Pattern(self.name, cells, self.description, self.metadata.copy())

    @classmethod
    def from_grid(cls, grid: Grid, name: str, description: str = "") -> "Pattern":
        """Create pattern from the live cells of a grid.

        Args:
            grid: Source grid
            name: Pattern name
            description: Optional description

        Returns:
            New Pattern instance
        """
        cells = list(grid.live_cells())
        metadata = {"source_grid_size": grid.shape, "population": len(cells)}
        return cls(name, cells, description, metadata)

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells)"


class PatternLibrary:
    """In-memory collection of named patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still lifes
        self.add_pattern(Pattern("Block", [(0, 0), (1, 0), (0, 1), (1, 1)], "2x2 still life block"))
        self.add_pattern(
            Pattern("Beehive", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)], "Beehive still life")
        )
        self.add_pattern(
            Pattern("Loaf", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (3, 2), (2, 3)], "Loaf still life")
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 0), (1, 0), (2, 0)], "Period-2 oscillator"))
        self.add_pattern(
            Pattern("Toad", [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)], "Period-2 oscillator")
        )
        self.add_pattern(
            Pattern("Beacon", [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)], "Period-2 oscillator")
        )

        # Spaceships
        self.add_pattern(
            Pattern("Glider", [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)], "Smallest spaceship, period-4")
        )
        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                [(0, 0), (3, 0), (4, 1), (0, 2), (4, 2), (1, 3), (2, 3), (3, 3), (4, 3)],
                "LWSS - Period-4 spaceship",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any pattern with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name, or None if not found."""
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories: Dict[str, List[str]] = {
            "Still Life": ["Block", "Beehive", "Loaf"],
            "Oscillators": ["Blinker", "Toad", "Beacon"],
            "Spaceships": ["Glider", "Lightweight Spaceship"],
            "Methuselahs": ["R-pentomino"],
            "Custom": [],
        }

        builtin = {name for names in categories.values() for name in names}
        categories["Custom"] = [name for name in self._patterns if name not in builtin]

        return {category: names for category, names in categories.items() if names}

    def __getitem__(self, name: str) -> Pattern:
        pattern = self._patterns.get(name)
        if pattern is None:
            raise KeyError(f"Unknown pattern '{name}'. Available: {', '.join(self._patterns)}")
        return pattern

    def __contains__(self, name: object) -> bool:
        return name in self._patterns

    def __len__(self) -> int:
        return len(self._patterns)
