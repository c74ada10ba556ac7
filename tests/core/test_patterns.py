"""Tests for the Pattern and PatternLibrary classes."""

import pytest

from torus_life.core.grid import Grid
from torus_life.core.patterns import Pattern, PatternLibrary


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        cells = [(0, 0), (1, 0), (2, 0)]
        pattern = Pattern("Blinker", cells, "Period-2 oscillator")

        assert pattern.name == "Blinker"
        assert pattern.cells == cells
        assert pattern.description == "Period-2 oscillator"
        assert pattern.metadata == {}

    def test_initialization_with_metadata(self):
        """Test pattern initialization with metadata."""
        metadata = {"period": 2, "type": "oscillator"}
        pattern = Pattern("Test", [(0, 0), (1, 1)], metadata=metadata)

        assert pattern.metadata == metadata

    def test_bounding_box_and_size(self):
        """Test bounding box calculation."""
        pattern = Pattern("Test", [(2, 5), (4, 3), (3, 4)])

        assert pattern.get_bounding_box() == (2, 3, 4, 5)
        assert pattern.get_size() == (3, 3)

    def test_empty_pattern(self):
        """Test bounding box of an empty pattern."""
        pattern = Pattern("Empty", [])

        assert pattern.get_bounding_box() == (0, 0, 0, 0)
        assert pattern.get_size() == (1, 1)
        assert pattern.normalize().cells == []

    def test_normalize(self):
        """Test pattern normalization."""
        pattern = Pattern("Test", [(5, 3), (6, 3), (7, 4)], "desc", {"k": 1})
        normalized = pattern.normalize()

        assert normalized.cells == [(0, 0), (1, 0), (2, 1)]
        assert normalized.description == "desc"
        assert normalized.metadata == {"k": 1}
        assert normalized.metadata is not pattern.metadata

    def test_from_grid(self):
        """Test creating a pattern from a grid."""
        grid = Grid.seeded(5, 4, lambda i: i in (1, 7, 18))
        pattern = Pattern.from_grid(grid, "Captured", "From grid")

        assert pattern.name == "Captured"
        assert pattern.cells == [(1, 0), (2, 1), (3, 3)]
        assert pattern.metadata["source_grid_size"] == (5, 4)
        assert pattern.metadata["population"] == 3


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtin_patterns(self):
        """Test that built-in patterns are loaded."""
        library = PatternLibrary()
        names = library.list_patterns()

        for name in ["Block", "Beehive", "Blinker", "Toad", "Glider", "R-pentomino"]:
            assert name in names
            assert name in library
        assert len(library) == len(names)

    def test_get_pattern(self):
        """Test pattern lookup."""
        library = PatternLibrary()

        glider = library.get_pattern("Glider")
        assert glider is not None
        assert len(glider.cells) == 5
        assert library.get_pattern("Nonexistent") is None

    def test_getitem_unknown(self):
        """Test that indexing an unknown name raises KeyError."""
        library = PatternLibrary()

        assert library["Block"].get_size() == (2, 2)
        with pytest.raises(KeyError):
            library["Nonexistent"]

    def test_add_pattern(self):
        """Test adding custom patterns."""
        library = PatternLibrary()
        library.add_pattern(Pattern("Custom", [(0, 0), (1, 1)]))

        assert library.get_pattern("Custom").cells == [(0, 0), (1, 1)]

    def test_patterns_by_category(self):
        """Test category grouping."""
        library = PatternLibrary()
        categories = library.get_patterns_by_category()

        assert "Block" in categories["Still Life"]
        assert "Blinker" in categories["Oscillators"]
        assert "Glider" in categories["Spaceships"]
        assert "Custom" not in categories

        library.add_pattern(Pattern("Mine", [(0, 0)]))
        assert library.get_patterns_by_category()["Custom"] == ["Mine"]
