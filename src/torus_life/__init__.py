"""Conway's Game of Life on a fixed-size toroidal grid with change tracking."""

__version__ = "0.1.0"

from .core.cell import Cell
from .core.grid import Grid
from .core.engine import GridEngine
from .core.patterns import Pattern, PatternLibrary
from .core.config import EngineConfig, build_engine

__all__ = ["Cell", "Grid", "GridEngine", "Pattern", "PatternLibrary", "EngineConfig", "build_engine"]
