"""Core Game of Life engine."""

from .cell import Cell
from .grid import Grid
from .engine import GridEngine
from .patterns import Pattern, PatternLibrary
from .seeding import modulo_seed, empty_seed, pattern_seed, random_seed
from .config import EngineConfig, build_engine

__all__ = [
    "Cell",
    "Grid",
    "GridEngine",
    "Pattern",
    "PatternLibrary",
    "modulo_seed",
    "empty_seed",
    "pattern_seed",
    "random_seed",
    "EngineConfig",
    "build_engine",
]
