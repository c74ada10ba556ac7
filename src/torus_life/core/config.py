"""Engine configuration."""

from dataclasses import dataclass
from typing import Optional

from .engine import GridEngine
from .patterns import PatternLibrary
from .seeding import SeedFn, empty_seed, modulo_seed, pattern_seed, random_seed

SEED_KINDS = ("modulo", "empty", "pattern", "random")


@dataclass
class EngineConfig:
    """Configuration for building a GridEngine."""
    width: int = 256
    height: int = 256
    seed: str = "modulo"
    pattern: Optional[str] = None
    pattern_x: int = 0
    pattern_y: int = 0
    population_rate: float = 0.5
    random_seed: Optional[int] = None

    def validate(self) -> None:
        """Check the configuration.

        Raises:
            ValueError: If any setting is out of range or inconsistent
        """
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        if self.seed not in SEED_KINDS:
            raise ValueError(f"Unknown seed '{self.seed}'. Available: {', '.join(SEED_KINDS)}")
        if self.seed == "pattern" and not self.pattern:
            raise ValueError("seed 'pattern' requires a pattern name")
        if not 0.0 <= self.population_rate <= 1.0:
            raise ValueError(f"population_rate must be between 0 and 1, got {self.population_rate}")


def make_seed(config: EngineConfig, library: Optional[PatternLibrary] = None) -> SeedFn:
    """Resolve the seeding strategy named by ``config``.

    Raises:
        KeyError: If the configured pattern is not in the library
    """
    if config.seed == "empty":
        return empty_seed
    if config.seed == "random":
        return random_seed(config.population_rate, config.random_seed)
    if config.seed == "pattern":
        library = library or PatternLibrary()
        return pattern_seed(library[config.pattern], config.width, config.height, config.pattern_x, config.pattern_y)
    return modulo_seed


def build_engine(config: EngineConfig, library: Optional[PatternLibrary] = None) -> GridEngine:
    """Validate ``config`` and construct a seeded engine from it."""
    config.validate()
    return GridEngine(config.width, config.height, make_seed(config, library))
