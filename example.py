#!/usr/bin/env python3
"""
Example usage of the torus_life package.
"""

import logging

from torus_life import EngineConfig, build_engine


def main():
    """Drive the engine the way a renderer would, printing deltas instead of drawing."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    engine = build_engine(EngineConfig(width=12, height=12, seed="pattern", pattern="Glider", pattern_x=4, pattern_y=4))

    print("Initial state:")
    print(engine)
    print(f"Initially live: {len(engine.changed_cells())}")
    engine.clear_changed_cells()
    print()

    for _ in range(8):
        engine.step()
        print(f"Generation {engine.generation}:")
        print(engine)
        for column, row, state in engine.changed_cells():
            print(f"  ({column}, {row}) -> {state.name}")
        engine.clear_changed_cells()
        print()

    print(f"Population: {engine.population}")


if __name__ == "__main__":
    main()
