"""Search-based solver for the men-in-a-trench sliding puzzle, with an interactive menu."""

__version__ = "0.1.0"