"""Classic online-judge exercises as small functions over plain Python values."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "text", "sequences", "grids", "puzzles"]