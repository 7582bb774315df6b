"""Small algorithm routines on arrays, strings, numbers, grids and graphs."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "arrays", "combinatorics", "graphs", "grids", "squares", "strings"]