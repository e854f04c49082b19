"""Dynamic-programming algorithms for sequences, strings, grids, recurrences and medians."""

__version__ = "0.1.0"
__all__ = ["grids", "median", "recurrences", "sequences", "strings"]