"""Solutions to classic algorithm, puzzle and contest problems."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "trees", "grids", "sequences", "contests"]