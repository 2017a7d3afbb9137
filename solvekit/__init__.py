"""Algorithm routines for arrays, sorting, linked lists, trees, range queries, strings, searching and grids."""

__version__ = "0.1.0"
__all__ = ["arrays", "grids", "linked", "ranges", "searching", "sorting", "strings"]