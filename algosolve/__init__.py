"""Solutions to classic algorithm problems on arrays, strings, linked lists, matrices and numbers."""

__version__ = "0.1.0"