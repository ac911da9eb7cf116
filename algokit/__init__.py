"""Classic algorithm exercises: linked lists, stacks, searching, sorting, strings and dynamic programming."""

__version__ = "0.1.0"