"""Input parsing, tic-tac-toe rules, a saved to-do list and image editing operations."""

__version__ = "0.1.0"