"""Two-player battleship game on a three-level board, played in the terminal."""

__version__ = "1.0.0"