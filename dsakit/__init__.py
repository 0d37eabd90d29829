"""Classic algorithms and data structures, with Minesweeper and two games of chance."""

__version__ = "0.1.0"