"""Tetrimino file checks and a debug report of settings for a terminal Tetris."""

__version__ = "0.1.0"