"""A falling-blocks puzzle game for the terminal, with its board rules, rendering and high scores."""

__version__ = "1.0.0"