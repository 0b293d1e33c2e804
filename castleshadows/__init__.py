"""Castle of Shadows: side-scrolling game rules, pygame screens and the game command."""

__version__ = "0.1.0"