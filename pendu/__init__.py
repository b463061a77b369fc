"""Hangman word-guessing game with a Tk interface and reusable game logic."""

__version__ = "1.0.0"
__all__ = ["__version__"]