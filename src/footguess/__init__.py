"""Daily football-player guessing game."""

__version__ = "0.1.0"
