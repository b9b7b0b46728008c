"""Terminal maze-chase game: grid model, adversaries, and tick simulation."""

__version__ = "0.1.0"
