"""T-Rex runner: the offline dinosaur game."""

__version__ = "0.1.0"
