"""HP chess: chess rules with a hit-point combat layer."""

__version__ = "0.1.0"
