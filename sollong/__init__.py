"""Loading and validating tile maps for a coin-collecting game, plus text, buffer and list helpers."""

__version__ = "0.1.0"