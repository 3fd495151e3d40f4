"""Odds board: normalize bundled sports-betting odds into display tables."""

__version__ = "0.1.0"
