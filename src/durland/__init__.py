"""Durland: a turn-based survival simulation."""

__version__ = "0.2.0"
