"""Utility functions for the Durland simulation."""

from durland.utils.rng import (
    RandomSource,
    ScriptedRandom,
    SeededRandom,
    check_chance,
)

__all__ = [
    "RandomSource",
    "ScriptedRandom",
    "SeededRandom",
    "check_chance",
]
