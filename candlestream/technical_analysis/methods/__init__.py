"""
Streaming Methods Module

Single-input, single-output stateful transforms that indicators are built
from. Every method is seeded at construction and advanced with ``next``.
"""

from .highest_lowest import Highest, Lowest, HighestLowestDelta
from .cross import Cross, CrossAbove, CrossUnder
from .pivot import PivotHighSignal, PivotLowSignal

__all__ = [
    # Windowed extremum
    "Highest",
    "Lowest",
    "HighestLowestDelta",

    # Crossover
    "Cross",
    "CrossAbove",
    "CrossUnder",

    # Pivots
    "PivotHighSignal",
    "PivotLowSignal",
]
