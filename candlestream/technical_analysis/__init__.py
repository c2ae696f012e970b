"""
Candlestream Technical Analysis Library

A streaming technical-analysis library: every computation advances one
candle at a time, keeps only a fixed window of history, and never looks
ahead.

This library provides:
- Fixed-capacity Window buffer that every windowed method is built on
- Method contract for seeded, single-pass streaming transforms
- Highest / Lowest / HighestLowestDelta, crossover and pivot methods
- Config -> instance -> result protocol for multi-output indicators
- Factory pattern for creating indicator configs by name
- pandas batch driver and per-symbol parallel runner

Example Usage:
    import candlestream.technical_analysis as ta

    # Methods
    highest = ta.Highest(14, first_close)
    value = highest.next(close)

    # Indicators
    cfg = ta.create('example', price=100.0, period=3)
    instance = cfg.init(first_candle)
    result = instance.step(candle)
    result.values, result.signals

    # Utility functions
    indicators = ta.list_indicators()
    info = ta.describe('pivot_reversal_strategy')
"""

__version__ = "1.0.0"
__author__ = "Candlestream Development Team"

# Public API exports
from .types import Candle, Bar, Source, Action, IndicatorResult
from .window import Window
from .base import Method, IndicatorConfig, IndicatorInstance
from .exceptions import (
    IndicatorError,
    InvalidParameterError,
    UnknownParameterError,
    MissingInputError,
    ResultShapeError,
    IndicatorNotFoundError
)
from .methods import (
    Highest, Lowest, HighestLowestDelta,
    Cross, CrossAbove, CrossUnder,
    PivotHighSignal, PivotLowSignal
)
from .indicators import (
    Example, ExampleInstance,
    PivotReversalStrategy, PivotReversalStrategyInstance
)
from .factory import (
    create,
    register,
    list_indicators,
    describe
)
from .validation import validate_period
from .batch import run_frame, run_symbols

__all__ = [
    # Core types
    "Candle",
    "Bar",
    "Source",
    "Action",
    "IndicatorResult",
    "Window",

    # Base classes
    "Method",
    "IndicatorConfig",
    "IndicatorInstance",

    # Methods
    "Highest",
    "Lowest",
    "HighestLowestDelta",
    "Cross",
    "CrossAbove",
    "CrossUnder",
    "PivotHighSignal",
    "PivotLowSignal",

    # Indicators
    "Example",
    "ExampleInstance",
    "PivotReversalStrategy",
    "PivotReversalStrategyInstance",

    # Factory functions
    "create",
    "register",
    "list_indicators",
    "describe",

    # Validation utilities
    "validate_period",

    # Batch drivers
    "run_frame",
    "run_symbols",

    # Exceptions
    "IndicatorError",
    "InvalidParameterError",
    "UnknownParameterError",
    "MissingInputError",
    "ResultShapeError",
    "IndicatorNotFoundError",

    # Metadata
    "__version__",
    "__author__",
]
