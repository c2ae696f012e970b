"""
Technical Analysis Indicators Module

Indicator configurations and their running instances, built from the
streaming methods in ``technical_analysis.methods``.
"""

from .example import Example, ExampleInstance
from .pivot_reversal import PivotReversalStrategy, PivotReversalStrategyInstance

__all__ = [
    "Example",
    "ExampleInstance",
    "PivotReversalStrategy",
    "PivotReversalStrategyInstance",
]
