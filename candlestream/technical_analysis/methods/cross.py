"""
Crossover detection between two paired series.

Each step takes a pair ``(a, b)`` and looks at the sign of ``a - b``. A cross
is the flip of that sign across zero; touching zero is not a cross by
itself.

Classes:
    CrossAbove: ``a`` crosses ``b`` upwards.
    CrossUnder: ``a`` crosses ``b`` downwards.
    Cross: Both directions in one method.
"""

from typing import Optional, Tuple

from ..base import Method
from ..types import Action

Pair = Tuple[float, float]


class CrossAbove(Method[Pair, Action]):
    """
    Signals ``Action.buy()`` when ``a - b`` goes from <= 0 to > 0.

    Without a seed pair the first step can never signal.
    """

    def __init__(self, value: Optional[Pair] = None):
        self._last_delta: Optional[float] = None if value is None else value[0] - value[1]

    def next(self, value: Pair) -> Action:
        delta = value[0] - value[1]
        crossed = self._last_delta is not None and self._last_delta <= 0 < delta
        self._last_delta = delta
        return Action.buy() if crossed else Action.NONE


class CrossUnder(Method[Pair, Action]):
    """
    Signals ``Action.sell()`` when ``a - b`` goes from >= 0 to < 0.

    Without a seed pair the first step can never signal.
    """

    def __init__(self, value: Optional[Pair] = None):
        self._last_delta: Optional[float] = None if value is None else value[0] - value[1]

    def next(self, value: Pair) -> Action:
        delta = value[0] - value[1]
        crossed = self._last_delta is not None and self._last_delta >= 0 > delta
        self._last_delta = delta
        return Action.sell() if crossed else Action.NONE


class Cross(Method[Pair, Action]):
    """
    Detects crosses in both directions.

    Example:
        >>> cross = Cross()
        >>> cross.over([(1, 2), (3, 2), (1, 2)])
        [Action(NONE), Action(BUY 1.00), Action(SELL 1.00)]
    """

    def __init__(self, value: Optional[Pair] = None):
        self._up = CrossAbove(value)
        self._down = CrossUnder(value)

    def next(self, value: Pair) -> Action:
        up = self._up.next(value)
        down = self._down.next(value)
        # at most one of the two can fire on a step
        return up if up else down
