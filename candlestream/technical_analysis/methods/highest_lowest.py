"""
Windowed extremum methods.

This module implements methods that track the highest and lowest values over
the last ``length`` inputs.

Classes:
    Highest: Rolling maximum.
    Lowest: Rolling minimum.
    HighestLowestDelta: Rolling maximum minus rolling minimum.

Performance:
    A new input that extends the current extremum is adopted in O(1).
    Otherwise the whole window is rescanned, because the evicted value may
    have been the extremum. On a non-monotonic series the cost therefore
    approaches O(length) per step.
"""

from ..base import Method
from ..validation import validate_period
from ..window import Window


class Highest(Method[float, float]):
    """
    Highest value over the last ``length`` inputs.

    The window is seeded with the construction value, so before ``length``
    real inputs have arrived the seed still takes part in the maximum.

    Example:
        >>> values = [1.0, 2.0, 3.0, 2.0, 1.0, 0.5, 2.0, 3.0]
        >>> Highest(3, values[0]).over(values)
        [1.0, 2.0, 3.0, 3.0, 3.0, 2.0, 2.0, 3.0]
    """

    def __init__(self, length: int, value: float):
        validate_period(length, "length", "Highest")
        self.length = length
        self._window: Window[float] = Window(length, value)
        self._value = value

    def next(self, value: float) -> float:
        self._window.push(value)

        if value >= self._value:
            self._value = value
        else:
            self._value = max(self._window)

        return self._value

    def __repr__(self) -> str:
        return f"Highest(length={self.length}, value={self._value})"


class Lowest(Method[float, float]):
    """
    Lowest value over the last ``length`` inputs.

    Example:
        >>> values = [1.0, 2.0, 3.0, 2.0, 1.0, 0.5, 2.0, 3.0]
        >>> Lowest(3, values[0]).over(values)
        [1.0, 1.0, 1.0, 2.0, 1.0, 0.5, 0.5, 0.5]
    """

    def __init__(self, length: int, value: float):
        validate_period(length, "length", "Lowest")
        self.length = length
        self._window: Window[float] = Window(length, value)
        self._value = value

    def next(self, value: float) -> float:
        self._window.push(value)

        if value <= self._value:
            self._value = value
        else:
            self._value = min(self._window)

        return self._value

    def __repr__(self) -> str:
        return f"Lowest(length={self.length}, value={self._value})"


class HighestLowestDelta(Method[float, float]):
    """
    Difference between the highest and lowest of the last ``length`` inputs.

    Output is always >= 0, and exactly 0 for ``length == 1``.
    """

    def __init__(self, length: int, value: float):
        validate_period(length, "length", "HighestLowestDelta")
        self.length = length
        self._highest = Highest(length, value)
        self._lowest = Lowest(length, value)

    def next(self, value: float) -> float:
        return self._highest.next(value) - self._lowest.next(value)

    def __repr__(self) -> str:
        return f"HighestLowestDelta(length={self.length})"
