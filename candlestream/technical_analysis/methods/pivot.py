"""
Pivot (swing high / swing low) detection.

A pivot high is a value strictly greater than the ``left`` values before it
and the ``right`` values after it; a pivot low is the mirror image. Since
the ``right`` values have to arrive first, a pivot at step ``i`` is reported
at step ``i + right``. The delay is structural.

Both detectors return ``Action.buy()`` on the step a pivot is confirmed and
``Action.NONE`` otherwise, so ``analog() > 0`` means "pivot confirmed".
"""

from abc import abstractmethod

from ..base import Method
from ..types import Action
from ..validation import validate_period
from ..window import Window


class _PivotSignal(Method[float, Action]):
    """Shared window handling for the pivot detectors."""

    def __init__(self, left: int, right: int, value: float):
        name = self.__class__.__name__
        validate_period(left, "left", name)
        validate_period(right, "right", name)

        self.left = left
        self.right = right
        # oldest `left` values, then the candidate, then `right` values
        self._window: Window[float] = Window(left + right + 1, value)

    @abstractmethod
    def _is_pivot(self, candidate: float, other: float) -> bool:
        """True if `candidate` beats `other` for this pivot kind."""

    def next(self, value: float) -> Action:
        self._window.push(value)

        candidate = self._window[self.left]
        for i, other in enumerate(self._window):
            if i != self.left and not self._is_pivot(candidate, other):
                return Action.NONE

        return Action.buy()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(left={self.left}, right={self.right})"


class PivotHighSignal(_PivotSignal):
    """
    Confirms local maxima.

    Example:
        >>> PivotHighSignal(2, 2, 1.0).over([1.0, 2.0, 5.0, 2.0, 1.0])
        [Action(NONE), Action(NONE), Action(NONE), Action(NONE), Action(BUY 1.00)]
    """

    def _is_pivot(self, candidate: float, other: float) -> bool:
        return candidate > other


class PivotLowSignal(_PivotSignal):
    """Confirms local minima."""

    def _is_pivot(self, candidate: float, other: float) -> bool:
        return candidate < other
