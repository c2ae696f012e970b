"""
Pivot reversal strategy indicator.

Tracks the last confirmed pivot high and pivot low prices and emits exit
conditions relative to them.

Classes:
    PivotReversalStrategy: Configuration (left, right).
    PivotReversalStrategyInstance: Running state.
"""

from dataclasses import dataclass
from typing import Tuple

from ..base import IndicatorConfig, IndicatorInstance
from ..methods import PivotHighSignal, PivotLowSignal
from ..types import Action, Candle, IndicatorResult
from ..window import Window


@dataclass
class PivotReversalStrategy(IndicatorConfig):
    """
    Pivot reversal strategy.

    Logic per candle:
        long exit  = new pivot high confirmed OR high <= last pivot high price
        short exit = new pivot low confirmed  OR low  >= last pivot low price
        result     = short exit - long exit       (-1, 0 or +1)

    Pivot prices start at 0.0, so until the first pivot low is confirmed the
    short-exit condition holds on every candle with a non-negative low.

    Attributes:
        left (int): Candles before a pivot. Must be >= 1.
        right (int): Candles after a pivot. Must be >= 1.
    """
    left: int = 4
    right: int = 2

    def validate(self) -> bool:
        return self.left >= 1 and self.right >= 1

    def size(self) -> Tuple[int, int]:
        return 1, 1

    def _create_instance(self, candle: Candle) -> "PivotReversalStrategyInstance":
        return PivotReversalStrategyInstance(self, candle)


class PivotReversalStrategyInstance(IndicatorInstance):
    """Running state of the pivot reversal strategy."""

    indicator_name = "PivotReversalStrategy"

    def __init__(self, config: PivotReversalStrategy, candle: Candle):
        super().__init__(config)
        self._ph = PivotHighSignal(config.left, config.right, candle.high)
        self._pl = PivotLowSignal(config.left, config.right, candle.low)
        # evicted element is the candle `right` steps back, i.e. the pivot candidate
        self._window: Window[Candle] = Window(config.right, candle)
        self._hprice = 0.0
        self._lprice = 0.0

    def _next(self, candle: Candle) -> IndicatorResult:
        high, low = candle.high, candle.low
        past_candle = self._window.push(candle)

        swh = self._ph.next(high)
        swl = self._pl.next(low)

        if swh.analog() > 0:
            self._hprice = past_candle.high
        long_exit = swh.analog() > 0 or high <= self._hprice

        if swl.analog() > 0:
            self._lprice = past_candle.low
        short_exit = swl.analog() > 0 or low >= self._lprice

        r = int(short_exit) - int(long_exit)

        return IndicatorResult.new([r], [Action.from_value(r)])
