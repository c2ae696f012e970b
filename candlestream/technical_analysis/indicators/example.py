"""
Price-threshold crossover indicator.

This module is the reference implementation of the indicator protocol: a
dataclass config, an instance that owns its methods and local state, and a
fixed-shape result per candle.

Classes:
    Example: Configuration (price, period, source).
    ExampleInstance: Running state.
"""

from dataclasses import dataclass
import logging
from typing import Tuple

from ..base import IndicatorConfig, IndicatorInstance
from ..methods import Cross
from ..types import Action, Candle, IndicatorResult, Source

logger = logging.getLogger(__name__)


@dataclass
class Example(IndicatorConfig):
    """
    Signals when the candle source crosses a fixed price.

    A crossover signal persists for ``period`` candles after it is raised
    and then resets to no signal, unless a newer crossover replaces it first.

    Result layout:
        values:  [source value]
        signals: [persisted crossover signal, crossover on this candle only]

    Attributes:
        price (float): Threshold price. Must be > 0.
        period (int): Number of candles a signal persists. Must be >= 1.
        source (Source): Candle value compared against ``price``.
    """
    price: float = 2.0
    period: int = 3
    source: Source = Source.CLOSE

    def validate(self) -> bool:
        return self.price > 0 and self.period >= 1

    def size(self) -> Tuple[int, int]:
        return 1, 2

    def _create_instance(self, candle: Candle) -> "ExampleInstance":
        return ExampleInstance(self, candle)


class ExampleInstance(IndicatorInstance):
    """Running state of the Example indicator."""

    indicator_name = "Example"

    def __init__(self, config: Example, candle: Candle):
        super().__init__(config)
        self._cross = Cross((config.source.value_of(candle), config.price))
        self._last_signal = Action.NONE
        self._elapsed = 0

    def _next(self, candle: Candle) -> IndicatorResult:
        cfg = self._cfg
        value = cfg.source.value_of(candle)
        new_signal = self._cross.next((value, cfg.price))

        if new_signal:
            self._last_signal = new_signal
            self._elapsed = 0
        elif self._last_signal:
            self._elapsed += 1
            if self._elapsed > cfg.period:
                logger.debug(f"{self.name}: {self._last_signal} expired after {cfg.period} candles")
                self._last_signal = Action.NONE

        return IndicatorResult.new([value], [self._last_signal, new_signal])
