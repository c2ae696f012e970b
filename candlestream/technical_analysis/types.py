"""
Core value types shared by methods and indicators.

Classes:
    Candle: Structural protocol for anything exposing open/high/low/close.
    Bar: Minimal immutable candle for callers without their own record type.
    Source: Which candle value feeds a transform.
    Action: Ternary, magnitude-bearing trading signal.
    IndicatorResult: Fixed-shape output of one indicator step.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Protocol, Sequence, Tuple, runtime_checkable


@runtime_checkable
class Candle(Protocol):
    """
    Structural contract for OHLC bars.

    Any object with numeric ``open``, ``high``, ``low`` and ``close``
    attributes can be fed to methods and indicators without an adapter.
    """

    @property
    def open(self) -> float: ...

    @property
    def high(self) -> float: ...

    @property
    def low(self) -> float: ...

    @property
    def close(self) -> float: ...


@dataclass(frozen=True)
class Bar:
    """Immutable OHLC bar."""
    open: float
    high: float
    low: float
    close: float


class Source(Enum):
    """
    Candle value selector.

    Derived sources follow the usual charting definitions:
        hl2   = (high + low) / 2
        tp    = (high + low + close) / 3
        ohlc4 = (open + high + low + close) / 4
    """
    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    CLOSE = "close"
    HL2 = "hl2"
    TP = "tp"
    OHLC4 = "ohlc4"

    def value_of(self, candle: Candle) -> float:
        """Extract this source's value from a candle."""
        if self is Source.OPEN:
            return candle.open
        if self is Source.HIGH:
            return candle.high
        if self is Source.LOW:
            return candle.low
        if self is Source.CLOSE:
            return candle.close
        if self is Source.HL2:
            return (candle.high + candle.low) / 2.0
        if self is Source.TP:
            return (candle.high + candle.low + candle.close) / 3.0
        return (candle.open + candle.high + candle.low + candle.close) / 4.0

    @classmethod
    def parse(cls, text: str) -> "Source":
        """
        Parse a source name case-insensitively.

        Raises:
            ValueError: If the name is not a known source.
        """
        try:
            return cls(text.strip().lower())
        except ValueError:
            valid = [s.value for s in cls]
            raise ValueError(f"unknown source '{text}', expected one of {valid}") from None


@dataclass(frozen=True)
class Action:
    """
    Trading signal with direction and strength.

    Stored as a single signed ratio in [-1.0, 1.0]: positive values are
    buy-like, negative values sell-like, zero means no signal. The absolute
    value is the strength.

    Conversion from an arbitrary number (``from_value``) clamps to that range,
    so any positive input of 1.0 or more is a full-strength buy. NaN maps to
    no signal.

    Example:
        >>> Action.from_value(0.5)
        Action(BUY 0.50)
        >>> Action.from_value(-3).analog()
        -1
    """
    _ratio: float = 0.0

    NONE: ClassVar["Action"]

    @classmethod
    def from_value(cls, value: float) -> "Action":
        """Derive an action from a continuous value."""
        if value is None or math.isnan(value) or value == 0:
            return cls.NONE
        return cls(max(-1.0, min(1.0, float(value))))

    @classmethod
    def buy(cls, strength: float = 1.0) -> "Action":
        """Buy-like action of the given strength in (0, 1]."""
        if not 0 < strength <= 1:
            raise ValueError(f"strength must be in (0, 1], got {strength}")
        return cls(float(strength))

    @classmethod
    def sell(cls, strength: float = 1.0) -> "Action":
        """Sell-like action of the given strength in (0, 1]."""
        if not 0 < strength <= 1:
            raise ValueError(f"strength must be in (0, 1], got {strength}")
        return cls(-float(strength))

    @property
    def is_none(self) -> bool:
        return self._ratio == 0.0

    @property
    def is_buy(self) -> bool:
        return self._ratio > 0.0

    @property
    def is_sell(self) -> bool:
        return self._ratio < 0.0

    @property
    def strength(self) -> float:
        return abs(self._ratio)

    def analog(self) -> int:
        """Direction only: +1, -1 or 0."""
        if self._ratio > 0:
            return 1
        if self._ratio < 0:
            return -1
        return 0

    def ratio(self) -> float:
        """Signed strength in [-1.0, 1.0]."""
        return self._ratio

    def __bool__(self) -> bool:
        return not self.is_none

    def __repr__(self) -> str:
        if self.is_buy:
            return f"Action(BUY {self.strength:.2f})"
        if self.is_sell:
            return f"Action(SELL {self.strength:.2f})"
        return "Action(NONE)"


Action.NONE = Action(0.0)


@dataclass(frozen=True)
class IndicatorResult:
    """
    Output of a single indicator step.

    Attributes:
        values: Raw numeric outputs.
        signals: Discrete actions.
    """
    values: Tuple[float, ...]
    signals: Tuple[Action, ...]

    @classmethod
    def new(cls, values: Sequence[float], signals: Sequence[Action]) -> "IndicatorResult":
        return cls(tuple(float(v) for v in values), tuple(signals))

    @property
    def size(self) -> Tuple[int, int]:
        """(raw value count, signal count) of this result."""
        return len(self.values), len(self.signals)

    def value(self, index: int) -> float:
        return self.values[index]

    def signal(self, index: int) -> Action:
        return self.signals[index]
