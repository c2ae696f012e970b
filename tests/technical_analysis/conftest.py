"""Shared fixtures for technical analysis tests."""

import numpy as np
import pandas as pd
import pytest

from candlestream.technical_analysis import Bar


def create_test_data(num_bars: int, seed: int = 42) -> pd.DataFrame:
    """Create synthetic OHLC data as a random walk."""
    rng = np.random.default_rng(seed)
    base_price = 100

    returns = rng.normal(0, 0.02, num_bars)
    closes = base_price * np.exp(np.cumsum(returns))

    return pd.DataFrame({
        'date': pd.date_range('2025-01-01', periods=num_bars, freq='D'),
        'open': closes * (1 + rng.uniform(-0.01, 0.01, num_bars)),
        'high': closes * (1 + rng.uniform(0.01, 0.03, num_bars)),
        'low': closes * (1 + rng.uniform(-0.03, -0.01, num_bars)),
        'close': closes,
    }).set_index('date')


@pytest.fixture
def ohlc_frame() -> pd.DataFrame:
    """200 bars of deterministic OHLC data."""
    return create_test_data(200)


@pytest.fixture
def closes(ohlc_frame) -> list:
    return ohlc_frame['close'].tolist()


@pytest.fixture
def candles(ohlc_frame) -> list:
    return [
        Bar(row.open, row.high, row.low, row.close)
        for row in ohlc_frame.itertuples(index=False)
    ]


@pytest.fixture
def make_bar():
    """Build a Bar from a close, with high/low defaulting to the close."""
    def _make(close: float, high: float = None, low: float = None) -> Bar:
        high = close if high is None else high
        low = close if low is None else low
        return Bar(close, high, low, close)
    return _make


@pytest.fixture
def frame_factory():
    """Expose create_test_data for tests that need several frames."""
    return create_test_data
