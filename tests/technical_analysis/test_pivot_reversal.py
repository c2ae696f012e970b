"""Tests for the PivotReversalStrategy indicator."""

import pytest

from candlestream.technical_analysis import (
    Action, Bar, InvalidParameterError, PivotReversalStrategy, UnknownParameterError
)


def hl(high, low):
    return Bar(open=low, high=high, low=low, close=high)


class TestConfig:

    def test_defaults(self):
        cfg = PivotReversalStrategy.default()
        assert (cfg.left, cfg.right) == (4, 2)
        assert cfg.size() == (1, 1)
        assert cfg.validate()

    @pytest.mark.parametrize("left,right", [(0, 2), (2, 0), (-1, 3)])
    def test_validate_rejects(self, left, right):
        cfg = PivotReversalStrategy(left=left, right=right)
        assert not cfg.validate()
        with pytest.raises(InvalidParameterError):
            cfg.init(hl(1.0, 0.5))

    def test_set(self):
        cfg = PivotReversalStrategy()
        cfg.set('left', '3')
        cfg.set('right', '5')
        assert (cfg.left, cfg.right) == (3, 5)
        with pytest.raises(InvalidParameterError):
            cfg.set('right', 'two')
        with pytest.raises(UnknownParameterError):
            cfg.set('price', '1')
        assert (cfg.left, cfg.right) == (3, 5)


class TestSignals:

    def test_hand_computed_sequence(self):
        # left=1, right=1: a pivot is confirmed one candle after it happens
        cfg = PivotReversalStrategy(left=1, right=1)
        instance = cfg.init(hl(10, 5))
        bars = [hl(10, 5), hl(12, 6), hl(11, 4), hl(13, 7), hl(9, 3)]

        results = instance.over(bars)

        # step 2 confirms the step-1 high (12); step 3 confirms the step-2 low (4);
        # step 4 confirms the step-3 high (13) and breaks below the pivot low
        assert [r.values[0] for r in results] == [1.0, 1.0, 0.0, 1.0, -1.0]
        assert [r.signals[0] for r in results] == [
            Action.buy(), Action.buy(), Action.NONE, Action.buy(), Action.sell()
        ]

    def test_long_exit_while_below_pivot_high(self):
        cfg = PivotReversalStrategy(left=1, right=1)
        instance = cfg.init(hl(10, 5))
        # pivot high 12 confirmed at step 2; later highs below 12 keep long exit on
        results = instance.over([hl(10, 5), hl(12, 6), hl(11, 7), hl(11.5, 8), hl(12.5, 9)])
        long_exit = [r.values[0] <= 0 for r in results]
        assert long_exit == [False, False, True, True, False]

    def test_outputs_are_ternary(self, candles):
        instance = PivotReversalStrategy().init(candles[0])
        for result in instance.over(candles):
            assert result.values[0] in (-1.0, 0.0, 1.0)
            assert result.signals[0].analog() == int(result.values[0])

    def test_deterministic_replay(self, candles):
        cfg = PivotReversalStrategy(left=3, right=2)
        assert cfg.init(candles[0]).over(candles) == cfg.init(candles[0]).over(candles)
