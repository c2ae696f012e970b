"""Tests for the Example indicator and the config/instance protocol."""

from dataclasses import dataclass
from typing import Tuple

import pytest

from candlestream.technical_analysis import (
    Action,
    Example,
    IndicatorConfig,
    IndicatorInstance,
    IndicatorResult,
    InvalidParameterError,
    ResultShapeError,
    Source,
    UnknownParameterError,
)


def run(config, closes, make_bar):
    instance = config.init(make_bar(closes[0]))
    return [instance.step(make_bar(c)) for c in closes]


class TestConfig:

    def test_defaults(self):
        cfg = Example.default()
        assert (cfg.price, cfg.period, cfg.source) == (2.0, 3, Source.CLOSE)
        assert cfg.validate()
        assert cfg.size() == (1, 2)

    @pytest.mark.parametrize("kwargs", [{'price': 0.0}, {'price': -1.5}, {'period': 0}])
    def test_validate_rejects(self, kwargs):
        assert not Example(**kwargs).validate()

    def test_set_parses_strings(self):
        cfg = Example()
        cfg.set('price', '2.5')
        cfg.set('period', ' 7 ')
        cfg.set('source', 'HL2')
        assert cfg.price == 2.5
        assert cfg.period == 7
        assert cfg.source is Source.HL2

    def test_set_accepts_native_values(self):
        cfg = Example()
        cfg.set('price', 4)
        cfg.set('source', Source.OPEN)
        assert cfg.price == 4.0
        assert isinstance(cfg.price, float)
        assert cfg.source is Source.OPEN

    def test_set_unknown_name(self):
        cfg = Example()
        with pytest.raises(UnknownParameterError) as exc_info:
            cfg.set('lenght', '3')
        assert exc_info.value.parameter_name == 'lenght'
        assert 'period' in exc_info.value.available
        assert cfg == Example()

    @pytest.mark.parametrize("name,value", [
        ('price', 'abc'),
        ('period', '3.5'),
        ('period', ''),
        ('source', 'volume'),
    ])
    def test_set_unparsable_value(self, name, value):
        cfg = Example()
        with pytest.raises(InvalidParameterError) as exc_info:
            cfg.set(name, value)
        assert exc_info.value.parameter_name == name
        assert exc_info.value.value == value
        assert cfg == Example()

    def test_dict_round_trip(self):
        cfg = Example(price=10.0, period=2, source=Source.TP)
        assert cfg.to_dict() == {'price': 10.0, 'period': 2, 'source': 'tp'}
        assert Example.from_dict(cfg.to_dict()) == cfg

    def test_init_refuses_invalid_config(self, make_bar):
        with pytest.raises(InvalidParameterError):
            Example(price=0.0).init(make_bar(1.0))

    def test_instance_keeps_config_snapshot(self, make_bar):
        cfg = Example()
        instance = cfg.init(make_bar(1.0))
        cfg.set('price', '50')
        assert instance.config.price == 2.0
        assert instance.name == "Example"


class TestSignals:

    def test_shape_and_raw_value(self, make_bar):
        results = run(Example(), [1.0, 3.0, 1.5], make_bar)
        assert all(r.size == (1, 2) for r in results)
        assert [r.values[0] for r in results] == [1.0, 3.0, 1.5]

    def test_crossover_signals(self, make_bar):
        results = run(Example(period=1), [1.0, 3.0, 1.0], make_bar)
        instant = [r.signals[1] for r in results]
        assert instant == [Action.NONE, Action.buy(), Action.sell()]

    def test_signal_persists_for_period_then_resets(self, make_bar):
        closes = [1.0, 3.0, 3.0, 3.0, 3.0, 3.0, 3.0]
        results = run(Example(price=2.0, period=3), closes, make_bar)
        held = [r.signals[0] for r in results]
        # raised at step 1, held for steps 2..4, cleared at step 5
        assert held == [Action.NONE] + [Action.buy()] * 4 + [Action.NONE] * 2
        assert [r.signals[1] for r in results] == [Action.NONE, Action.buy()] + [Action.NONE] * 5

    def test_new_crossover_supersedes(self, make_bar):
        closes = [1.0, 3.0, 3.0, 1.0, 1.0, 1.0, 1.0, 1.0]
        results = run(Example(price=2.0, period=3), closes, make_bar)
        held = [r.signals[0].analog() for r in results]
        assert held == [0, 1, 1, -1, -1, -1, -1, 0]

    def test_seed_below_threshold_first_candle_above(self, make_bar):
        instance = Example().init(make_bar(1.0))
        assert instance.step(make_bar(3.0)).signals[0] == Action.buy()

    def test_source_selection(self, make_bar):
        cfg = Example(price=2.0, source=Source.HIGH)
        instance = cfg.init(make_bar(1.0, high=1.0))
        result = instance.step(make_bar(1.0, high=2.5))
        assert result.values == (2.5,)
        assert result.signals[0] == Action.buy()

    def test_deterministic_replay(self, candles):
        price = candles[0].close
        cfg = Example(price=price, period=4)
        first = cfg.init(candles[0]).over(candles)
        second = cfg.init(candles[0]).over(candles)
        assert first == second
        assert any(r.signals[1] for r in first)


@dataclass
class _Broken(IndicatorConfig):
    width: int = 1

    def validate(self) -> bool:
        return True

    def size(self) -> Tuple[int, int]:
        return 2, 1

    def _create_instance(self, candle):
        return _BrokenInstance(self)


class _BrokenInstance(IndicatorInstance):

    def _next(self, candle):
        return IndicatorResult.new([candle.close], [Action.NONE])


def test_result_shape_mismatch_is_caught(make_bar):
    instance = _Broken().init(make_bar(1.0))
    with pytest.raises(ResultShapeError) as exc_info:
        instance.step(make_bar(1.0))
    assert exc_info.value.expected == (2, 1)
    assert exc_info.value.actual == (1, 1)


@dataclass
class _Flagged(IndicatorConfig):
    enabled: bool = True
    tags: tuple = ()

    def validate(self) -> bool:
        return True

    def size(self) -> Tuple[int, int]:
        return 1, 1

    def _create_instance(self, candle):
        return _BrokenInstance(self)


class TestFieldTypes:

    @pytest.mark.parametrize("value,expected", [
        ('false', False),
        (' Yes ', True),
        ('0', False),
        (1, True),
        (False, False),
    ])
    def test_bool_field(self, value, expected):
        cfg = _Flagged()
        cfg.set('enabled', value)
        assert cfg.enabled is expected

    def test_bool_field_rejects_garbage(self):
        cfg = _Flagged()
        with pytest.raises(InvalidParameterError):
            cfg.set('enabled', 'maybe')
        assert cfg.enabled is True

    def test_field_without_parser(self):
        cfg = _Flagged()
        with pytest.raises(InvalidParameterError) as exc_info:
            cfg.set('tags', 'a,b')
        assert exc_info.value.parameter_name == 'tags'
        assert cfg.tags == ()

    def test_native_value_of_field_type_is_kept(self):
        cfg = _Flagged()
        cfg.set('tags', ('a', 'b'))
        assert cfg.tags == ('a', 'b')

    def test_bool_is_not_an_int(self):
        with pytest.raises(InvalidParameterError):
            Example().set('period', True)
