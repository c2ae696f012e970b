"""Base classes for streaming methods and indicators."""

from abc import ABC, abstractmethod
import dataclasses
import logging
from typing import Any, Callable, ClassVar, Dict, Generic, Iterable, List, Tuple, TypeVar, get_type_hints

from .exceptions import InvalidParameterError, UnknownParameterError, ResultShapeError
from .types import Candle, IndicatorResult, Source

logger = logging.getLogger(__name__)

In = TypeVar("In")
Out = TypeVar("Out")


class Method(ABC, Generic[In, Out]):
    """
    Abstract base for streaming transforms.

    A method is constructed from its parameters plus a seed input, so that the
    first call to ``next`` is well defined, and is then advanced one input at a
    time. Each call returns exactly one output and depends only on the inputs
    seen so far and the method's window; there is no lookahead.

    Subclasses validate their parameters in ``__init__`` and raise
    InvalidParameterError on bad values.
    """

    @classmethod
    def new(cls, params: Any, value: In) -> "Method[In, Out]":
        """
        Construct from a parameter object and a seed value.

        Tuple parameters are unpacked into positional arguments, so
        ``Cls.new((left, right), v)`` equals ``Cls(left, right, v)``. Methods
        without parameters take ``None``.
        """
        if params is None:
            return cls(value)
        if isinstance(params, tuple):
            return cls(*params, value)
        return cls(params, value)

    @abstractmethod
    def next(self, value: In) -> Out:
        """
        Advance the state by one input and return the output for it.

        Args:
            value: The next input of the stream.

        Returns:
            The output for this step.
        """

    def over(self, inputs: Iterable[In]) -> List[Out]:
        """Feed every input in order and collect the outputs."""
        return [self.next(value) for value in inputs]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def _parse_int(text: str) -> int:
    return int(text.strip())


def _parse_float(text: str) -> float:
    return float(text.strip())


_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def _parse_bool(text: str) -> bool:
    key = text.strip().lower()
    if key in _TRUE:
        return True
    if key in _FALSE:
        return False
    raise ValueError(f"not a boolean: {text!r}")


_FIELD_PARSERS: Dict[type, Callable[[str], Any]] = {
    bool: _parse_bool,
    int: _parse_int,
    float: _parse_float,
    Source: Source.parse,
}


class IndicatorConfig(ABC):
    """
    Abstract base for indicator configurations.

    Concrete configs are dataclasses whose fields are the indicator's
    parameters. The base class provides dynamic assignment by field name
    (``set``), dict conversion, and ``init`` which turns a valid config into
    a running instance.

    Lifecycle:
        config = Example(price=2.5)      # or Example.default()
        config.set('period', '5')        # optional dynamic reconfiguration
        assert config.validate()
        instance = config.init(first_candle)
        for candle in stream:
            result = instance.step(candle)
    """

    @abstractmethod
    def validate(self) -> bool:
        """Return True if the parameters are usable."""

    @abstractmethod
    def size(self) -> Tuple[int, int]:
        """Return (raw value count, signal count) of every step result."""

    @abstractmethod
    def _create_instance(self, candle: Candle) -> "IndicatorInstance":
        """Build the instance for an already validated config snapshot."""

    @classmethod
    def default(cls) -> "IndicatorConfig":
        return cls()

    @property
    def indicator_name(self) -> str:
        return self.__class__.__name__

    def _field_types(self) -> Dict[str, type]:
        hints = get_type_hints(type(self))
        return {f.name: hints[f.name] for f in dataclasses.fields(self)}

    def set(self, name: str, value: Any) -> None:
        """
        Set a parameter by name, parsing string values into the field type.

        Values are normally strings. A value that already has the field's
        type is stored as is, without going through the parser (a bool is
        never taken as an int or float). The config is left unchanged when an
        error is raised.

        Args:
            name: Field name.
            value: New value, a string or a native value of the field type.

        Raises:
            UnknownParameterError: If the config has no such field.
            InvalidParameterError: If the value cannot be parsed, or the field
                type has no parser.
        """
        field_types = self._field_types()
        if name not in field_types:
            logger.warning(f"{self.indicator_name}: rejected unknown parameter '{name}' = {value!r}")
            raise UnknownParameterError(name, sorted(field_types), self.indicator_name)

        field_type = field_types[name]
        if isinstance(field_type, type) and (
                type(value) is field_type or (isinstance(value, field_type) and not isinstance(value, bool))):
            parsed = value
        else:
            parser = _FIELD_PARSERS.get(field_type)
            if parser is None:
                logger.warning(f"{self.indicator_name}: no parser for '{name}' of type {field_type!r}")
                raise InvalidParameterError(name, value, getattr(field_type, '__name__', str(field_type)),
                                            self.indicator_name)
            try:
                parsed = parser(str(value))
            except (TypeError, ValueError) as e:
                logger.warning(f"{self.indicator_name}: rejected value {value!r} for '{name}': {e}")
                raise InvalidParameterError(name, value, field_type.__name__, self.indicator_name) from e

        setattr(self, name, parsed)
        logger.debug(f"{self.indicator_name}: set {name}={parsed!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Plain-value representation, suitable for YAML or JSON."""
        out = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            out[f.name] = value.value if isinstance(value, Source) else value
        return out

    @classmethod
    def from_dict(cls, params: Dict[str, Any]) -> "IndicatorConfig":
        """Default config updated field by field through ``set``."""
        config = cls.default()
        for name, value in params.items():
            config.set(name, value)
        return config

    def init(self, candle: Candle) -> "IndicatorInstance":
        """
        Create a running instance seeded with ``candle``.

        The instance keeps its own copy of the config, so later ``set`` calls
        on this object do not affect it.

        Raises:
            InvalidParameterError: If ``validate()`` fails.
        """
        if not self.validate():
            raise InvalidParameterError("config", self.to_dict(), "parameters passing validate()", self.indicator_name)

        snapshot = dataclasses.replace(self)
        instance = snapshot._create_instance(candle)
        logger.debug(f"Initialized {instance.name} with {snapshot.to_dict()}")
        return instance


class IndicatorInstance(ABC):
    """
    Abstract base for running indicators.

    Subclasses implement ``_next``; ``step`` wraps it and enforces that
    every result has the shape declared by the config's ``size()``.
    """

    indicator_name: ClassVar[str] = ""

    def __init__(self, config: IndicatorConfig):
        self._cfg = config
        self._size = config.size()

    @property
    def name(self) -> str:
        return self.indicator_name or self.__class__.__name__

    @property
    def config(self) -> IndicatorConfig:
        return self._cfg

    @abstractmethod
    def _next(self, candle: Candle) -> IndicatorResult:
        """Compute the result for one candle."""

    def step(self, candle: Candle) -> IndicatorResult:
        """
        Process the next candle of the stream.

        Candles must arrive in time order, one call per candle.

        Raises:
            ResultShapeError: If the implementation breaks its declared size.
        """
        result = self._next(candle)
        if result.size != self._size:
            raise ResultShapeError(self._size, result.size, self.name)
        return result

    def over(self, candles: Iterable[Candle]) -> List[IndicatorResult]:
        """Step through every candle in order and collect the results."""
        return [self.step(candle) for candle in candles]

    def __repr__(self) -> str:
        return f"{self.name}Instance({self._cfg!r})"
