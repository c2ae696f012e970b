"""Factory for creating indicator configurations."""

import dataclasses
from typing import Dict, Any, Type, List, Optional

from .base import IndicatorConfig
from .exceptions import IndicatorNotFoundError
from .indicators.example import Example
from .indicators.pivot_reversal import PivotReversalStrategy


class IndicatorRegistry:
    """Registry for managing indicator configs with aliases."""

    def __init__(self):
        """Initialize registry with built-in indicators."""
        self._registry: Dict[str, Type[IndicatorConfig]] = {}
        self._register_builtin_indicators()

    def _register_builtin_indicators(self) -> None:
        """Register built-in indicators."""
        self.register('example', Example, aliases=['price_cross'])
        self.register('pivot_reversal_strategy', PivotReversalStrategy, aliases=['pivot_reversal', 'prs'])

    def register(self, name: str, config_class: Type[IndicatorConfig], aliases: Optional[List[str]] = None) -> None:
        """Register indicator config class with aliases."""
        self._registry[name.lower()] = config_class

        if aliases:
            for alias in aliases:
                self._registry[alias.lower()] = config_class

    def get(self, name: str) -> Type[IndicatorConfig]:
        """Get indicator config class by name."""
        name_lower = name.lower()
        if name_lower not in self._registry:
            raise IndicatorNotFoundError(name, self.list_indicators())

        return self._registry[name_lower]

    def list_indicators(self) -> List[str]:
        """List canonical indicator names (first registered name of each class)."""
        seen: Dict[Type[IndicatorConfig], str] = {}
        for key, cls in self._registry.items():
            seen.setdefault(cls, key)
        return sorted(seen.values())

    def get_aliases(self, name: str) -> List[str]:
        """
        Get all aliases for an indicator.

        Args:
            name (str): Indicator name

        Returns:
            List[str]: List of all names (including aliases) for the indicator
        """
        try:
            target_class = self.get(name)
            return [key for key, cls in self._registry.items() if cls == target_class]
        except IndicatorNotFoundError:
            return []


# Global registry instance
_REGISTRY = IndicatorRegistry()


def register(name: str, config_class: Type[IndicatorConfig], aliases: Optional[List[str]] = None) -> None:
    """Add an indicator config class to the global registry."""
    _REGISTRY.register(name, config_class, aliases)


def create(name: str, **params: Any) -> IndicatorConfig:
    """
    Factory function to create indicator configurations by name.

    The returned config starts from the indicator's defaults and every
    keyword is applied through ``IndicatorConfig.set``, so values may be
    given as strings (as they come from a config file or a command line).

    Args:
        name (str): Name or alias of the indicator (case-insensitive).
            Available indicators can be listed using list_indicators().
        **params: Field values to override.

    Returns:
        IndicatorConfig: Config ready for ``validate()`` and ``init()``.

    Raises:
        IndicatorNotFoundError: If the indicator name is not recognized
        UnknownParameterError: If a keyword is not a field of the config
        InvalidParameterError: If a value cannot be parsed

    Examples:
        >>> import candlestream.technical_analysis as ta
        >>>
        >>> cfg = ta.create('example', price=101.5, period='5')
        >>> prs = ta.create('PRS', left=3, right=3)
        >>> instance = cfg.init(first_candle)
    """
    config_class = _REGISTRY.get(name)
    return config_class.from_dict(params)


def list_indicators() -> List[str]:
    """
    Get a list of all available indicator names.

    Returns:
        List[str]: Alphabetically sorted list of indicator names

    Example:
        >>> import candlestream.technical_analysis as ta
        >>> ta.list_indicators()
        ['example', 'pivot_reversal_strategy']
    """
    return _REGISTRY.list_indicators()


def describe(name: str) -> Dict[str, Any]:
    """
    Get detailed information about an indicator.

    Args:
        name (str): Name of the indicator to describe (case-insensitive)

    Returns:
        Dict[str, Any]: Dictionary containing:
            - name: Canonical class name
            - aliases: List of alternative names
            - parameters: Field types and defaults
            - size: (raw value count, signal count) for the default config
            - docstring: Class documentation

    Raises:
        IndicatorNotFoundError: If the indicator name is not recognized
    """
    config_class = _REGISTRY.get(name)
    default = config_class.default()
    field_types = default._field_types()

    parameters = {}
    for f in dataclasses.fields(default):
        parameters[f.name] = {
            'type': field_types[f.name].__name__,
            'default': default.to_dict()[f.name],
        }

    return {
        'name': config_class.__name__,
        'aliases': _REGISTRY.get_aliases(name),
        'parameters': parameters,
        'size': default.size(),
        'docstring': config_class.__doc__,
    }
