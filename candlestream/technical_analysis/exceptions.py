"""Exception classes for technical analysis library."""

from typing import Any, List, Optional, Tuple


class IndicatorError(Exception):
    """Base exception for indicator errors."""

    def __init__(self, message: str, indicator_name: Optional[str] = None):
        self.indicator_name = indicator_name
        if indicator_name:
            message = f"[{indicator_name}] {message}"
        super().__init__(message)


class InvalidParameterError(IndicatorError):
    """Invalid indicator or method parameters."""

    def __init__(self, parameter_name: str, value: Any, expected: str, indicator_name: Optional[str] = None):
        message = f"Invalid parameter '{parameter_name}': got {value!r}, expected {expected}"
        super().__init__(message, indicator_name)
        self.parameter_name = parameter_name
        self.value = value
        self.expected = expected


class UnknownParameterError(IndicatorError):
    """Attempt to set a parameter the config does not have."""

    def __init__(self, parameter_name: str, available: Optional[List[str]] = None, indicator_name: Optional[str] = None):
        if available:
            message = f"Unknown parameter '{parameter_name}'. Available parameters: {', '.join(available)}"
        else:
            message = f"Unknown parameter '{parameter_name}'"
        super().__init__(message, indicator_name)
        self.parameter_name = parameter_name
        self.available = available or []


class MissingInputError(IndicatorError):
    """Missing required input fields."""

    def __init__(self, missing_fields: List[str], required_fields: List[str], indicator_name: Optional[str] = None):
        missing_str = ", ".join(missing_fields)
        required_str = ", ".join(required_fields)
        message = f"Missing required input fields: {missing_str}. Required: {required_str}"
        super().__init__(message, indicator_name)
        self.missing_fields = missing_fields
        self.required_fields = required_fields


class ResultShapeError(IndicatorError):
    """Indicator produced a result that does not match its declared size."""

    def __init__(self, expected: Tuple[int, int], actual: Tuple[int, int], indicator_name: Optional[str] = None):
        message = f"Result shape {actual} does not match declared size {expected}"
        super().__init__(message, indicator_name)
        self.expected = expected
        self.actual = actual


class IndicatorNotFoundError(IndicatorError):
    """Unknown indicator requested."""

    def __init__(self, indicator_name: str, available_indicators: Optional[List[str]] = None):
        if available_indicators:
            available_str = ", ".join(sorted(available_indicators))
            message = f"Unknown indicator '{indicator_name}'. Available indicators: {available_str}"
        else:
            message = f"Unknown indicator '{indicator_name}'"
        super().__init__(message)
        self.indicator_name = indicator_name
        self.available_indicators = available_indicators or []
