"""Parameter validation helpers shared by methods."""

from typing import Any, Optional

from .exceptions import InvalidParameterError


def validate_period(period: Any, name: str = "period", owner: Optional[str] = None) -> int:
    """
    Validate a window length or look-back parameter.

    Args:
        period (Any): The period value to validate
        name (str): Parameter name for error messages
        owner (Optional[str]): Method or indicator name for error messages

    Returns:
        int: Validated period value

    Raises:
        InvalidParameterError: If period is not a positive integer
    """
    if isinstance(period, bool) or not isinstance(period, int):
        raise InvalidParameterError(name, period, "positive integer", owner)

    if period <= 0:
        raise InvalidParameterError(name, period, "positive integer (> 0)", owner)

    return period
