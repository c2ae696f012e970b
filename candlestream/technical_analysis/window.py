"""
Fixed-capacity sliding window.

The window is the storage underneath every windowed method. Unlike a
``deque(maxlen=n)`` that grows during warm-up, a Window is full from the
moment it is created: all slots are pre-filled with a seed value, and every
push evicts exactly one element.
"""

from collections import deque
from typing import Deque, Generic, Iterator, TypeVar

from .exceptions import InvalidParameterError

T = TypeVar("T")


class Window(Generic[T]):
    """
    Ordered buffer holding the last ``capacity`` values of a series.

    Iteration goes from oldest to newest; ``reversed(window)`` goes from
    newest to oldest. Index 0 is the oldest element.

    Example:
        >>> w = Window(3, 0.0)
        >>> w.push(1.0)
        0.0
        >>> list(w)
        [0.0, 0.0, 1.0]
    """

    __slots__ = ("_capacity", "_buf")

    def __init__(self, capacity: int, seed: T):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidParameterError("capacity", capacity, "positive integer (> 0)", "Window")

        self._capacity = capacity
        self._buf: Deque[T] = deque((seed for _ in range(capacity)), maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: T) -> T:
        """Append ``value`` and return the evicted oldest element."""
        evicted = self._buf[0]
        self._buf.append(value)
        return evicted

    def oldest(self) -> T:
        return self._buf[0]

    def newest(self) -> T:
        return self._buf[-1]

    def __getitem__(self, index: int) -> T:
        return self._buf[index]

    def __len__(self) -> int:
        return self._capacity

    def __iter__(self) -> Iterator[T]:
        return iter(self._buf)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._buf)

    def __repr__(self) -> str:
        return f"Window(capacity={self._capacity}, {list(self._buf)!r})"
