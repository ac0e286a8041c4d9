"""A value guarded by its own lock."""

from __future__ import annotations

import threading
from functools import total_ordering
from typing import Any, Generic, TypeVar

__all__ = ["Mutexed"]

T = TypeVar("T")


@total_ordering
class Mutexed(Generic[T]):
    """Holds a value together with a lock protecting it.

    ``set`` and comparisons lock on their own. Direct access through
    ``value`` does not; wrap it in ``with`` (or ``lock``/``unlock``)
    when other threads may touch the value.
    """

    def __init__(self, value: Any = None) -> None:
        self._lock = threading.Lock()
        if isinstance(value, Mutexed):
            with value._lock:
                self._value = value._value
        else:
            self._value = value

    @property
    def value(self) -> T:
        """The held value, without locking."""
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self._value = new_value

    def set(self, value: Any) -> "Mutexed[T]":
        """Replace the value under the lock; another Mutexed is copied from."""
        if isinstance(value, Mutexed):
            if value is self:
                return self
            with self._pair_locked(value):
                self._value = value._value
        else:
            with self._lock:
                self._value = value
        return self

    def lock(self) -> None:
        """Acquire the lock."""
        self._lock.acquire()

    def unlock(self) -> None:
        """Release the lock."""
        self._lock.release()

    def __enter__(self) -> "Mutexed[T]":
        self._lock.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._lock.release()

    def _pair_locked(self, other: "Mutexed[Any]") -> "_PairLock":
        return _PairLock(self._lock, other._lock)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mutexed):
            return NotImplemented
        if other is self:
            return True
        with self._pair_locked(other):
            return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Mutexed):
            return NotImplemented
        if other is self:
            return False
        with self._pair_locked(other):
            return self._value < other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Mutexed({self._value!r})"


class _PairLock:
    """Acquires two locks in a fixed order to avoid deadlock."""

    def __init__(self, first: threading.Lock, second: threading.Lock) -> None:
        self._locks = sorted((first, second), key=id)

    def __enter__(self) -> None:
        for lock in self._locks:
            lock.acquire()

    def __exit__(self, exc_type, exc, tb) -> None:
        for lock in reversed(self._locks):
            lock.release()