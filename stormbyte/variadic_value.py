"""A value that may be any one of a fixed set of types."""

from __future__ import annotations

import copy as _copy
from typing import Any

from .errors import StormByteError

__all__ = ["VariadicValue"]

_UNSET = object()


class VariadicValue:
    """Holds one value whose type is one of the types given at construction.

    Without ``value`` the first type is default-constructed.
    """

    def __init__(self, *args: type, value: Any = _UNSET) -> None:
        if not args:
            raise TypeError("VariadicValue needs at least one allowed type")
        self._types = tuple(args)
        if value is _UNSET:
            self._value = self._types[0]()
        else:
            if type(value) not in self._types:
                raise TypeError(
                    f"{type(value).__name__} is not one of the allowed types"
                )
            self._value = value

    @property
    def types(self) -> tuple[type, ...]:
        """The allowed types, in the order given."""
        return self._types

    def get(self, kind: type) -> Any:
        """Return the held value if it is exactly of type ``kind``.

        Raises TypeError if ``kind`` is not an allowed type and
        StormByteError if a different type is held.
        """
        if kind not in self._types:
            raise TypeError("Requested type is not in the variant")
        if type(self._value) is not kind:
            raise StormByteError("Variant does not hold the requested type")
        return self._value

    def copy(self) -> "VariadicValue":
        """Return an independent copy; the held value is copied deeply."""
        return VariadicValue(*self._types, value=_copy.deepcopy(self._value))

    def __copy__(self) -> "VariadicValue":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VariadicValue):
            return NotImplemented
        return type(self._value) is type(other._value) and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        names = ", ".join(kind.__name__ for kind in self._types)
        return f"VariadicValue({names}, value={self._value!r})"