"""Binary codecs for plain values, containers, pairs and optionals.

Wire format: fixed-size values are written in the layout their struct
format describes. Containers (strings included) are a native ``size_t``
element count followed by each element. Pairs are the first value
followed by the second. Optionals are a one-byte flag followed by the
value when present.
"""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .errors import BufferOverflow

__all__ = [
    "Codec",
    "Trivial",
    "Container",
    "Pair",
    "Optional",
    "INT",
    "DOUBLE",
    "SIZE",
    "BOOL",
    "STRING",
]


def _take(view: memoryview, offset: int, length: int) -> bytes:
    end = offset + length
    if end > len(view):
        raise BufferOverflow(
            f"Insufficient data to read {length} bytes "
            f"({len(view) - offset} available)"
        )
    return bytes(view[offset:end])


class Codec(ABC):
    """Turns values into bytes and back."""

    @abstractmethod
    def serialize(self, value: Any) -> bytes:
        """Return the encoded form of ``value``."""

    @abstractmethod
    def size(self, value: Any) -> int:
        """Return how many bytes ``serialize(value)`` produces."""

    @abstractmethod
    def _decode(self, view: memoryview, offset: int) -> tuple[Any, int]:
        """Decode one value at ``offset``; return it and the next offset."""

    def deserialize(self, data: bytes | bytearray | memoryview) -> Any:
        """Decode a value from the start of ``data``.

        Raises BufferOverflow if ``data`` ends before the value does.
        """
        value, _ = self._decode(memoryview(bytes(data)), 0)
        return value


class Trivial(Codec):
    """A fixed-size value described by a :mod:`struct` format."""

    def __init__(self, fmt: str) -> None:
        self._struct = struct.Struct(fmt)

    def serialize(self, value: Any) -> bytes:
        try:
            return self._struct.pack(value)
        except struct.error as exc:
            raise ValueError(f"cannot encode {value!r}: {exc}") from exc

    def size(self, value: Any) -> int:
        return self._struct.size

    def _decode(self, view: memoryview, offset: int) -> tuple[Any, int]:
        raw = _take(view, offset, self._struct.size)
        (value,) = self._struct.unpack(raw)
        return value, offset + self._struct.size


INT = Trivial("=i")
DOUBLE = Trivial("=d")
SIZE = Trivial("=Q")
BOOL = Trivial("=?")


class Container(Codec):
    """A counted sequence of elements; mappings are written as key/value pairs."""

    def __init__(
        self, element: Codec, factory: Callable[[list[Any]], Any] = list
    ) -> None:
        self._element = element
        self._factory = factory

    @staticmethod
    def _items(value: Any) -> Iterable[Any]:
        return value.items() if isinstance(value, Mapping) else value

    def serialize(self, value: Any) -> bytes:
        parts = [SIZE.serialize(len(value))]
        parts.extend(self._element.serialize(item) for item in self._items(value))
        return b"".join(parts)

    def size(self, value: Any) -> int:
        return SIZE.size(len(value)) + sum(
            self._element.size(item) for item in self._items(value)
        )

    def _decode(self, view: memoryview, offset: int) -> tuple[Any, int]:
        count, offset = SIZE._decode(view, offset)
        items = []
        for _ in range(count):
            item, offset = self._element._decode(view, offset)
            items.append(item)
        return self._factory(items), offset


class _Text(Codec):
    """A string written as a counted sequence of its UTF-8 bytes."""

    def serialize(self, value: str) -> bytes:
        raw = value.encode("utf-8")
        return SIZE.serialize(len(raw)) + raw

    def size(self, value: str) -> int:
        return SIZE.size(0) + len(value.encode("utf-8"))

    def _decode(self, view: memoryview, offset: int) -> tuple[str, int]:
        length, offset = SIZE._decode(view, offset)
        raw = _take(view, offset, length)
        return raw.decode("utf-8"), offset + length


STRING = _Text()


class Pair(Codec):
    """Two values, the first followed by the second; decoded as a tuple."""

    def __init__(self, first: Codec, second: Codec) -> None:
        self._first = first
        self._second = second

    def serialize(self, value: tuple[Any, Any]) -> bytes:
        first, second = value
        return self._first.serialize(first) + self._second.serialize(second)

    def size(self, value: tuple[Any, Any]) -> int:
        first, second = value
        return self._first.size(first) + self._second.size(second)

    def _decode(self, view: memoryview, offset: int) -> tuple[Any, int]:
        first, offset = self._first._decode(view, offset)
        second, offset = self._second._decode(view, offset)
        return (first, second), offset


class Optional(Codec):
    """A presence flag followed by the value when there is one; None is absent."""

    def __init__(self, inner: Codec) -> None:
        self._inner = inner

    def serialize(self, value: Any) -> bytes:
        if value is None:
            return BOOL.serialize(False)
        return BOOL.serialize(True) + self._inner.serialize(value)

    def size(self, value: Any) -> int:
        flag = BOOL.size(False)
        return flag if value is None else flag + self._inner.size(value)

    def _decode(self, view: memoryview, offset: int) -> tuple[Any, int]:
        present, offset = BOOL._decode(view, offset)
        if not present:
            return None, offset
        return self._inner._decode(view, offset)