# stormbyte

A small library of general-purpose helpers:

- `stormbyte.mutexed`: `Mutexed`, a value guarded by its own lock, usable as a
  context manager.
- `stormbyte.strings`: splitting, ASCII case conversion, fraction parsing, CRLF
  clean-up, UTF-8 encoding and decoding, and human-readable number and byte-size
  formatting (`Format`, `human_readable`).
- `stormbyte.serializable`: composable binary codecs (`Trivial`, `Container`,
  `Pair`, `Optional`) plus ready-made `INT`, `DOUBLE`, `SIZE`, `BOOL` and `STRING`
  codecs. Decoding truncated data raises `BufferOverflow`.
- `stormbyte.variadic_value`: `VariadicValue`, a value restricted to a fixed set
  of types.
- `stormbyte.clonable`: `Clonable`, a base class with `clone()` (deep copy) and
  `move()` (hand the state over to a new object).
- `stormbyte.system`: `temp_file_name`, `current_path` and `sleep`.
- `stormbyte.errors`: `StormByteError` and its subclass `BufferOverflow`.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

### Guarded values

`set` and comparisons take the lock themselves; direct access through `value`
does not, so wrap it in `with` (or `lock()`/`unlock()`) when other threads share
the object. The lock is not re-entrant: do not call `set` inside `with`.

```python
from stormbyte.mutexed import Mutexed

counter = Mutexed(0)
with counter:
    counter.value += 1

counter.set(10)
Mutexed(1) < Mutexed(2)      # True
```

### Strings

```python
from stormbyte.strings import (
    Format, explode, human_readable, is_numeric, sanitize_newlines, split, split_fraction,
)

explode("path/to/items", "/")                                      # ['path', 'to', 'items']
split("  two   words ")                                            # ['two', 'words']
is_numeric("123")                                                  # True
split_fraction("1/2")                                              # (1, 2)
split_fraction("1/2", 4)                                           # (2, 4)
human_readable(1024, Format.HUMAN_READABLE_NUMBER, "en_US.UTF-8")  # '1,024'
human_readable(1024, Format.HUMAN_READABLE_BYTES, "en_US.UTF-8")   # '1 KiB'
sanitize_newlines("a\r\nb")                                        # 'a\nb'
```

`split_fraction` raises `StormByteError` when there is no `/`, when either part
is not made of digits, or when a denominator is zero. Locales not known to
`human_readable` fall back to no thousands separator and a `.` decimal point.

### Serialization

Fixed-size values use a `struct` format; containers and strings are a native
`size_t` count followed by their elements; pairs are the first value then the
second; optionals are a one-byte flag followed by the value when present
(`None` means absent).

```python
from stormbyte.serializable import INT, STRING, Container, Optional, Pair, Trivial

codec = Container(Pair(Trivial("i"), Trivial("d")), list)
data = codec.serialize([(1, 2.5), (2, 3.5)])
codec.deserialize(data)                   # [(1, 2.5), (2, 3.5)]
codec.size([(1, 2.5)]) == len(codec.serialize([(1, 2.5)]))   # True

mapping = Container(Pair(INT, STRING), dict)
mapping.deserialize(mapping.serialize({1: "Hello", 2: "World!"}))  # {1: 'Hello', 2: 'World!'}

Optional(INT).deserialize(Optional(INT).serialize(None))           # None
```

### Type-restricted values

```python
from stormbyte.variadic_value import VariadicValue

v = VariadicValue(int, str, value="hello")
v.get(str)        # 'hello'
v.get(int)        # raises StormByteError: a different type is held
v.get(float)      # raises TypeError: float is not an allowed type
VariadicValue(int, str).get(int)   # 0, the first type default-constructed
```

### System helpers

```python
from datetime import timedelta
from stormbyte.system import current_path, sleep, temp_file_name

path = temp_file_name("something")   # a new, empty file in the system temp directory
path.unlink()

sleep(timedelta(milliseconds=100))   # or sleep(0.1)
current_path()                       # the running interpreter's executable (its directory on Windows)
```

## What it does not do

This is a library only: it installs no command-line tool. The codecs work on
plain `bytes`; there are no byte-buffer, pipeline or logging classes.