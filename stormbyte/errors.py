"""Exception types shared across the package."""

from __future__ import annotations

__all__ = ["StormByteError", "BufferOverflow"]


class StormByteError(Exception):
    """Base class for every error the package raises."""

    @property
    def message(self) -> str:
        """The text the error was created with."""
        return str(self.args[0]) if self.args else ""

    @classmethod
    def formatted(cls, fmt: str, *args: object) -> "StormByteError":
        """Build an error whose message is ``fmt`` formatted with ``args``.

        With no arguments the format string is used verbatim, so braces
        in it are kept as they are.
        """
        message = fmt.format(*args) if args else fmt
        return cls(message)


class BufferOverflow(StormByteError):
    """Raised when more data is requested than a buffer holds."""