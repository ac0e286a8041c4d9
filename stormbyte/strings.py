"""String helpers: splitting, case changes, fractions and number formatting."""

from __future__ import annotations

import math
import re
from enum import Enum
from numbers import Real

from .errors import StormByteError

__all__ = [
    "Format",
    "indent",
    "is_numeric",
    "to_lower",
    "to_upper",
    "explode",
    "split",
    "split_fraction",
    "human_readable",
    "utf8_encode",
    "utf8_decode",
    "sanitize_newlines",
]

_ASCII_DIGITS = frozenset("0123456789")
_ASCII_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")
_LOWER_TABLE = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_UPPER_TABLE = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT64 = 2**64

_KB = 1024
_MB = _KB * 1024
_GB = _MB * 1024
_TB = _GB * 1024
_PB = _TB * 1024

# (thousands separator, decimal point) per language; unknown locales fall
# back to the plain "C" conventions.
_C_SEPARATORS = ("", ".")
_LOCALE_SEPARATORS = {
    "en": (",", "."),
    "ja": (",", "."),
    "zh": (",", "."),
    "ko": (",", "."),
    "he": (",", "."),
    "th": (",", "."),
    "de": (".", ","),
    "es": (".", ","),
    "it": (".", ","),
    "nl": (".", ","),
    "pt": (".", ","),
    "da": (".", ","),
    "id": (".", ","),
    "tr": (".", ","),
    "el": (".", ","),
    "fr": ("\u202f", ","),
    "ru": ("\u202f", ","),
    "uk": ("\u202f", ","),
    "pl": ("\u202f", ","),
    "cs": ("\u202f", ","),
    "sv": ("\u202f", ","),
    "fi": ("\u202f", ","),
    "nb": ("\u202f", ","),
}


class Format(Enum):
    """How ``human_readable`` renders a number."""

    RAW = 0
    HUMAN_READABLE_NUMBER = 1
    HUMAN_READABLE_BYTES = 2


def indent(level: int) -> str:
    """Return ``level`` tab characters."""
    return "\t" * level


def is_numeric(text: str) -> bool:
    """True if ``text`` is non-empty and made only of ASCII digits."""
    return bool(text) and all(char in _ASCII_DIGITS for char in text)


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text``."""
    return text.translate(_LOWER_TABLE)


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters of ``text``."""
    return text.translate(_UPPER_TABLE)


def explode(text: str, delimiter: str) -> list[str]:
    """Split ``text`` at every occurrence of the single character ``delimiter``.

    Empty pieces are kept; an empty string gives no pieces.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    if not text:
        return []
    return text.split(delimiter)


def split(text: str) -> list[str]:
    """Split ``text`` into words separated by ASCII whitespace."""
    return [word for word in _ASCII_WHITESPACE.split(text) if word]


def _to_int(text: str) -> int:
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise StormByteError.formatted("Invalid fraction format: {} is out of range.", text)
    return value


def split_fraction(fraction: str, denominator: int | None = None) -> tuple[int, int]:
    """Parse ``"a/b"`` into ``(a, b)``.

    With ``denominator`` given, the fraction is rescaled to it, the
    numerator truncated toward zero. Raises StormByteError on malformed
    input or a zero denominator.
    """
    numerator_text, slash, denominator_text = fraction.partition("/")
    if not slash:
        raise StormByteError("Invalid fraction format: '/' not found.")
    if not is_numeric(numerator_text) or not is_numeric(denominator_text):
        raise StormByteError.formatted(
            "Invalid fraction format: numerator ({}) and denominator ({}) must be numeric.",
            numerator_text,
            denominator_text,
        )
    if denominator_text == "0":
        raise StormByteError("Invalid fraction format: denominator cannot be zero.")

    numerator = _to_int(numerator_text)
    parsed_denominator = _to_int(denominator_text)
    if denominator is None or parsed_denominator == denominator:
        return numerator, parsed_denominator
    if denominator == 0:
        raise StormByteError("Invalid desired denominator: cannot be zero.")
    if parsed_denominator == 0:
        raise StormByteError("Invalid fraction format: denominator cannot be zero.")
    factor = float(denominator) / float(parsed_denominator)
    return int(numerator * factor), denominator


def _separators(locale: str) -> tuple[str, str]:
    name = locale.split(".", 1)[0].split("@", 1)[0]
    language = name.split("_", 1)[0].split("-", 1)[0].lower()
    return _LOCALE_SEPARATORS.get(language, _C_SEPARATORS)


def _localize(rendered: str, locale: str) -> str:
    """Swap the ``,``/``.`` of a Python-grouped number for the locale's marks."""
    thousands, decimal = _separators(locale)
    return "".join(
        thousands if char == "," else decimal if char == "." else char
        for char in rendered
    )


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _raw(number: Real) -> str:
    if isinstance(number, bool):
        return str(int(number))
    if isinstance(number, int):
        return str(number)
    return f"{float(number):f}"


def _human_number(number: Real, locale: str) -> str:
    if isinstance(number, int):
        return _localize(f"{int(number):,}", locale)
    value = float(number)
    if math.isfinite(value) and math.fmod(value, 1.0) == 0.0:
        return _localize(f"{int(value):,}", locale)
    if not math.isfinite(value):
        return _raw(value)
    return _localize(f"{value:,.2f}", locale)


def _human_bytes(number: Real, locale: str) -> str:
    value = float(number)
    if not math.isfinite(value):
        return f"{_raw(number)} Bytes"
    unsigned = int(number) % _UINT64

    suffix = "Bytes"
    for limit, name in ((_PB, "PiB"), (_TB, "TiB"), (_GB, "GiB"), (_MB, "MiB"), (_KB, "KiB")):
        if unsigned >= limit:
            value /= limit
            suffix = name
            break

    if abs(value - _round_half_away(value)) < 0.01:
        rendered = _localize(f"{_round_half_away(value):,}", locale)
    elif value < 0.01:
        rendered = "0"
    else:
        rendered = _localize(f"{value:,.2f}", locale)
    return f"{rendered} {suffix}"


def human_readable(
    number: Real, format: Format = Format.RAW, locale: str = "en_US.UTF-8"
) -> str:
    """Render ``number`` as raw text, a grouped number or a byte size.

    Grouping and decimal marks follow ``locale``; unknown locales use the
    plain "C" conventions.
    """
    if format is Format.HUMAN_READABLE_NUMBER:
        return _human_number(number, locale)
    if format is Format.HUMAN_READABLE_BYTES:
        return _human_bytes(number, locale)
    return _raw(number)


def utf8_encode(text: str) -> bytes:
    """Encode ``text`` as UTF-8; raises StormByteError if it cannot be."""
    try:
        return text.encode("utf-8")
    except UnicodeError as exc:
        raise StormByteError("Wide to multibyte conversion failed") from exc


def utf8_decode(data: bytes) -> str:
    """Decode UTF-8 ``data``; raises StormByteError on invalid input."""
    try:
        return bytes(data).decode("utf-8")
    except UnicodeError as exc:
        raise StormByteError("Multibyte to wide conversion failed") from exc


def sanitize_newlines(text: str) -> str:
    """Replace every CRLF pair with a single LF."""
    return text.replace("\r\n", "\n")