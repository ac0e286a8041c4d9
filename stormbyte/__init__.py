"""General-purpose helpers: guarded values, strings, binary codecs, type-restricted values and system utilities."""

__version__ = "0.1.0"

__all__ = [
    "clonable",
    "errors",
    "mutexed",
    "serializable",
    "strings",
    "system",
    "variadic_value",
]