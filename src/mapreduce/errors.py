"""Error types raised by mapreduce itself.

Failures of caller-supplied callables are never wrapped; they reach
the caller unchanged.
"""

from __future__ import annotations


class MapReduceError(Exception):
    """Base class for errors raised by the library."""


class ConfigError(MapReduceError):
    """Error raised when configuration values fail validation.

    The offending raw value is preserved for debugging.
    """

    def __init__(self, message: str, raw_value: object) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ConfigError({super().__repr__()}, raw_value={self.raw_value!r})"
