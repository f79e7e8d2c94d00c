"""Logging interface (adapter pattern)."""

from typing import Literal, Protocol

# Ordered from most to least verbose
LogLevel = Literal["debug", "info", "warn", "error"]


class ILogSink(Protocol):
    """Interface for leveled log output used by forms and handlers."""

    def log(self, level: LogLevel, message: str) -> None:
        """Write log entry; sinks may drop levels below their threshold."""
        ...
