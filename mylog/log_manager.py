"""Importance levels and the log manager that filters and formats records."""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from enum import IntEnum
from types import TracebackType

from .sinks import FileSink, Sink, SocketSink


class Importance(IntEnum):
    """How important a message is; higher values are more important."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2


def format_record(message: str, importance: Importance, when: datetime) -> str:
    """Build a log line: priority, UTC timestamp to the second, then the message.

    A naive ``when`` is taken to be in UTC already.
    """
    if when.tzinfo is not None:
        when = when.astimezone(timezone.utc)
    stamp = when.strftime("[%Y-%m-%d, %H:%M:%S]")
    return f"[Priority: {int(importance)}]{stamp}{message}"


class LogManager:
    """Writes messages at or above a base importance to a sink."""

    def __init__(self, sink: Sink, base_importance: Importance) -> None:
        self._sink = sink
        self._base_importance = Importance(base_importance)
        self._lock = threading.Lock()

    @classmethod
    def for_file(cls, fname: str, base_importance: Importance) -> "LogManager":
        """Log to a file, appending to it."""
        return cls(FileSink(fname), base_importance)

    @classmethod
    def for_socket(cls, host: str, port: int, base_importance: Importance) -> "LogManager":
        """Log over TCP to an IPv4 host."""
        return cls(SocketSink(host, port), base_importance)

    @property
    def base_importance(self) -> Importance:
        with self._lock:
            return self._base_importance

    def log(self, message: str, importance: Importance) -> None:
        """Write ``message`` unless it is less important than the base level."""
        if importance < self.base_importance:
            return
        record = format_record(message, Importance(importance), datetime.now(timezone.utc))
        self._sink.write(record)

    def set_base_importance(self, importance: Importance) -> None:
        with self._lock:
            self._base_importance = Importance(importance)

    def close(self) -> None:
        self._sink.close()

    def __enter__(self) -> "LogManager":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()