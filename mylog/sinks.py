"""Destinations that receive formatted log lines."""

from __future__ import annotations

import socket
import sys
import threading
from abc import ABC, abstractmethod
from types import TracebackType
from typing import TextIO


class Sink(ABC):
    """A destination for log lines."""

    @abstractmethod
    def write(self, message: str) -> None:
        """Write one line of log output."""

    def close(self) -> None:
        """Release whatever the sink holds. Closing twice is harmless."""

    def __enter__(self) -> "Sink":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class FileSink(Sink):
    """Appends each message as a line to a file, safely across threads."""

    def __init__(self, fname: str) -> None:
        self.fname = fname
        self._lock = threading.Lock()
        try:
            self._file: TextIO | None = open(fname, "a", encoding="utf-8")
        except OSError as err:
            raise OSError(f"Failed to open log file: {fname}") from err

    def write(self, message: str) -> None:
        with self._lock:
            if self._file is not None:
                self._file.write(message + "\n")
                self._file.flush()

    def close(self) -> None:
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None


class SocketSink(Sink):
    """Sends each message as a line over a TCP connection to an IPv4 host.

    Failures to connect or send are reported on stderr rather than raised;
    a sink that is not connected drops its messages.
    """

    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port
        self._lock = threading.Lock()
        self._sock: socket.socket | None = None
        self._connected = False

        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError:
            print("socketSink: Failed to create socket", file=sys.stderr)
            return

        try:
            socket.inet_pton(socket.AF_INET, host)
        except OSError:
            print(f"SocketSink: Invalid host address: {host}", file=sys.stderr)
            sock.close()
            return

        try:
            sock.connect((host, port))
        except (OSError, OverflowError):
            print(f"SocketSink: failed to connect to {host}:{port}", file=sys.stderr)
            sock.close()
            return

        self._sock = sock
        self._connected = True

    @property
    def connected(self) -> bool:
        """Whether the sink still holds a usable connection."""
        return self._connected

    def write(self, message: str) -> None:
        with self._lock:
            if not self._connected or self._sock is None:
                print("SocketSink: Not connected, cannot write message", file=sys.stderr)
                return
            try:
                self._sock.sendall((message + "\n").encode("utf-8"))
            except OSError:
                print("SocketSink: Failed to send msg", file=sys.stderr)
                self._connected = False

    def close(self) -> None:
        with self._lock:
            if self._sock is not None:
                self._sock.close()
                self._sock = None
            self._connected = False