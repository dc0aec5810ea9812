"""Interactive command that queues messages and logs them from a worker thread."""

from __future__ import annotations

import queue
import sys
import threading
from dataclasses import dataclass
from types import TracebackType
from typing import TextIO

from .log_manager import Importance, LogManager

_NAMES = {"LOW": Importance.LOW, "MEDIUM": Importance.MEDIUM, "HIGH": Importance.HIGH}


def parse_importance(text: str, default: Importance) -> Importance:
    """Map "LOW", "MEDIUM" or "HIGH" to an Importance; anything else gives ``default``."""
    return _NAMES.get(text, default)


@dataclass(frozen=True)
class LogMessage:
    """A message waiting to be logged, with its importance."""

    message: str
    level: Importance


_STOP = object()


class App:
    """Reads messages interactively and logs them in the background."""

    def __init__(self, log_file: str, default_level: str) -> None:
        self.default_level = parse_importance(default_level, Importance.LOW)
        self.logger = LogManager.for_file(log_file, self.default_level)
        self._queue: queue.Queue[object] = queue.Queue()
        self._closed = False
        self._worker = threading.Thread(target=self._drain, daemon=True)
        self._worker.start()

    def _drain(self) -> None:
        while True:
            item = self._queue.get()
            if item is _STOP:
                break
            assert isinstance(item, LogMessage)
            self.logger.log(item.message, item.level)

    def submit(self, message: str, importance: Importance) -> None:
        """Queue a message for the worker to log."""
        self._queue.put(LogMessage(message, importance))

    def change_base_importance(self, text: str) -> Importance:
        """Set a new base level from its name; an unknown name keeps the current one."""
        self.default_level = parse_importance(text, self.default_level)
        self.logger.set_base_importance(self.default_level)
        return self.default_level

    def run(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
        """Prompt for messages until "quit" or end of input; return the exit status."""
        stdin = sys.stdin if stdin is None else stdin
        stdout = sys.stdout if stdout is None else stdout

        def ask(prompt: str) -> str | None:
            stdout.write(prompt)
            stdout.flush()
            line = stdin.readline()
            if not line:
                return None
            return line.rstrip("\n")

        while True:
            message = ask(
                "Enter message (or 'quit' to exit, Enter 'change' to set base importance): "
            )
            if message is None or message == "quit":
                break
            if message == "change":
                new_level = ask("Enter new base importance: ")
                if new_level is None:
                    break
                self.change_base_importance(new_level)
            else:
                level_text = ask("Enter importance (LOW/MEDIUM/HIGH, Enter for default): ")
                if level_text is None:
                    break
                self.submit(message, parse_importance(level_text, self.default_level))
        return 0

    def close(self) -> None:
        """Log everything still queued, stop the worker and close the log."""
        if self._closed:
            return
        self._closed = True
        self._queue.put(_STOP)
        self._worker.join()
        self.logger.close()

    def __enter__(self) -> "App":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """Run the interactive logger: ``<log_file> <default_importance>``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print("Usage: mylog-demo <log_file> <default_importance>", file=sys.stderr)
        return 1
    try:
        app = App(args[0], args[1])
    except OSError as err:
        print(f"Failed to initialize application: {err}", file=sys.stderr)
        return 1
    with app:
        return app.run()


if __name__ == "__main__":
    sys.exit(main())