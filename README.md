# mylog

A small, thread-safe logging library. Each message has an importance:
`LOW`, `MEDIUM` or `HIGH`. A `LogManager` drops any message below its base
importance. It stamps each message it keeps with the UTC time and writes it
to a sink. A sink is either a file that is appended to or a TCP socket.

## Installation

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install .[test]
pytest
```

## Record format

Each line written looks like this:

```
[Priority: 2][2024-01-31, 12:00:00]Disk almost full
```

The priority number is `0` for `LOW`, `1` for `MEDIUM` and `2` for `HIGH`.
`Importance` in `mylog.log_manager` is an `IntEnum` with these values.

`format_record(message, importance, when)` builds one such line from a given
`datetime`. An aware `when` is converted to UTC. A naive `when` is taken to be
UTC already.

## Logging to a file

```python
from mylog.log_manager import Importance, LogManager

with LogManager.for_file("app.log", Importance.MEDIUM) as logger:
    logger.log("not written", Importance.LOW)
    logger.log("written", Importance.MEDIUM)
    logger.set_base_importance(Importance.HIGH)
    logger.log("written too", Importance.HIGH)
```

The file is opened in append mode as UTF-8. Each line is flushed as soon as
it is written. If the file cannot be opened, `OSError` is raised with the
message `Failed to open log file: <name>`.

`LogManager.base_importance` reads the current base level.
`set_base_importance` changes it. Both are safe to use from several threads.

## Logging to a TCP socket

```python
from mylog.log_manager import Importance, LogManager

with LogManager.for_socket("127.0.0.1", 5140, Importance.LOW) as logger:
    logger.log("hello", Importance.HIGH)
```

The host must be a literal IPv4 address. Host names are not resolved.
`SocketSink` never raises if it cannot connect, gets an invalid address, or
fails to send. In each case it prints a message on standard error and marks
itself as not connected. While it is not connected, further writes are
dropped and each one is reported on standard error. Its `connected` property
tells whether it still has a usable connection.

## Sinks

`mylog.sinks` holds the abstract `Sink` class and its two implementations,
`FileSink(fname)` and `SocketSink(host, port)`. A sink has `write(message)`,
which writes one line, and `close()`. It also works as a context manager.
You may call `close()` more than once. A `FileSink` ignores writes after it
has been closed.

`LogManager(sink, base_importance)` accepts any `Sink`, including your own
subclasses. Closing the manager closes its sink.

## Interactive demo

```
mylog-demo app.log MEDIUM
```

The two arguments are the log file and the default importance. If the
importance is not `LOW`, `MEDIUM` or `HIGH`, `LOW` is used. The command reads
messages from standard input and, for each one, asks for its importance. An
empty or unknown answer uses the current default. Messages are queued and
written to the file by a background worker thread. Every queued message is
written before the command exits.

At the message prompt:

- type `change` to enter a new default and base importance (an unknown name
  leaves it as it was);
- type `quit` to leave, or end the input.

The command exits with status `1` in two cases: it was not given exactly two
arguments, or the log file cannot be opened. The same behaviour is available
in code through `mylog.demo.App`, which provides `submit`,
`change_base_importance`, `run` and `close`, and through `mylog.demo.main`.