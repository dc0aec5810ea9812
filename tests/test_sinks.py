import socket
import threading

import pytest

from mylog.sinks import FileSink, SocketSink


def test_file_sink_write(tmp_path):
    path = tmp_path / "test_log.txt"
    with FileSink(str(path)) as sink:
        sink.write("Test message")
    assert path.read_text(encoding="utf-8") == "Test message\n"


def test_file_sink_thread_safety(tmp_path):
    path = tmp_path / "test_log_thread.txt"
    with FileSink(str(path)) as sink:
        threads = [
            threading.Thread(target=sink.write, args=(f"Message {i}",)) for i in range(10)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 10
    assert sorted(lines) == sorted(f"Message {i}" for i in range(10))


def test_file_sink_appends_to_existing_file(tmp_path):
    path = tmp_path / "existing.txt"
    path.write_text("old\n", encoding="utf-8")
    with FileSink(str(path)) as sink:
        sink.write("new")
    assert path.read_text(encoding="utf-8") == "old\nnew\n"


def test_file_sink_open_failure_raises(tmp_path):
    missing = tmp_path / "no_such_dir" / "log.txt"
    with pytest.raises(OSError, match="Failed to open log file"):
        FileSink(str(missing))


def test_file_sink_write_after_close_is_dropped(tmp_path):
    path = tmp_path / "closed.txt"
    sink = FileSink(str(path))
    sink.write("first")
    sink.close()
    sink.write("second")
    sink.close()
    assert path.read_text(encoding="utf-8") == "first\n"


def test_file_sink_is_flushed_after_each_write(tmp_path):
    path = tmp_path / "flush.txt"
    sink = FileSink(str(path))
    sink.write("visible")
    assert path.read_text(encoding="utf-8") == "visible\n"
    sink.close()


def test_socket_sink_invalid_host(capsys):
    sink = SocketSink("not-an-address", 9000)
    assert sink.connected is False
    err = capsys.readouterr().err
    assert "SocketSink: Invalid host address: not-an-address" in err


def test_socket_sink_write_when_not_connected(capsys):
    sink = SocketSink("999.1.1.1", 9000)
    capsys.readouterr()
    sink.write("lost")
    assert "SocketSink: Not connected, cannot write message" in capsys.readouterr().err


def test_socket_sink_connection_refused(capsys):
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()

    sink = SocketSink("127.0.0.1", port)
    assert sink.connected is False
    assert f"SocketSink: failed to connect to 127.0.0.1:{port}" in capsys.readouterr().err


def test_socket_sink_sends_lines():
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    server.settimeout(5)
    port = server.getsockname()[1]
    try:
        sink = SocketSink("127.0.0.1", port)
        conn, _ = server.accept()
        conn.settimeout(5)
        with conn, sink:
            assert sink.connected is True
            sink.write("hello")
            sink.write("world")
            expected = b"hello\nworld\n"
            received = b""
            while len(received) < len(expected):
                chunk = conn.recv(1024)
                if not chunk:
                    break
                received += chunk
        assert received == expected
        assert sink.connected is False
    finally:
        server.close()