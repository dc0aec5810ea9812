"""Thread-safe logging with importance filtering and file or TCP socket sinks."""

__version__ = "1.0.0"
__all__ = ["sinks", "log_manager", "demo"]