"""
Append-only session log for CommandBot.

One LogSink is opened at startup, passed to whatever needs to log,
and closed when the session ends. Every record is a single line:

    [2026-01-01 12:00:00 UTC] INFO: User: send the report to Alice
"""

from datetime import datetime, timezone
from typing import TextIO

from settings import LOG_FILE


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


class LogSink:
    """Timestamped, severity-prefixed line writer over an open text stream."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def write(self, level: str, message: str) -> None:
        """
        Append one record and flush it.

        Args:
            level: Severity marker, e.g. "INFO"
            message: Record text; embedded newlines are flattened
        """
        flat = " ".join(message.splitlines())
        self._stream.write(f"[{_timestamp()}] {level}: {flat}\n")
        self._stream.flush()

    def info(self, message: str) -> None:
        self.write("INFO", message)

    def error(self, message: str) -> None:
        self.write("ERROR", message)

    def log_session_start(self) -> None:
        self.info("Session started")

    def log_session_end(self) -> None:
        self.info("Session ended")

    def close(self) -> None:
        if not self._stream.closed:
            self._stream.close()

    def __enter__(self) -> "LogSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def open_log_sink(path: str = LOG_FILE) -> LogSink:
    """
    Open the append-only log file.

    Raises:
        OSError: If the file cannot be opened for appending
    """
    return LogSink(open(path, "a", encoding="utf-8"))
