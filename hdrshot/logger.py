"""Debug log with an optional append-only log file."""

from __future__ import annotations

import logging
import os
import threading
from typing import Optional, Union

_channel = logging.getLogger("hdrshot")


class Logger:
    """Writes ``LEVEL: message`` lines to the ``hdrshot`` logging channel and, if enabled, a file."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._file_path: Optional[str] = None

    def enable_file_logging(self, path: Union[str, "os.PathLike[str]", None]) -> None:
        """Append log lines to ``path``; an empty path or None turns file output off."""
        with self._lock:
            self._file_path = os.fspath(path) if path else None

    def info(self, fmt: str, *args) -> None:
        self._log("INFO", logging.INFO, fmt, args)

    def warn(self, fmt: str, *args) -> None:
        self._log("WARN", logging.WARNING, fmt, args)

    def error(self, fmt: str, *args) -> None:
        self._log("ERR", logging.ERROR, fmt, args)

    def debug(self, fmt: str, *args) -> None:
        self._log("DBG", logging.DEBUG, fmt, args)

    def _log(self, label: str, level: int, fmt: str, args: tuple) -> None:
        line = f"{label}: {fmt.format(*args)}"
        _channel.log(level, line)
        with self._lock:
            path = self._file_path
            if path is None:
                return
            try:
                with open(path, "a", encoding="utf-8") as handle:
                    handle.write(line + "\n")
            except OSError:
                pass


_instance = Logger()


def get_logger() -> Logger:
    """Return the process-wide logger."""
    return _instance