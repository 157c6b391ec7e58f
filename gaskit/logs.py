"""HTML-formatted log files with coloured, time-stamped entries."""

from __future__ import annotations

import inspect
import os
import time
from typing import IO, Optional

TIME_FORMAT = "%H:%M:%S"
LOG_HEADER = '<pre style="background: #000000;color:#000000;">'

_PREFIX_WIDTH = 50
_PREFIX_COLOR = "lightgreen"


def current_time_str() -> str:
    """Return the local wall-clock time as ``HH:MM:SS``."""
    return time.strftime(TIME_FORMAT, time.localtime())


def open_log(path: str | os.PathLike[str]) -> "HtmlLog":
    """Create (truncating) an HTML log file at *path* and write its header."""
    if path is None:
        raise ValueError("log path must not be None")
    stream = open(path, "w", encoding="utf-8")
    log = HtmlLog(stream)
    log._emit(LOG_HEADER)
    return log


def _caller_location() -> tuple[str, int]:
    """Find the first frame outside this module: (file name, line number)."""
    here = os.path.abspath(__file__)
    frame = inspect.currentframe()
    try:
        while frame is not None and os.path.abspath(frame.f_code.co_filename) == here:
            frame = frame.f_back
        if frame is None:
            return "?", 0
        return os.path.basename(frame.f_code.co_filename), frame.f_lineno
    finally:
        del frame


class HtmlLog:
    """Writes coloured entries to a text stream; a ``None`` stream disables logging."""

    def __init__(self, stream: Optional[IO[str]]) -> None:
        self.stream = stream

    @property
    def enabled(self) -> bool:
        return self.stream is not None

    def _emit(self, text: str) -> None:
        if self.stream is None:
            return
        self.stream.write(text)
        self.stream.flush()

    def write(self, message: str, color: str) -> None:
        """Open a font tag of *color* and write *message* after it."""
        if self.stream is None:
            return
        self._emit(f"<font color={color}>")
        self._emit(message)

    def logf(self, message: str, color: str) -> None:
        """Write a time- and location-stamped entry in *color*."""
        if self.stream is None:
            return
        file_name, line = _caller_location()
        prefix = f"[{current_time_str()}]{{{file_name}({line:<3d})}}: "
        prefix = prefix[: _PREFIX_WIDTH - 1]
        self.write(f"{prefix:<{_PREFIX_WIDTH}}", _PREFIX_COLOR)
        self.write(message, color)
        self._emit("</font>")

    def info(self, message: str) -> None:
        self.logf("\t" + message, "white")

    def error(self, message: str) -> None:
        self.logf("ERROR! " + message, "red")

    def warning(self, message: str) -> None:
        self.logf("WARNING! " + message, "orange")

    def func_start(self, name: str) -> None:
        self.logf(f"{name} started\n", "purple")

    def func_end(self, name: str) -> None:
        self.logf(f"{name} ended\n", "purple")

    def close(self) -> None:
        """Close the underlying stream; later writes are ignored."""
        if self.stream is not None:
            self.stream.close()
            self.stream = None

    def __enter__(self) -> "HtmlLog":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()