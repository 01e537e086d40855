"""Logging setup for the contrast widget.

`configure_logging` installs console output at the requested level and
attaches a bounded in-memory buffer to the root logger. The launcher dumps
that buffer as JSON Lines on exit when `--export-logs PATH` is given, so
rejected entries and state fallbacks of a session can be inspected later.
"""

from __future__ import annotations

import json
import logging
from collections import deque
from pathlib import Path
from threading import RLock
from typing import Deque, Dict, List, Optional

__all__ = ["SessionLogBuffer", "configure_logging", "get_session_buffer"]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class SessionLogBuffer(logging.Handler):
    """Keeps the last *capacity* records of the session as plain dicts."""

    def __init__(self, capacity: int = 500) -> None:
        super().__init__(level=logging.DEBUG)
        self._rows_lock = RLock()
        self._rows: Deque[Dict[str, object]] = deque(maxlen=capacity)

    def emit(self, record: logging.LogRecord) -> None:  # noqa: D401
        row = {
            "created": record.created,
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "line": record.lineno,
        }
        with self._rows_lock:
            self._rows.append(row)

    def rows(self, min_level: int = logging.NOTSET) -> List[Dict[str, object]]:
        with self._rows_lock:
            data = list(self._rows)
        return [r for r in data if logging.getLevelName(r["level"]) >= min_level]

    def export_jsonl(self, path: str | Path, *, min_level: int = logging.NOTSET) -> int:
        """Write buffered records to *path* (one JSON object per line).

        Returns number of lines written.
        """
        rows = self.rows(min_level)
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8") as fh:
            for row in rows:
                fh.write(json.dumps(row, sort_keys=True) + "\n")
        return len(rows)


_buffer: Optional[SessionLogBuffer] = None


def get_session_buffer() -> SessionLogBuffer:
    global _buffer
    if _buffer is None:
        _buffer = SessionLogBuffer()
    return _buffer


def configure_logging(level: str = "INFO") -> SessionLogBuffer:
    """Install console logging at *level* and attach the session buffer."""
    lvl = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
    buffer = get_session_buffer()
    for handler in root.handlers:
        if handler is not buffer:
            handler.setLevel(lvl)
    if buffer not in root.handlers:
        root.addHandler(buffer)
    # The buffer sees DEBUG records; console handlers keep their own level
    root.setLevel(logging.DEBUG)
    return buffer
