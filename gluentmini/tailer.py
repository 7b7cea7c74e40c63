"""Input stage: follows a log file line by line from a saved offset."""

from __future__ import annotations

import queue
import threading
import time
from pathlib import Path

from gluentmini.config import Config, ConfigError

FLUSH_EVERY = 1000
FLUSH_INTERVAL = 10.0
IDLE_WAIT = 5.0

_PUT_TIMEOUT = 0.1


def input_path(config: Config) -> str:
    """Return the configured input path, raising ConfigError when it is missing."""
    path = config.input.path
    if not path:
        raise ConfigError("File path is not configured. Please check your configuration.")
    return path


def read_line_at(path: str | Path, offset: int) -> tuple[str, int]:
    """Read one complete line starting at byte ``offset``.

    Returns the line and the offset just past it. When the file cannot be
    opened or holds no complete line at ``offset``, returns ``("", offset)``.
    """
    try:
        handle = open(path, "rb")
    except OSError as exc:
        print(f"Error opening file {path}: {exc}")
        return "", offset
    with handle:
        handle.seek(offset)
        raw = handle.readline()
    if not raw.endswith(b"\n"):
        return "", offset
    return raw.decode("utf-8", errors="replace"), offset + len(raw)


def _put(stop: threading.Event, target: queue.Queue, item: object) -> bool:
    """Put ``item`` on ``target``, giving up once ``stop`` is set."""
    while not stop.is_set():
        try:
            target.put(item, timeout=_PUT_TIMEOUT)
        except queue.Full:
            continue
        return True
    return False


class FileTailer:
    """Follows a file, emitting each new line and, periodically, its offset."""

    def __init__(
        self,
        path: str | Path,
        offset: int = 0,
        flush_every: int = FLUSH_EVERY,
        flush_interval: float = FLUSH_INTERVAL,
        idle_wait: float = IDLE_WAIT,
    ) -> None:
        self.path = path
        self.offset = offset
        self.flush_every = flush_every
        self.flush_interval = flush_interval
        self.idle_wait = idle_wait
        self.processed = 0
        self._last_flush = time.monotonic()

    def _should_flush(self) -> bool:
        return (
            self.processed % self.flush_every == 0
            or time.monotonic() - self._last_flush > self.flush_interval
        )

    def run(self, stop: threading.Event, lines: queue.Queue, offsets: queue.Queue) -> None:
        """Tail the file until ``stop`` is set."""
        while not stop.is_set():
            line, new_offset = read_line_at(self.path, self.offset)
            if not line:
                stop.wait(self.idle_wait)
                continue
            self.processed += 1
            self.offset = new_offset
            if not _put(stop, lines, line):
                break
            if self._should_flush():
                if not _put(stop, offsets, new_offset):
                    break
                self._last_flush = time.monotonic()
        print("Context cancelled, stopping input reading.")