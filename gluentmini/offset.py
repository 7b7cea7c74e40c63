"""Persisting and restoring the read position of the tailed file."""

from __future__ import annotations

import os
import queue
import re
import threading
from pathlib import Path

STATE_PATH = "offset.state"
TEMP_PATH = "offset.tmp"

_POLL_SECONDS = 0.1
_LEADING_INT = re.compile(r"[ \t]*([+-]?\d+)")


class OffsetError(OSError):
    """Raised when the offset file cannot be read or written."""


def read_offset(path: str | Path = STATE_PATH) -> int:
    """Return the stored offset, or 0 when no state file exists."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except FileNotFoundError:
        return 0
    except OSError as exc:
        raise OffsetError(f"error opening offset file {path}: {exc}") from exc
    match = _LEADING_INT.match(text)
    if match is None:
        raise OffsetError(f"error reading offset from file {path}: expected integer")
    return int(match.group(1))


def write_offset(
    offset: int,
    path: str | Path = STATE_PATH,
    temp_path: str | Path = TEMP_PATH,
) -> None:
    """Write ``offset`` to a temporary file and move it over ``path``."""
    try:
        with open(temp_path, "w", encoding="utf-8") as handle:
            handle.write(f"{offset}\n")
    except OSError as exc:
        raise OffsetError(f"error writing to file {temp_path}: {exc}") from exc
    try:
        os.replace(temp_path, path)
    except OSError as exc:
        raise OffsetError(f"error renaming {temp_path} to {path}: {exc}") from exc


def offset_writer(
    stop: threading.Event,
    offsets: queue.Queue,
    path: str | Path = STATE_PATH,
    temp_path: str | Path = TEMP_PATH,
) -> None:
    """Persist offsets taken from ``offsets`` until ``stop`` is set.

    Zero offsets are ignored; write failures are reported and skipped.
    """
    while not stop.is_set():
        try:
            offset = offsets.get(timeout=_POLL_SECONDS)
        except queue.Empty:
            continue
        try:
            if offset != 0:
                write_offset(offset, path, temp_path)
        except OffsetError as exc:
            print(f"Error writing offset: {exc}")
        finally:
            offsets.task_done()
    print("Context cancelled, stopping offset writing.")