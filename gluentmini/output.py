"""Output stage of the pipeline."""

from __future__ import annotations

import queue
import sys
import threading
from typing import Callable, TextIO

from gluentmini.config import Config

_POLL_SECONDS = 0.1


def make_output(config: Config, stream: TextIO | None = None) -> Callable[[str], None]:
    """Return the configured emitter; every output type writes to a text stream."""

    def emit(line: str) -> None:
        target = stream if stream is not None else sys.stdout
        target.write(line)
        target.flush()

    return emit


def write_lines(
    stop: threading.Event,
    source: queue.Queue,
    emit: Callable[[str], None],
) -> None:
    """Pass each non-empty line from ``source`` to ``emit`` until stopped."""
    while not stop.is_set():
        try:
            line = source.get(timeout=_POLL_SECONDS)
        except queue.Empty:
            continue
        try:
            if line:
                emit(line)
        finally:
            source.task_done()