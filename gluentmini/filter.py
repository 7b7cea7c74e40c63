"""Line filtering stage of the pipeline."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from typing import Callable

from gluentmini.config import Config

_POLL_SECONDS = 0.1


@dataclass(frozen=True)
class GrepFilter:
    """Keeps lines containing any of the ``|``-separated keywords."""

    pattern: str = ""
    ignore_case: bool = False

    def matches(self, line: str) -> bool:
        keywords = self.pattern.split("|")
        if self.ignore_case:
            lowered = line.lower()
            return any(keyword.lower() in lowered for keyword in keywords)
        return any(keyword in line for keyword in keywords)

    def __call__(self, line: str) -> bool:
        return self.matches(line)


def make_filter(config: Config) -> GrepFilter:
    """Build the configured filter; every filter type falls back to grep."""
    options = config.filter.options
    return GrepFilter(pattern=options.pattern, ignore_case=options.ignore_case)


def filter_lines(
    stop: threading.Event,
    source: queue.Queue,
    sink: queue.Queue,
    predicate: Callable[[str], bool],
) -> None:
    """Move lines accepted by ``predicate`` from ``source`` to ``sink`` until stopped."""
    while not stop.is_set():
        try:
            line = source.get(timeout=_POLL_SECONDS)
        except queue.Empty:
            continue
        try:
            if predicate(line):
                sink.put(line)
        finally:
            source.task_done()