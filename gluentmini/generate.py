"""Synthetic log generator used to feed the pipeline."""

from __future__ import annotations

import random
import string
import threading
from datetime import datetime
from pathlib import Path

LOG_LEVELS = ("DEBUG", "INFO", "WARN", "ERROR", "FATAL")
CHARSET = string.ascii_lowercase + string.ascii_uppercase + string.digits
LOG_PATH = "testlog.log"
MESSAGE_LENGTH = 20

_default_rng = random.Random()


def random_message(length: int = MESSAGE_LENGTH, rng: random.Random | None = None) -> str:
    """Return ``length`` random characters drawn from CHARSET."""
    rng = rng or _default_rng
    return "".join(rng.choice(CHARSET) for _ in range(length))


def random_log_line(
    now: datetime | None = None, rng: random.Random | None = None
) -> str:
    """Return one newline-terminated log line with a random level and message."""
    rng = rng or _default_rng
    timestamp = (now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    level = rng.choice(LOG_LEVELS)
    return f"{timestamp} [{level}] {random_message(MESSAGE_LENGTH, rng)}\n"


def append_log_line(path: str | Path = LOG_PATH, rng: random.Random | None = None) -> str:
    """Append a random log line to ``path``, creating it if needed, and return it."""
    line = random_log_line(rng=rng)
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(line)
    return line


def generate_logs(
    stop: threading.Event, path: str | Path = LOG_PATH, interval: float = 1.0
) -> None:
    """Append a log line every ``interval`` seconds until ``stop`` is set."""
    while not stop.is_set():
        append_log_line(path)
        stop.wait(interval)
    print("Context cancelled, stopping log generation.")