"""Wires the generator, tailer, filter, output and offset stages together."""

from __future__ import annotations

import argparse
import queue
import signal
import threading
from pathlib import Path
from typing import Callable

from gluentmini.config import Config, ConfigError, read_config
from gluentmini.filter import filter_lines, make_filter
from gluentmini.generate import LOG_PATH, generate_logs
from gluentmini.offset import STATE_PATH, TEMP_PATH, OffsetError, offset_writer, read_offset
from gluentmini.output import make_output, write_lines
from gluentmini.tailer import FileTailer, input_path

QUEUE_SIZE = 1000
CONFIG_PATH = "config.yml"


def _stage(name: str, target: Callable[[], None]) -> threading.Thread:
    def body() -> None:
        target()
        print(f"{name} goroutine finished.")

    return threading.Thread(target=body, name=name, daemon=True)


def run(
    config: Config,
    stop: threading.Event,
    log_path: str | Path = LOG_PATH,
    state_path: str | Path = STATE_PATH,
    temp_path: str | Path = TEMP_PATH,
) -> None:
    """Run every pipeline stage until ``stop`` is set, then wait for them all."""
    path = input_path(config)
    try:
        start_offset = read_offset(state_path)
    except OffsetError as exc:
        print(f"Error reading offset: {exc}")
        start_offset = 0
    else:
        print(f"Last offset read from file: {start_offset}")
    print(f"Configured file path: {path}")

    lines: queue.Queue = queue.Queue(maxsize=QUEUE_SIZE)
    filtered: queue.Queue = queue.Queue(maxsize=QUEUE_SIZE)
    offsets: queue.Queue = queue.Queue(maxsize=QUEUE_SIZE)

    tailer = FileTailer(path, start_offset)
    predicate = make_filter(config)
    emit = make_output(config)

    threads = [
        _stage("GenLog", lambda: generate_logs(stop, log_path)),
        _stage("TailFile", lambda: tailer.run(stop, lines, offsets)),
        _stage("filter", lambda: filter_lines(stop, lines, filtered, predicate)),
        _stage("output", lambda: write_lines(stop, filtered, emit)),
        _stage("WriterOffset", lambda: offset_writer(stop, offsets, state_path, temp_path)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def main(argv: list[str] | None = None) -> int:
    """Command entry point: load the configuration and run until signalled."""
    parser = argparse.ArgumentParser(prog="gluentmini", description="Tail, filter and print a log file.")
    parser.add_argument("--config", default=CONFIG_PATH, help="path of the YAML configuration file")
    args = parser.parse_args(argv)

    print("Starting the Gluent Mini application...")
    try:
        config = read_config(args.config)
    except (OSError, ConfigError) as exc:
        print(f"Error reading configuration: {exc}")
        return 1
    print(f"Configuration loaded: {config}")

    try:
        input_path(config)
    except ConfigError as exc:
        print(exc)
        return 1

    stop = threading.Event()

    def on_signal(signum: int, frame: object) -> None:
        print("Received shutdown signal, cleaning up...")
        stop.set()
        print("Cleanup complete. Exiting.")

    handled = [signal.SIGINT, signal.SIGTERM]
    previous = {signum: signal.signal(signum, on_signal) for signum in handled}
    try:
        run(config, stop)
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)
    return 0