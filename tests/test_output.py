import io
import queue
import threading

from gluentmini.config import Config, parse_config
from gluentmini.output import make_output, write_lines


def test_make_output_writes_line_unchanged():
    stream = io.StringIO()
    emit = make_output(Config(), stream)
    emit("[INFO] hello\n")
    emit("[WARN] again\n")
    assert stream.getvalue() == "[INFO] hello\n[WARN] again\n"


def test_unknown_output_type_still_writes_to_stream():
    stream = io.StringIO()
    emit = make_output(parse_config("OUTPUT:\n  TYPE: kafka\n"), stream)
    emit("line\n")
    assert stream.getvalue() == "line\n"


def test_make_output_defaults_to_stdout(capsys):
    make_output(Config())("to stdout\n")
    assert capsys.readouterr().out == "to stdout\n"


def test_write_lines_skips_empty_lines():
    source = queue.Queue()
    stop = threading.Event()
    stream = io.StringIO()
    to_stream = make_output(Config(), stream)

    def emit(line):
        to_stream(line)
        if stream.getvalue().count("\n") >= 2:
            stop.set()

    for line in ["a\n", "", "b\n"]:
        source.put(line)
    guard = threading.Timer(5, stop.set)
    guard.start()
    try:
        write_lines(stop, source, emit)
    finally:
        guard.cancel()
    assert stream.getvalue() == "a\nb\n"
    assert source.empty()