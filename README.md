# gluentmini

A tiny log pipeline. It follows one log file line by line, keeps the lines
that contain any of a set of keywords, prints them to standard output, and
records how far it has read so that a restart picks up where it left off.
For demonstration it also appends a random log line to `testlog.log` in the
current directory once a second.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Configuration

By default the program reads `config.yml` from the current directory; the
`--config` option names another file:

```yaml
INPUT:
  TYPE: file
  PATH: ./testlog.log
FILTER:
  TYPE: grep
  OPTIONS:
    PATTERN: "ERROR|FATAL"
    IGNORE_CASE: false
OUTPUT:
  TYPE: stdout
```

- `INPUT.PATH` is the file to follow. It is required; without it the
  command prints a message and exits with status 1. `INPUT.TYPE` is read
  but not used.
- `FILTER.OPTIONS.PATTERN` is a list of keywords separated by `|`. A line
  is kept when it contains any one of them. With `IGNORE_CASE: true` the
  comparison ignores letter case. Keyword matching is the only filter; any
  `FILTER.TYPE`, or none, means the same.
- `OUTPUT.TYPE` is read but every value, including none, prints the kept
  lines to standard output.

A missing, empty or malformed config file is reported and the command
exits with status 1.

## Running

    gluentmini
    gluentmini --config path/to/config.yml

Stop it with Ctrl-C or SIGTERM; every stage then finishes and the command
returns.

## Files it uses

All paths are relative to the current directory.

- `testlog.log` – lines appended by the built-in generator, in the form
  `2024-01-01 12:00:00 [INFO] aB3dE5fG7hJ9kL1mN3pQ`.
- `offset.state` – the byte offset reached in the input file. It is written
  to `offset.tmp` first and then renamed into place. It is saved when the
  count of lines read reaches a multiple of 1000, or when a line is read
  more than ten seconds after the last save. A missing state file means
  reading starts at the beginning.

Only complete, newline-terminated lines are read. When no complete line is
available, the tailer waits five seconds before trying again.

## Using it as a library

- `gluentmini.config.read_config(path)` and `parse_config(text, source)`
  build a `Config` (with `InputConfig`, `FilterConfig`, `FilterOptions` and
  `OutputConfig`), raising `ConfigError` on an empty or malformed file.
- `gluentmini.offset.read_offset(path)` and `write_offset(offset, path,
  temp_path)` load and store the saved position, raising `OffsetError` on
  failure; `offset_writer(stop, offsets, path, temp_path)` persists offsets
  taken from a queue until a `threading.Event` is set.
- `gluentmini.filter.make_filter(config)` builds a `GrepFilter`;
  `filter_lines(stop, source, sink, predicate)` moves accepted lines
  between queues.
- `gluentmini.output.make_output(config, stream)` returns a function that
  writes a line to `stream` (standard output by default);
  `write_lines(stop, source, emit)` passes non-empty lines to it.
- `gluentmini.generate` offers `random_message`, `random_log_line`,
  `append_log_line` and `generate_logs`.
- `gluentmini.tailer.read_line_at(path, offset)` reads one line at a byte
  offset; `FileTailer(path, offset, ...)` follows a file and, through
  `run(stop, lines, offsets)`, hands out lines and offsets on queues.
  `input_path(config)` returns the configured input path or raises
  `ConfigError`.
- `gluentmini.app.run(config, stop, log_path, state_path, temp_path)` runs
  all stages in threads until `stop` is set.

## What it does not do

The input is always a local file and the output always a text stream;
there are no other input or output types, and no filter other than keyword
matching. The demonstration log generator always runs alongside the
pipeline and cannot be switched off from the configuration.