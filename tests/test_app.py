import threading
import time

import pytest

from gluentmini.app import main, run
from gluentmini.config import Config, ConfigError, FilterConfig, FilterOptions, InputConfig


def _config(path, pattern):
    return Config(
        input=InputConfig(type="file", path=str(path)),
        filter=FilterConfig(type="grep", options=FilterOptions(pattern=pattern)),
    )


def _run_until(capsys, config, tmp_path, wanted, timeout=10.0):
    stop = threading.Event()
    thread = threading.Thread(
        target=run,
        args=(config, stop),
        kwargs={
            "log_path": tmp_path / "generated.log",
            "state_path": tmp_path / "offset.state",
            "temp_path": tmp_path / "offset.tmp",
        },
        daemon=True,
    )
    thread.start()
    output = ""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline and wanted not in output:
        time.sleep(0.05)
        output += capsys.readouterr().out
    stop.set()
    thread.join(timeout=10)
    output += capsys.readouterr().out
    return output, thread


def test_run_filters_lines_to_stdout(tmp_path, capsys):
    log = tmp_path / "input.log"
    log.write_text("2024 [INFO] fine\n2024 [ERROR] broken\n", encoding="utf-8")
    output, thread = _run_until(capsys, _config(log, "ERROR"), tmp_path, "[ERROR] broken")
    assert not thread.is_alive()
    assert "2024 [ERROR] broken\n" in output
    assert "[INFO] fine" not in output
    assert (tmp_path / "generated.log").exists()


def test_run_resumes_from_saved_offset(tmp_path, capsys):
    log = tmp_path / "input.log"
    log.write_text("ERROR old\nERROR new\n", encoding="utf-8")
    (tmp_path / "offset.state").write_text(f"{len(b'ERROR old' + b'\n')}\n", encoding="utf-8")
    output, thread = _run_until(capsys, _config(log, "ERROR"), tmp_path, "ERROR new")
    assert not thread.is_alive()
    assert "ERROR new" in output
    assert "ERROR old" not in output
    assert "Last offset read from file: 10" in output


def test_run_without_input_path_raises(tmp_path):
    stop = threading.Event()
    with pytest.raises(ConfigError):
        run(Config(), stop, tmp_path / "g.log", tmp_path / "s", tmp_path / "t")


def test_main_missing_config_returns_error(tmp_path, capsys):
    code = main(["--config", str(tmp_path / "absent.yml")])
    assert code == 1
    assert "Error reading configuration" in capsys.readouterr().out


def test_main_empty_config_returns_error(tmp_path, capsys):
    config_file = tmp_path / "config.yml"
    config_file.write_text("", encoding="utf-8")
    assert main(["--config", str(config_file)]) == 1
    assert "is empty" in capsys.readouterr().out


def test_main_config_without_path_returns_error(tmp_path, capsys):
    config_file = tmp_path / "config.yml"
    config_file.write_text("OUTPUT:\n  TYPE: stdout\n", encoding="utf-8")
    assert main(["--config", str(config_file)]) == 1
    assert "File path is not configured" in capsys.readouterr().out