import pytest

from gluentmini.config import (
    Config,
    ConfigError,
    FilterOptions,
    parse_config,
    read_config,
)

FULL = """\
INPUT:
  TYPE: file
  PATH: ./testlog.log
FILTER:
  TYPE: grep
  OPTIONS:
    PATTERN: ERROR|FATAL
    IGNORE_CASE: true
OUTPUT:
  TYPE: stdout
"""


def test_read_full_config(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text(FULL)
    config = read_config(path)
    assert config.input.type == "file"
    assert config.input.path == "./testlog.log"
    assert config.filter.type == "grep"
    assert config.filter.options == FilterOptions(pattern="ERROR|FATAL", ignore_case=True)
    assert config.output.type == "stdout"


def test_missing_sections_use_defaults():
    config = parse_config("INPUT:\n  PATH: a.log\n")
    assert config.input.path == "a.log"
    assert config.filter.type == ""
    assert config.filter.options.ignore_case is False
    assert config.output == Config().output


def test_comment_only_gives_empty_config():
    assert parse_config("# nothing here\n") == Config()


def test_empty_file_raises(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("")
    with pytest.raises(ConfigError, match="is empty"):
        read_config(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_config(tmp_path / "absent.yml")


def test_invalid_yaml_raises():
    with pytest.raises(ConfigError, match="error parsing config file cfg"):
        parse_config("INPUT: [unclosed", "cfg")


def test_non_mapping_top_level_raises():
    with pytest.raises(ConfigError):
        parse_config("- a\n- b\n")


def test_wrong_boolean_type_raises():
    with pytest.raises(ConfigError):
        parse_config("FILTER:\n  OPTIONS:\n    IGNORE_CASE: sometimes\n")