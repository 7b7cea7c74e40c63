"""Pipeline configuration loaded from a YAML file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml


class ConfigError(ValueError):
    """Raised when a configuration file is empty or cannot be parsed."""


@dataclass(frozen=True)
class InputConfig:
    type: str = ""
    path: str = ""


@dataclass(frozen=True)
class FilterOptions:
    pattern: str = ""
    ignore_case: bool = False


@dataclass(frozen=True)
class FilterConfig:
    type: str = ""
    options: FilterOptions = field(default_factory=FilterOptions)


@dataclass(frozen=True)
class OutputConfig:
    type: str = ""


@dataclass(frozen=True)
class Config:
    input: InputConfig = field(default_factory=InputConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _section(data: Mapping[str, Any], key: str, source: str) -> Mapping[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"error parsing config file {source}: {key} must be a mapping")
    return value


def _string(data: Mapping[str, Any], key: str, source: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ConfigError(f"error parsing config file {source}: {key} must be a scalar")


def _boolean(data: Mapping[str, Any], key: str, source: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigError(f"error parsing config file {source}: {key} must be a boolean")
    return value


def parse_config(text: str, source: str = "<string>") -> Config:
    """Build a Config from YAML text; ``source`` names it in error messages."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"error parsing config file {source}: {exc}") from exc
    if data is None:
        return Config()
    if not isinstance(data, Mapping):
        raise ConfigError(f"error parsing config file {source}: top level must be a mapping")

    input_section = _section(data, "INPUT", source)
    filter_section = _section(data, "FILTER", source)
    options_section = _section(filter_section, "OPTIONS", source)
    output_section = _section(data, "OUTPUT", source)

    return Config(
        input=InputConfig(
            type=_string(input_section, "TYPE", source),
            path=_string(input_section, "PATH", source),
        ),
        filter=FilterConfig(
            type=_string(filter_section, "TYPE", source),
            options=FilterOptions(
                pattern=_string(options_section, "PATTERN", source),
                ignore_case=_boolean(options_section, "IGNORE_CASE", source),
            ),
        ),
        output=OutputConfig(type=_string(output_section, "TYPE", source)),
    )


def read_config(path: str | Path) -> Config:
    """Read and parse the configuration file at ``path``.

    OS errors from reading the file propagate unchanged.
    """
    text = Path(path).read_text(encoding="utf-8")
    if not text:
        raise ConfigError(f"config file {path} is empty")
    return parse_config(text, str(path))