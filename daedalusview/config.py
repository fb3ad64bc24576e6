"""Reading the display settings file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

_INT = re.compile(r"\s*([+-]?\d+)")


class ConfigError(ValueError):
    """The display settings could not be read."""


@dataclass(frozen=True)
class DisplayConfig:
    width: int
    height: int
    window_mode: str = "w"
    draw_logo: str = "t"
    theme_index: int = 0


def _leading_int(text: str) -> tuple[int, str]:
    match = _INT.match(text)
    if match is None:
        return 0, text
    return int(match.group(1)), text[match.end():]


def _after_colon(line: str) -> str:
    _, colon, rest = line.partition(":")
    if not colon:
        raise ConfigError(f"malformed setting line: {line!r}")
    return rest


def _first_char(line: str) -> str:
    value = _after_colon(line)
    if not value:
        raise ConfigError(f"missing value in line: {line!r}")
    return value[0]


def parse_config(text: str, header_size: int) -> DisplayConfig:
    """Parse settings that follow a header of ``header_size`` characters and its separator."""
    lines = text[header_size + 1:].splitlines()
    if len(lines) < 4:
        raise ConfigError("settings file is incomplete")
    resolution, mode, logo, theme = lines[:4]
    width, rest = _leading_int(_after_colon(resolution))
    height, _ = _leading_int(rest[1:])
    if width == 0 or height == 0:
        raise ConfigError("screen size must be non-zero")
    theme_index, _ = _leading_int(_after_colon(theme))
    return DisplayConfig(
        width=width,
        height=height,
        window_mode=_first_char(mode),
        draw_logo=_first_char(logo),
        theme_index=theme_index,
    )


def load_config(path, header_size: int) -> DisplayConfig:
    """Read and parse the settings file at ``path``."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    return parse_config(text, header_size)