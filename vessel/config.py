"""User options for vessel views.

Options live in frozen dataclasses. Defaults can be overridden from the
persisted JSON config file and from per-call option dicts. Malformed or
missing config and wrongly typed values fall back to the defaults.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields, is_dataclass, replace
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from .jumplist.formatter import format_jump

APP_NAME = "vessel"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

_INVALID = object()


@dataclass(frozen=True)
class JumpsMappings:
    close: tuple[str, ...] = ("q", "<esc>")
    clear: tuple[str, ...] = ("C",)
    jump: tuple[str, ...] = ("<cr>", "l")
    ctrl_o: tuple[str, ...] = ("<c-o>",)
    ctrl_i: tuple[str, ...] = ("<c-i>",)


@dataclass(frozen=True)
class JumpsHighlights:
    indicator: str = "Special"
    position: str = "Number"
    path: str = "Directory"
    lnum: str = "LineNr"
    col: str = "Comment"
    line: str = "Normal"


@dataclass(frozen=True)
class JumpsFormatters:
    jump: Callable[..., Any] = format_jump


@dataclass(frozen=True)
class JumpsConfig:
    real_positions: bool = False
    filter_empty_lines: bool = True
    highlight_source: bool = True
    not_found: str = "Jump list empty"
    indicator: tuple[str, ...] = (">", " ")
    mappings: JumpsMappings = field(default_factory=JumpsMappings)
    formatters: JumpsFormatters = field(default_factory=JumpsFormatters)
    highlights: JumpsHighlights = field(default_factory=JumpsHighlights)


@dataclass(frozen=True)
class WindowConfig:
    max_height: int = 30


@dataclass(frozen=True)
class CommandsConfig:
    view_jumps: str = "Jumps"


@dataclass(frozen=True)
class Config:
    create_commands: bool = False
    commands: CommandsConfig = field(default_factory=CommandsConfig)
    window: WindowConfig = field(default_factory=WindowConfig)
    jump_callback: Callable[..., Any] | None = None
    highlight_on_jump: bool = False
    highlight_timeout: int = 250
    jumps: JumpsConfig = field(default_factory=JumpsConfig)


def _coerce(current: object, value: object) -> object:
    """Return ``value`` when it fits the type of ``current``, else ``_INVALID``."""
    if is_dataclass(current):
        if isinstance(value, Mapping):
            return apply_overrides(current, value)
        return _INVALID
    if isinstance(current, bool):
        return value if isinstance(value, bool) else _INVALID
    if isinstance(current, int):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return _INVALID
        return value
    if isinstance(current, str):
        return value if isinstance(value, str) else _INVALID
    if isinstance(current, tuple):
        if isinstance(value, str):
            return (value,)
        if isinstance(value, (list, tuple)) and value and all(isinstance(item, str) for item in value):
            return tuple(value)
        return _INVALID
    if current is None or callable(current):
        if value is None and current is None:
            return None
        return value if callable(value) else _INVALID
    return _INVALID


def apply_overrides(config, overrides: Mapping[str, object]):
    """Return a copy of dataclass ``config`` with valid ``overrides`` applied.

    Nested dataclasses take nested dicts. Unknown keys and values of the
    wrong type are ignored.
    """
    names = {item.name for item in fields(config)}
    changes: dict[str, object] = {}
    for key, value in overrides.items():
        if key not in names:
            continue
        coerced = _coerce(getattr(config, key), value)
        if coerced is not _INVALID:
            changes[key] = coerced
    return replace(config, **changes) if changes else config


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


_defaults = Config()


def load(opts: Mapping[str, object] | None = None) -> Config:
    """Build defaults from the config file plus ``opts`` and keep them."""
    global _defaults
    config = apply_overrides(Config(), load_config())
    if opts:
        config = apply_overrides(config, opts)
    _defaults = config
    return config


def get(opts: Mapping[str, object] | None = None) -> Config:
    """Return current defaults with per-call ``opts`` applied."""
    if not opts:
        return _defaults
    return apply_overrides(_defaults, opts)


def reset() -> None:
    global _defaults
    _defaults = Config()
