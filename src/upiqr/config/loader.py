#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

"""Load the TOML config into typed defaults for the encoder, the UPI builder and the CLI.

Every ``[qr]`` key is optional; a missing key keeps the ``QrConfig`` default. Values may be
written as TOML strings (``scale = "6"``) since users often copy them from the command line.
"""

from __future__ import annotations

import functools
import tomllib
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..core.bounds import (
    MAX_BORDER,
    MAX_MASK,
    MAX_QR_VERSION,
    MAX_SCALE,
    MIN_MASK,
    MIN_QR_VERSION,
)
from ..core.validation import is_exact_int, require_choice, require_int_range
from ..qr.codec import OUTPUT_KINDS, Color, QrConfig
from ..render.png import MODULE_SHAPES
from ..upi.uri import DEFAULT_CURRENCY
from .installer import resolve_config_path

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})
_AUTO_VERSION_WORDS = frozenset({"", "auto"})
_NO_COLOR_WORDS = frozenset({"none", "transparent"})


@dataclass(frozen=True)
class UpiDefaults:
    currency: str = DEFAULT_CURRENCY


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class AppConfig:
    path: Path
    qr_config: QrConfig = field(default_factory=QrConfig)
    upi: UpiDefaults = field(default_factory=UpiDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    with config_path.open("rb") as handle:
        data = tomllib.load(handle)
    return AppConfig(
        path=config_path,
        qr_config=build_qr_config(_section(data, "qr")),
        upi=UpiDefaults(**_parse_section(_section(data, "upi"), _UPI_FIELDS)),
        ui=UiDefaults(**_parse_section(_section(data, "ui"), _UI_FIELDS)),
    )


def build_qr_config(cfg: Mapping[str, Any] | None = None) -> QrConfig:
    return QrConfig(**_parse_section(cfg or {}, _QR_FIELDS))


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = data.get(name)
    return value if isinstance(value, dict) else {}


def _parse_section(
    cfg: Mapping[str, Any],
    fields: Mapping[str, Callable[[Any], Any]],
) -> dict[str, Any]:
    return {key: parse(cfg[key]) for key, parse in fields.items() if cfg.get(key) is not None}


def _as_int(value: object, *, name: str) -> int:
    if is_exact_int(value):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip():
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValueError(f"{name} must be an integer")


def _int_in_range(value: object, *, name: str, low: int, high: int) -> int:
    return require_int_range(_as_int(value, name=name), min_val=low, max_val=high, label=name)


def _as_bool(value: object, *, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if is_exact_int(value) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise ValueError(f"{name} must be a boolean")


def _one_of(value: object, *, name: str, choices: tuple[str, ...]) -> str:
    return require_choice(value, choices, label=name)


def _version(value: object) -> int | None:
    if isinstance(value, str) and value.strip().lower() in _AUTO_VERSION_WORDS:
        return None
    number = _as_int(value, name="qr.version")
    if number == 0:
        return None
    return require_int_range(
        number, min_val=MIN_QR_VERSION, max_val=MAX_QR_VERSION, label="qr.version"
    )


def _color(value: object) -> Color:
    """Colour names pass through; RGB(A) arrays become tuples; "none" means the default."""
    if isinstance(value, str):
        return None if value.strip().lower() in _NO_COLOR_WORDS else value
    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        return tuple(int(channel) for channel in value)
    return None


def _currency(value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError("upi.currency must be a non-empty string")
    return value.strip().upper()


_QR_FIELDS: dict[str, Callable[[Any], Any]] = {
    "scale": functools.partial(_int_in_range, name="qr.scale", low=1, high=MAX_SCALE),
    "border": functools.partial(_int_in_range, name="qr.border", low=0, high=MAX_BORDER),
    "kind": functools.partial(_one_of, name="qr.kind", choices=OUTPUT_KINDS),
    "dark": _color,
    "light": _color,
    "module_shape": functools.partial(_one_of, name="qr.module_shape", choices=MODULE_SHAPES),
    "version": _version,
    "mask": functools.partial(_int_in_range, name="qr.mask", low=MIN_MASK, high=MAX_MASK),
    "strict": functools.partial(_as_bool, name="qr.strict"),
}

_UPI_FIELDS: dict[str, Callable[[Any], Any]] = {
    "currency": _currency,
}

_UI_FIELDS: dict[str, Callable[[Any], Any]] = {
    "quiet": functools.partial(_as_bool, name="ui.quiet"),
    "no_color": functools.partial(_as_bool, name="ui.no_color"),
}
