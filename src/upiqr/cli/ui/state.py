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

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

from rich.console import Console
from rich.theme import Theme

NO_COLOR_ENV = "NO_COLOR"

THEME = Theme(
    {
        "field": "bold cyan",
        "ok": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
    }
)


def stream_is_tty(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def _make_console(*, stderr: bool, no_color: bool) -> Console:
    # UPI IDs and links must print exactly as built, so no highlighting or wrapping.
    raw = sys.__stderr__ if stderr else sys.__stdout__
    return Console(
        stderr=stderr,
        theme=THEME,
        force_terminal=stream_is_tty(raw) or None,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
    )


@dataclass
class UIContext:
    no_color: bool = False
    console: Console = field(init=False)
    console_err: Console = field(init=False)

    def __post_init__(self) -> None:
        self.console = _make_console(stderr=False, no_color=self.no_color)
        self.console_err = _make_console(stderr=True, no_color=self.no_color)

    def set_no_color(self, no_color: bool) -> None:
        self.no_color = no_color
        self.console.no_color = no_color
        self.console_err.no_color = no_color


DEFAULT_CONTEXT = UIContext(no_color=bool(os.environ.get(NO_COLOR_ENV)))


def get_context() -> UIContext:
    return DEFAULT_CONTEXT
