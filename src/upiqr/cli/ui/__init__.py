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

from collections.abc import Iterable

from rich.markup import escape
from rich.table import Table

from .state import THEME, UIContext, get_context

DEFAULT_CONTEXT = get_context()
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def configure_ui(*, no_color: bool, context: UIContext | None = None) -> None:
    (context or DEFAULT_CONTEXT).set_no_color(no_color)


def print_status(
    label: str,
    message: str,
    *,
    style: str,
    err: bool = False,
    context: UIContext | None = None,
) -> None:
    """Print ``Label: message`` with the label styled, on stdout or stderr."""
    context = context or DEFAULT_CONTEXT
    target = context.console_err if err else context.console
    target.print(f"[{style}]{label}:[/{style}] {escape(message)}")


def field_table(title: str, rows: Iterable[tuple[str, str]]) -> Table:
    table = Table(title=title, show_header=False, title_style="field")
    table.add_column("Field", style="field", no_wrap=True)
    table.add_column("Value", overflow="fold")
    for name, value in rows:
        table.add_row(name, escape(value))
    return table


__all__ = [
    "THEME",
    "UIContext",
    "configure_ui",
    "console",
    "console_err",
    "field_table",
    "print_status",
]
