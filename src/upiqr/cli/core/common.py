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

import importlib.metadata
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import typer
from rich.traceback import install as install_rich_traceback

from ...config import AppConfig, load_app_config
from ..ui import configure_ui, print_status

# Errors a command reports as a one-line message; anything else is a bug and propagates.
USER_ERRORS = (OSError, RuntimeError, ValueError, TypeError, LookupError)
USER_ERROR_EXIT = 2


@dataclass(frozen=True)
class GlobalOptions:
    config: str | None = None
    debug: bool = False
    quiet: bool = False
    no_color: bool = False


def _options(ctx: typer.Context) -> GlobalOptions:
    obj = ctx.find_object(GlobalOptions)
    return obj if obj is not None else GlobalOptions()


def _fail(exc: BaseException) -> typer.Exit:
    print_status("Error", str(exc), style="error", err=True)
    return typer.Exit(code=USER_ERROR_EXIT)


def _run_cli(ctx: typer.Context, func: Callable[[GlobalOptions], Any]) -> None:
    """Run a command body, turning user errors into exit code 2 unless --debug is set.

    A non-zero integer returned by ``func`` becomes the process exit code.
    """
    options = _options(ctx)
    if options.debug:
        install_rich_traceback(show_locals=True)
    try:
        status = func(options)
    except USER_ERRORS as exc:
        if options.debug:
            raise
        raise _fail(exc) from exc
    if isinstance(status, int) and status:
        raise typer.Exit(code=status)


def _load_config(options: GlobalOptions) -> AppConfig:
    config = load_app_config(options.config)
    if config.ui.no_color and not options.no_color:
        configure_ui(no_color=True)
    return config


def _is_quiet(options: GlobalOptions, config: AppConfig | None = None) -> bool:
    return options.quiet or (config is not None and config.ui.quiet)


def _get_version() -> str:
    try:
        return importlib.metadata.version("upiqr")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"
