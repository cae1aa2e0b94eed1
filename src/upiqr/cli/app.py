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

import typer
from rich.traceback import install as install_rich_traceback

from ..config import init_user_config
from . import command_registry
from .core.common import GlobalOptions, _fail, _get_version
from .ui import configure_ui, console

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    help="Build UPI payment links and render them as QR codes.",
)

GLOBAL_PANEL = "Global"


def _version_callback(value: bool) -> None:
    if not value:
        return
    console.print(f"upiqr {_get_version()}")
    raise typer.Exit()


def run_startup(
    *,
    quiet: bool,
    no_color: bool,
    debug: bool,
    init_config: bool,
) -> bool:
    """Apply process-wide switches; return True when the invocation is already done."""
    configure_ui(no_color=no_color)
    if debug:
        install_rich_traceback(show_locals=True)
    if not init_config:
        return False
    config_path = init_user_config()
    if not quiet:
        console.print(f"User config ready at {config_path}")
    return True


@app.callback(invoke_without_command=True)
def cli(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Config TOML to use instead of $UPIQR_CONFIG or the user config.",
        rich_help_panel=GLOBAL_PANEL,
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Print only links, paths and errors.",
        rich_help_panel=GLOBAL_PANEL,
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Plain terminal output.",
        rich_help_panel=GLOBAL_PANEL,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Raise errors with a full traceback.",
        rich_help_panel=GLOBAL_PANEL,
    ),
    init_config: bool = typer.Option(
        False,
        "--init-config",
        help="Write the default config to the user config directory and exit.",
        is_eager=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Print the installed version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    del version
    try:
        done = run_startup(
            quiet=quiet,
            no_color=no_color,
            debug=debug,
            init_config=init_config,
        )
    except (OSError, RuntimeError, ValueError) as exc:
        raise _fail(exc) from exc
    if done:
        raise typer.Exit()
    ctx.obj = GlobalOptions(config=config, debug=debug, quiet=quiet, no_color=no_color)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


command_registry.register(app)


def main() -> None:
    app()
