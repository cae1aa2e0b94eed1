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

from pathlib import Path

import typer

from ...qr.scan import scan_qr_payloads
from ..core.common import GlobalOptions, _run_cli


def register(app: typer.Typer) -> None:
    app.command(help="Decode QR payloads from image files or directories.")(scan)


def scan(
    ctx: typer.Context,
    paths: list[Path] = typer.Argument(..., help="Images or directories of images."),
) -> None:
    def _run(_options: GlobalOptions) -> None:
        for payload in scan_qr_payloads(paths):
            typer.echo(payload.decode("utf-8", errors="replace"))

    _run_cli(ctx, _run)
