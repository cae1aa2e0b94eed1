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

from ...upi.vpa import validate_vpa
from ..core.common import GlobalOptions, _run_cli
from ..ui import print_status


def register(app: typer.Typer) -> None:
    app.command(help="Check that a UPI ID has the username@handle shape.")(validate)


def validate(
    ctx: typer.Context,
    vpa: str = typer.Argument(..., help="UPI ID to check."),
) -> None:
    def _run(options: GlobalOptions) -> int:
        result = validate_vpa(vpa)
        if not result.valid:
            print_status("Invalid", result.message, style="error", err=True)
            return 1
        if not options.quiet:
            print_status("Valid", vpa.strip(), style="ok")
        return 0

    _run_cli(ctx, _run)
