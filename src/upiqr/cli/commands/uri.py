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

from ...upi.uri import build_upi_uri
from ..core.common import GlobalOptions, _load_config, _run_cli
from ..core.options import (
    AMOUNT_OPTION,
    CURRENCY_OPTION,
    MCC_OPTION,
    NAME_OPTION,
    NOTE_OPTION,
    REF_OPTION,
    VPA_OPTION,
    build_params,
)

_URI_HELP = (
    "Print the UPI deep link for a payment.\n\n"
    "Example:\n"
    "  upiqr uri --vpa merchant@upi --amount 250 --note Test\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_URI_HELP)(uri)


def uri(
    ctx: typer.Context,
    vpa: str = VPA_OPTION,
    name: str | None = NAME_OPTION,
    amount: float | None = AMOUNT_OPTION,
    currency: str | None = CURRENCY_OPTION,
    note: str | None = NOTE_OPTION,
    mcc: str | None = MCC_OPTION,
    ref: str | None = REF_OPTION,
) -> None:
    def _run(options: GlobalOptions) -> None:
        config = _load_config(options)
        params = build_params(
            vpa=vpa,
            name=name,
            amount=amount,
            currency=currency,
            note=note,
            mcc=mcc,
            ref=ref,
            default_currency=config.upi.currency,
        )
        typer.echo(build_upi_uri(params))

    _run_cli(ctx, _run)
