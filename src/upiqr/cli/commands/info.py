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

from ...qr.capacity import ERROR_LEVEL, select_version, version_info
from ...qr.codec import make_qr
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
from ..ui import console, field_table


def register(app: typer.Typer) -> None:
    app.command(help="Show the QR version and capacity used for a payment link.")(info)


def info(
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
        link = build_upi_uri(params)
        qr_config = config.qr_config
        symbol = make_qr(link, version=qr_config.version, mask=qr_config.mask)
        details = (
            version_info(qr_config.version)
            if qr_config.version is not None
            else select_version(symbol.payload_length)
        )

        rows = [
            ("Link", link),
            ("Payload bytes", str(symbol.payload_length)),
            ("Version", str(symbol.version)),
            ("Modules", f"{symbol.size} x {symbol.size}"),
            ("Error correction", ERROR_LEVEL),
            ("Byte capacity", str(details.byte_capacity)),
            ("Blocks", ", ".join(f"{data}+{ec}" for data, ec in details.blocks)),
            ("Mask", str(symbol.mask)),
            ("Fits", "no" if symbol.overflow else "yes"),
        ]
        console.print(field_table("QR symbol", rows))

    _run_cli(ctx, _run)
