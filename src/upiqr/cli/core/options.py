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

"""Payment options shared by the commands that build a UPI link."""

from __future__ import annotations

import typer

from ...upi.uri import UpiQrParams

VPA_OPTION = typer.Option(
    ...,
    "--vpa",
    "--pa",
    help="Payee UPI ID (e.g. merchant@upi).",
    rich_help_panel="Payment",
)
NAME_OPTION = typer.Option(
    None,
    "--name",
    "--pn",
    help="Payee display name.",
    rich_help_panel="Payment",
)
AMOUNT_OPTION = typer.Option(
    None,
    "--amount",
    "--am",
    help="Amount; omitted from the link when zero or negative.",
    rich_help_panel="Payment",
)
CURRENCY_OPTION = typer.Option(
    None,
    "--currency",
    "--cu",
    help="Currency code (default from config, INR).",
    rich_help_panel="Payment",
)
NOTE_OPTION = typer.Option(
    None,
    "--note",
    "--tn",
    help="Transaction note.",
    rich_help_panel="Payment",
)
MCC_OPTION = typer.Option(
    None,
    "--mcc",
    "--mc",
    help="Merchant category code.",
    rich_help_panel="Payment",
)
REF_OPTION = typer.Option(
    None,
    "--ref",
    "--tr",
    help="Transaction reference ID.",
    rich_help_panel="Payment",
)


def build_params(
    *,
    vpa: str,
    name: str | None,
    amount: float | None,
    currency: str | None,
    note: str | None,
    mcc: str | None,
    ref: str | None,
    default_currency: str,
) -> UpiQrParams:
    return UpiQrParams(
        vpa=vpa,
        payee_name=name,
        amount=amount,
        currency=currency or default_currency,
        note=note,
        mcc=mcc,
        txn_ref_id=ref,
    )
