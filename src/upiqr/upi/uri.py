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

"""UPI deep link construction.

Links follow ``upi://pay?pa={vpa}&pn={name}&am={amount}&cu={currency}&tn={note}...``
with keys always emitted in the same order.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from urllib.parse import quote

UPI_SCHEME = "upi"
UPI_ACTION = "pay"
DEFAULT_CURRENCY = "INR"

# Characters left unescaped by JavaScript's encodeURIComponent besides alphanumerics.
_COMPONENT_SAFE = "!'()*"


@dataclass(frozen=True)
class UpiQrParams:
    vpa: str
    payee_name: str | None = None
    amount: float | Decimal | None = None
    currency: str | None = DEFAULT_CURRENCY
    note: str | None = None
    mcc: str | None = None
    txn_ref_id: str | None = None


def encode_component(value: str) -> str:
    return quote(value, safe=_COMPONENT_SAFE)


def format_amount(amount: float | Decimal) -> str:
    return f"{amount:.2f}"


def build_upi_uri(params: UpiQrParams) -> str:
    parts = [f"pa={encode_component(params.vpa)}"]
    if params.payee_name:
        parts.append(f"pn={encode_component(params.payee_name)}")
    if params.amount is not None and params.amount > 0:
        parts.append(f"am={format_amount(params.amount)}")
    parts.append(f"cu={params.currency or DEFAULT_CURRENCY}")
    if params.note:
        parts.append(f"tn={encode_component(params.note)}")
    if params.mcc:
        parts.append(f"mc={params.mcc}")
    if params.txn_ref_id:
        parts.append(f"tr={encode_component(params.txn_ref_id)}")
    return f"{UPI_SCHEME}://{UPI_ACTION}?" + "&".join(parts)
