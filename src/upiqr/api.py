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

from .qr.codec import QrConfig, make_qr, qr_data_uri
from .qr.symbol import QrSymbol
from .upi.uri import UpiQrParams, build_upi_uri


def encode_upi_qr(params: UpiQrParams, config: QrConfig | None = None) -> str:
    """Build the UPI deep link for params and return it as an embeddable image URI.

    The payee address is not validated here; callers run
    :func:`upiqr.upi.vpa.validate_vpa` first when they need to.
    """
    return qr_data_uri(build_upi_uri(params), config)


def upi_qr_symbol(params: UpiQrParams, config: QrConfig | None = None) -> QrSymbol:
    config = config or QrConfig()
    return make_qr(
        build_upi_uri(params),
        version=config.version,
        mask=config.mask,
        strict=config.strict,
    )
