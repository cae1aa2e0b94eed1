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

"""UPI payment QR codes with a self-contained QR Code encoder."""

from .api import encode_upi_qr, upi_qr_symbol
from .qr.codec import PayloadTooLargeError, QrConfig, make_qr, qr_bytes, qr_data_uri, save_qr
from .qr.symbol import QrSymbol
from .upi.uri import DEFAULT_CURRENCY, UpiQrParams, build_upi_uri
from .upi.vpa import VpaValidation, validate_vpa

__all__ = [
    "DEFAULT_CURRENCY",
    "PayloadTooLargeError",
    "QrConfig",
    "QrSymbol",
    "UpiQrParams",
    "VpaValidation",
    "build_upi_uri",
    "encode_upi_qr",
    "make_qr",
    "qr_bytes",
    "qr_data_uri",
    "save_qr",
    "upi_qr_symbol",
    "validate_vpa",
]
