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

# Smallest and largest QR versions covered by the capacity table.
MIN_QR_VERSION = 1
MAX_QR_VERSION = 10

# Mask pattern references defined by the QR standard.
MIN_MASK = 0
MAX_MASK = 7

# Quiet zone and module scale used when nothing else is configured.
DEFAULT_BORDER = 4
DEFAULT_SCALE = 4

# Upper bound for rendered module scale (pixels per module).
MAX_SCALE = 64

# Upper bound for the quiet zone width in modules.
MAX_BORDER = 32

# Payee address length limits (local part and handle).
MAX_VPA_LOCAL_CHARS = 50
MAX_VPA_HANDLE_CHARS = 50


__all__ = [
    "DEFAULT_BORDER",
    "DEFAULT_SCALE",
    "MAX_BORDER",
    "MAX_MASK",
    "MAX_QR_VERSION",
    "MAX_SCALE",
    "MAX_VPA_HANDLE_CHARS",
    "MAX_VPA_LOCAL_CHARS",
    "MIN_MASK",
    "MIN_QR_VERSION",
]
