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

import re
from dataclasses import dataclass

from ..core.bounds import MAX_VPA_HANDLE_CHARS, MAX_VPA_LOCAL_CHARS

_VPA_RE = re.compile(
    rf"^[a-zA-Z0-9][a-zA-Z0-9._-]{{0,{MAX_VPA_LOCAL_CHARS - 1}}}"
    rf"@[a-zA-Z][a-zA-Z0-9]{{0,{MAX_VPA_HANDLE_CHARS - 1}}}$"
)


@dataclass(frozen=True)
class VpaValidation:
    valid: bool
    message: str | None = None

    def __bool__(self) -> bool:
        return self.valid


def validate_vpa(value: str | None) -> VpaValidation:
    """Check a payee address has the ``username@handle`` shape.

    The username is 1-50 characters of letters, digits, dots, underscores and hyphens
    starting with a letter or digit; the handle is 1-50 letters and digits starting with
    a letter.
    """
    if not value or not value.strip():
        return VpaValidation(False, "UPI ID is required")
    trimmed = value.strip()
    if trimmed.count("@") != 1:
        return VpaValidation(
            False, "UPI ID must contain exactly one @ symbol (e.g. name@upi)"
        )
    if not _VPA_RE.match(trimmed):
        return VpaValidation(
            False,
            "Invalid UPI ID format. Expected: username@handle "
            "(e.g. merchant@upi, john.doe@oksbi)",
        )
    return VpaValidation(True)


def require_vpa(value: str | None) -> str:
    result = validate_vpa(value)
    if not result.valid:
        raise ValueError(result.message)
    return (value or "").strip()
