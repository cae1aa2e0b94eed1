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

"""Data masking and format information.

Only the configured mask is applied; no penalty scoring across the eight patterns is
done. Mask 0 is the default and the one every UPI code is generated with.
"""

from __future__ import annotations

from collections.abc import Callable

from ..core.bounds import MAX_MASK, MIN_MASK
from ..core.validation import require_int_range
from .matrix import FunctionPatterns, format_positions

DEFAULT_MASK = 0

# Error correction level M, mask 0.
FORMAT_BITS_M_MASK0 = 0b101010000010010

_EC_LEVEL_BITS = {"L": 0b01, "M": 0b00, "Q": 0b11, "H": 0b10}
_FORMAT_GENERATOR = 0x537
_FORMAT_XOR = 0x5412

MaskPredicate = Callable[[int, int], bool]

MASK_PATTERNS: tuple[MaskPredicate, ...] = (
    lambda r, c: (r + c) % 2 == 0,
    lambda r, c: r % 2 == 0,
    lambda r, c: c % 3 == 0,
    lambda r, c: (r + c) % 3 == 0,
    lambda r, c: (r // 2 + c // 3) % 2 == 0,
    lambda r, c: (r * c) % 2 + (r * c) % 3 == 0,
    lambda r, c: ((r * c) % 2 + (r * c) % 3) % 2 == 0,
    lambda r, c: ((r + c) % 2 + (r * c) % 3) % 2 == 0,
)


def format_info_bits(mask: int, *, error: str = "M") -> int:
    require_int_range(mask, min_val=MIN_MASK, max_val=MAX_MASK, label="mask")
    try:
        level = _EC_LEVEL_BITS[error.upper()]
    except KeyError as exc:
        raise ValueError(f"unsupported error correction level: {error}") from exc
    data = (level << 3) | mask
    remainder = data
    for _ in range(10):
        remainder = (remainder << 1) ^ ((remainder >> 9) * _FORMAT_GENERATOR)
    return ((data << 10) | (remainder & 0x3FF)) ^ _FORMAT_XOR


def apply_mask(
    modules: list[list[bool]],
    patterns: FunctionPatterns,
    mask: int = DEFAULT_MASK,
) -> list[list[bool]]:
    """Return a copy of modules with the mask XORed over data cells only."""
    require_int_range(mask, min_val=MIN_MASK, max_val=MAX_MASK, label="mask")
    predicate = MASK_PATTERNS[mask]
    masked = [list(row) for row in modules]
    for row in range(patterns.size):
        for col in range(patterns.size):
            if patterns.is_data_module(row, col) and predicate(row, col):
                masked[row][col] = not masked[row][col]
    return masked


def write_format_info(modules: list[list[bool]], mask: int = DEFAULT_MASK) -> None:
    bits = format_info_bits(mask)
    for i, (first, second) in enumerate(format_positions(len(modules))):
        dark = bool((bits >> i) & 1)
        for row, col in (first, second):
            modules[row][col] = dark
