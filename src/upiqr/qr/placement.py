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

from collections.abc import Iterator, Sequence

from .matrix import TIMING_INDEX, FunctionPatterns


def iter_data_positions(patterns: FunctionPatterns) -> Iterator[tuple[int, int]]:
    """Yield data module coordinates in placement order.

    Column pairs are walked from the right edge to the left, skipping the vertical timing
    column. The first pair runs bottom to top and each following pair reverses direction.
    Within a row the right column of the pair comes first.
    """
    size = patterns.size
    upward = True
    right = size - 1
    while right >= 1:
        if right == TIMING_INDEX:
            right -= 1
        rows = range(size - 1, -1, -1) if upward else range(size)
        for row in rows:
            for col in (right, right - 1):
                if patterns.is_data_module(row, col):
                    yield row, col
        upward = not upward
        right -= 2


def iter_codeword_bits(codewords: Sequence[int]) -> Iterator[int]:
    for codeword in codewords:
        for shift in range(7, -1, -1):
            yield (codeword >> shift) & 1


def place_codewords(patterns: FunctionPatterns, codewords: Sequence[int]) -> list[list[bool]]:
    """Return a module grid with function patterns drawn and codeword bits placed.

    Data cells left over once the stream is exhausted (remainder bits) stay light.
    """
    modules = patterns.base_modules()
    bits = iter_codeword_bits(codewords)
    placed = 0
    for row, col in iter_data_positions(patterns):
        modules[row][col] = bool(next(bits, 0))
        placed += 1
    if placed < len(codewords) * 8:
        raise RuntimeError("codeword stream does not fit the symbol")
    return modules
