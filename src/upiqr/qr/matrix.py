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

"""Function patterns of a QR symbol.

The template built here is computed once per encode and shared by the data placer and
the masker: every cell that is not :attr:`Cell.UNSET` is a function module and is never
touched by data placement or masking.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from ..core.bounds import MAX_QR_VERSION, MIN_QR_VERSION
from ..core.validation import require_int_range
from .capacity import symbol_side

FINDER_SIZE = 7
ALIGNMENT_RADIUS = 2
TIMING_INDEX = 6
FORMAT_BITS = 15
VERSION_BITS = 18
VERSION_INFO_MIN = 7
_VERSION_GENERATOR = 0x1F25

# Alignment pattern centre coordinates per version (rows and columns alike).
ALIGNMENT_POSITIONS: dict[int, tuple[int, ...]] = {
    1: (),
    2: (6, 18),
    3: (6, 22),
    4: (6, 26),
    5: (6, 30),
    6: (6, 34),
    7: (6, 22, 38),
    8: (6, 24, 42),
    9: (6, 26, 46),
    10: (6, 28, 50),
}


class Cell(IntEnum):
    UNSET = 0
    FINDER_DARK = 1
    FINDER_LIGHT = 2
    TIMING_DARK = 3
    TIMING_LIGHT = 4
    ALIGNMENT_DARK = 5
    ALIGNMENT_LIGHT = 6
    DARK_MODULE = 7
    FORMAT = 8
    VERSION_DARK = 9
    VERSION_LIGHT = 10


_DARK_CELLS = frozenset(
    {
        Cell.FINDER_DARK,
        Cell.TIMING_DARK,
        Cell.ALIGNMENT_DARK,
        Cell.DARK_MODULE,
        Cell.VERSION_DARK,
    }
)
_FINDER_CELLS = frozenset({Cell.FINDER_DARK, Cell.FINDER_LIGHT})


@dataclass(frozen=True)
class FunctionPatterns:
    version: int
    cells: tuple[tuple[Cell, ...], ...]

    @property
    def size(self) -> int:
        return len(self.cells)

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def is_data_module(self, row: int, col: int) -> bool:
        return self.cells[row][col] is Cell.UNSET

    def data_module_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell is Cell.UNSET)

    def base_modules(self) -> list[list[bool]]:
        """Fresh module grid with fixed dark cells set; data and format cells are light."""
        return [[cell in _DARK_CELLS for cell in row] for row in self.cells]


def build_function_patterns(version: int) -> FunctionPatterns:
    require_int_range(version, min_val=MIN_QR_VERSION, max_val=MAX_QR_VERSION, label="version")
    size = symbol_side(version)
    grid = [[Cell.UNSET] * size for _ in range(size)]

    _draw_finder(grid, 0, 0)
    _draw_finder(grid, 0, size - FINDER_SIZE)
    _draw_finder(grid, size - FINDER_SIZE, 0)
    _draw_timing(grid)
    _draw_alignments(grid, ALIGNMENT_POSITIONS[version])
    row, col = dark_module_position(size)
    grid[row][col] = Cell.DARK_MODULE
    _reserve_format(grid)
    if version >= VERSION_INFO_MIN:
        _draw_version(grid, version)

    return FunctionPatterns(version=version, cells=tuple(tuple(row) for row in grid))


def dark_module_position(size: int) -> tuple[int, int]:
    return size - 8, 8


def format_positions(size: int) -> list[tuple[tuple[int, int], tuple[int, int]]]:
    """Both (row, col) locations of format bit ``i`` (bit 0 is least significant)."""
    positions: list[tuple[tuple[int, int], tuple[int, int]]] = []
    for i in range(FORMAT_BITS):
        if i < 6:
            first = (i, 8)
        elif i == 6:
            first = (7, 8)
        elif i == 7:
            first = (8, 8)
        elif i == 8:
            first = (8, 7)
        else:
            first = (8, 14 - i)
        if i < 8:
            second = (8, size - 1 - i)
        else:
            second = (size - 15 + i, 8)
        positions.append((first, second))
    return positions


def version_positions(size: int) -> list[tuple[tuple[int, int], tuple[int, int]]]:
    """Both (row, col) locations of version bit ``i`` (bit 0 is least significant)."""
    positions: list[tuple[tuple[int, int], tuple[int, int]]] = []
    for i in range(VERSION_BITS):
        near = i // 3
        far = size - 11 + i % 3
        positions.append(((near, far), (far, near)))
    return positions


def version_info_bits(version: int) -> int:
    """BCH(18, 6) codeword carrying the version number."""
    remainder = version
    for _ in range(12):
        remainder = (remainder << 1) ^ ((remainder >> 11) * _VERSION_GENERATOR)
    return (version << 12) | (remainder & 0xFFF)


def _draw_finder(grid: list[list[Cell]], top: int, left: int) -> None:
    size = len(grid)
    for dr in range(-1, FINDER_SIZE + 1):
        for dc in range(-1, FINDER_SIZE + 1):
            row, col = top + dr, left + dc
            if not (0 <= row < size and 0 <= col < size):
                continue
            ring = max(abs(dr - 3), abs(dc - 3))
            # ring 3 is the outer border, 4 the separator, 2 the light ring
            grid[row][col] = Cell.FINDER_DARK if ring in (0, 1, 3) else Cell.FINDER_LIGHT


def _draw_timing(grid: list[list[Cell]]) -> None:
    size = len(grid)
    for i in range(FINDER_SIZE + 1, size - FINDER_SIZE - 1):
        cell = Cell.TIMING_DARK if i % 2 == 0 else Cell.TIMING_LIGHT
        grid[TIMING_INDEX][i] = cell
        grid[i][TIMING_INDEX] = cell


def _draw_alignments(grid: list[list[Cell]], positions: tuple[int, ...]) -> None:
    for row in positions:
        for col in positions:
            if _overlaps_finder(grid, row, col):
                continue
            for dr in range(-ALIGNMENT_RADIUS, ALIGNMENT_RADIUS + 1):
                for dc in range(-ALIGNMENT_RADIUS, ALIGNMENT_RADIUS + 1):
                    ring = max(abs(dr), abs(dc))
                    cell = Cell.ALIGNMENT_LIGHT if ring == 1 else Cell.ALIGNMENT_DARK
                    grid[row + dr][col + dc] = cell


def _overlaps_finder(grid: list[list[Cell]], row: int, col: int) -> bool:
    for dr in range(-ALIGNMENT_RADIUS, ALIGNMENT_RADIUS + 1):
        for dc in range(-ALIGNMENT_RADIUS, ALIGNMENT_RADIUS + 1):
            if grid[row + dr][col + dc] in _FINDER_CELLS:
                return True
    return False


def _reserve_format(grid: list[list[Cell]]) -> None:
    for first, second in format_positions(len(grid)):
        for row, col in (first, second):
            grid[row][col] = Cell.FORMAT


def _draw_version(grid: list[list[Cell]], version: int) -> None:
    bits = version_info_bits(version)
    for i, (first, second) in enumerate(version_positions(len(grid))):
        cell = Cell.VERSION_DARK if (bits >> i) & 1 else Cell.VERSION_LIGHT
        for row, col in (first, second):
            grid[row][col] = cell
