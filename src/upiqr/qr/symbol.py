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

from collections.abc import Iterator
from dataclasses import dataclass

from ..core.bounds import DEFAULT_BORDER


@dataclass(frozen=True)
class QrSymbol:
    """Final module matrix of an encoded symbol (True is a dark module)."""

    version: int
    mask: int
    modules: tuple[tuple[bool, ...], ...]
    payload_length: int = 0
    overflow: bool = False

    @property
    def size(self) -> int:
        return len(self.modules)

    def symbol_size(self, *, scale: int = 1, border: int = DEFAULT_BORDER) -> tuple[int, int]:
        side = (self.size + 2 * border) * scale
        return side, side

    def matrix_iter(self, *, border: int = DEFAULT_BORDER) -> Iterator[tuple[bool, ...]]:
        """Yield rows including ``border`` light modules on every side."""
        quiet_row = (False,) * (self.size + 2 * border)
        quiet_edge = (False,) * border
        for _ in range(border):
            yield quiet_row
        for row in self.modules:
            yield quiet_edge + row + quiet_edge
        for _ in range(border):
            yield quiet_row

    def dark_modules(self) -> Iterator[tuple[int, int]]:
        for row_idx, row in enumerate(self.modules):
            for col_idx, is_dark in enumerate(row):
                if is_dark:
                    yield row_idx, col_idx
