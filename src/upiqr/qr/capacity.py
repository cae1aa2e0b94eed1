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

from dataclasses import dataclass

from ..core.bounds import MAX_QR_VERSION, MIN_QR_VERSION
from ..core.validation import require_int_range

MODE_INDICATOR_BITS = 4
ERROR_LEVEL = "M"

# Error correction level M, byte mode.
# version -> (ec codewords per block, ((block count, data codewords per block), ...))
_LEVEL_M_BLOCKS: dict[int, tuple[int, tuple[tuple[int, int], ...]]] = {
    1: (10, ((1, 16),)),
    2: (16, ((1, 28),)),
    3: (26, ((1, 44),)),
    4: (18, ((2, 32),)),
    5: (24, ((2, 43),)),
    6: (16, ((4, 27),)),
    7: (18, ((4, 31),)),
    8: (22, ((2, 38), (2, 39))),
    9: (22, ((3, 36), (2, 37))),
    10: (26, ((4, 43), (1, 44))),
}

# Leftover modules after the last full codeword is placed.
REMAINDER_BITS: dict[int, int] = {
    1: 0,
    2: 7,
    3: 7,
    4: 7,
    5: 7,
    6: 7,
    7: 0,
    8: 0,
    9: 0,
    10: 0,
}


@dataclass(frozen=True)
class VersionInfo:
    version: int
    ec_codewords_per_block: int
    blocks: tuple[tuple[int, int], ...]

    @property
    def size(self) -> int:
        return symbol_side(self.version)

    @property
    def data_codewords(self) -> int:
        return sum(data for data, _ec in self.blocks)

    @property
    def total_codewords(self) -> int:
        return sum(data + ec for data, ec in self.blocks)

    @property
    def count_bits(self) -> int:
        return char_count_bits(self.version)

    @property
    def data_bits(self) -> int:
        return self.data_codewords * 8

    @property
    def byte_capacity(self) -> int:
        return (self.data_bits - MODE_INDICATOR_BITS - self.count_bits) // 8


def symbol_side(version: int) -> int:
    return version * 4 + 17


def char_count_bits(version: int) -> int:
    return 8 if version <= 9 else 16


def version_info(version: int) -> VersionInfo:
    require_int_range(version, min_val=MIN_QR_VERSION, max_val=MAX_QR_VERSION, label="version")
    ec_per_block, groups = _LEVEL_M_BLOCKS[version]
    blocks: list[tuple[int, int]] = []
    for count, data_codewords in groups:
        blocks.extend((data_codewords, ec_per_block) for _ in range(count))
    return VersionInfo(version=version, ec_codewords_per_block=ec_per_block, blocks=tuple(blocks))


def required_bits(payload_len: int, version: int) -> int:
    return MODE_INDICATOR_BITS + char_count_bits(version) + payload_len * 8


def fits(payload_len: int, info: VersionInfo) -> bool:
    return required_bits(payload_len, info.version) <= info.data_bits


def select_version(payload_len: int) -> VersionInfo:
    """Pick the smallest tabulated version whose data capacity holds the payload.

    Payloads larger than the last version fall back to that version; callers detect the
    overflow with :func:`fits`.
    """
    if payload_len < 0:
        raise ValueError("payload_len must be non-negative")
    for version in range(MIN_QR_VERSION, MAX_QR_VERSION + 1):
        info = version_info(version)
        if fits(payload_len, info):
            return info
    return version_info(MAX_QR_VERSION)


def max_payload_len() -> int:
    return version_info(MAX_QR_VERSION).byte_capacity
