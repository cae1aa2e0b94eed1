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

from collections.abc import Sequence
from dataclasses import dataclass

from .capacity import VersionInfo
from .gf256 import rs_encode

BYTE_MODE = 0b0100
PAD_CODEWORDS = (0xEC, 0x11)
_TERMINATOR_BITS = 4


@dataclass(frozen=True)
class EncodedBlocks:
    data_blocks: tuple[tuple[int, ...], ...]
    ec_blocks: tuple[tuple[int, ...], ...]
    truncated: bool = False


class BitBuffer:
    """Append-only big-endian bit sequence."""

    def __init__(self) -> None:
        self._bits: list[int] = []

    def __len__(self) -> int:
        return len(self._bits)

    def append(self, value: int, width: int) -> None:
        if width < 0:
            raise ValueError("width must be non-negative")
        for shift in range(width - 1, -1, -1):
            self._bits.append((value >> shift) & 1)

    def truncate(self, length: int) -> None:
        del self._bits[length:]

    def to_codewords(self) -> list[int]:
        if len(self._bits) % 8:
            raise RuntimeError("bit buffer is not byte aligned")
        codewords: list[int] = []
        for offset in range(0, len(self._bits), 8):
            value = 0
            for bit in self._bits[offset : offset + 8]:
                value = (value << 1) | bit
            codewords.append(value)
        return codewords


def to_payload_bytes(data: bytes | str) -> bytes:
    """Convert a payload to the byte sequence placed in byte mode.

    Strings map one character to one byte; code points above 255 cannot be represented
    without multi-byte segmentation and become ``?``.
    """
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("latin-1", errors="replace")
    raise TypeError("payload must be bytes or str")


def build_data_codewords(payload: bytes, info: VersionInfo) -> tuple[list[int], bool]:
    """Pack mode, count, payload, terminator and padding into data codewords.

    Returns the codewords and whether the payload had to be cut at capacity.
    """
    capacity = info.data_bits
    buffer = BitBuffer()
    buffer.append(BYTE_MODE, 4)
    count_bits = info.count_bits
    buffer.append(len(payload) & ((1 << count_bits) - 1), count_bits)
    for byte in payload:
        buffer.append(byte, 8)

    truncated = len(buffer) > capacity
    if truncated:
        buffer.truncate(capacity)

    terminator = max(0, min(_TERMINATOR_BITS, capacity - len(buffer)))
    buffer.append(0, terminator)
    if len(buffer) % 8:
        buffer.append(0, 8 - len(buffer) % 8)
    pad_index = 0
    while len(buffer) < capacity:
        buffer.append(PAD_CODEWORDS[pad_index % 2], 8)
        pad_index += 1

    codewords = buffer.to_codewords()
    if len(codewords) != info.data_codewords:
        raise RuntimeError("data codeword count does not match version capacity")
    return codewords, truncated


def split_blocks(codewords: Sequence[int], info: VersionInfo) -> list[list[int]]:
    blocks: list[list[int]] = []
    offset = 0
    for data_len, _ec_len in info.blocks:
        blocks.append(list(codewords[offset : offset + data_len]))
        offset += data_len
    if offset != len(codewords):
        raise RuntimeError("block table does not cover all data codewords")
    return blocks


def encode_codewords(payload: bytes, info: VersionInfo) -> EncodedBlocks:
    codewords, truncated = build_data_codewords(payload, info)
    data_blocks = split_blocks(codewords, info)
    ec_blocks = [
        rs_encode(block, ec_len) for block, (_data_len, ec_len) in zip(data_blocks, info.blocks)
    ]
    return EncodedBlocks(
        data_blocks=tuple(tuple(block) for block in data_blocks),
        ec_blocks=tuple(tuple(block) for block in ec_blocks),
        truncated=truncated,
    )


def interleave(blocks: EncodedBlocks) -> list[int]:
    """Order codewords for placement: data round robin, then ec round robin."""
    result = _round_robin(blocks.data_blocks)
    result.extend(_round_robin(blocks.ec_blocks))
    return result


def _round_robin(blocks: Sequence[Sequence[int]]) -> list[int]:
    if not blocks:
        return []
    longest = max(len(block) for block in blocks)
    result: list[int] = []
    for index in range(longest):
        for block in blocks:
            if index < len(block):
                result.append(block[index])
    return result
