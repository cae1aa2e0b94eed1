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

"""GF(256) arithmetic and Reed-Solomon remainders for QR error correction."""

from __future__ import annotations

from collections.abc import Sequence

# x^8 + x^4 + x^3 + x^2 + 1
PRIMITIVE_POLY = 0x11D
FIELD_SIZE = 256
_ORDER = FIELD_SIZE - 1


def _build_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    exp = [0] * FIELD_SIZE
    log = [0] * FIELD_SIZE
    value = 1
    for power in range(_ORDER):
        exp[power] = value
        log[value] = power
        value <<= 1
        if value & 0x100:
            value ^= PRIMITIVE_POLY
    # alpha^255 == alpha^0
    exp[_ORDER] = exp[0]
    return tuple(exp), tuple(log)


EXP_TABLE, LOG_TABLE = _build_tables()


def gf_multiply(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return EXP_TABLE[(LOG_TABLE[a] + LOG_TABLE[b]) % _ORDER]


def rs_generator_poly(ec_length: int) -> list[int]:
    """Return the generator polynomial (x - a^0)(x - a^1)...(x - a^(n-1)).

    Coefficients are ordered from the highest degree term down, so the result always
    starts with 1 and has ``ec_length + 1`` entries.
    """
    if ec_length <= 0:
        raise ValueError("ec_length must be positive")
    poly = [1]
    for i in range(ec_length):
        root = EXP_TABLE[i]
        product = [0] * (len(poly) + 1)
        for j, coef in enumerate(poly):
            product[j] ^= coef
            product[j + 1] ^= gf_multiply(coef, root)
        poly = product
    return poly


def rs_encode(data: Sequence[int], ec_length: int) -> list[int]:
    """Compute the ``ec_length`` error correction codewords for one data block."""
    generator = rs_generator_poly(ec_length)
    message = list(data) + [0] * ec_length
    for i in range(len(data)):
        coef = message[i]
        if coef == 0:
            continue
        for j, gen_coef in enumerate(generator):
            message[i + j] ^= gf_multiply(gen_coef, coef)
    remainder = message[len(data) :]
    if len(remainder) != ec_length:
        raise RuntimeError("reed-solomon remainder has unexpected length")
    return remainder


def rs_syndromes(codeword: Sequence[int], ec_length: int) -> list[int]:
    """Evaluate a received block (data + ec) at a^0..a^(n-1).

    A block produced by :func:`rs_encode` yields all-zero syndromes.
    """
    syndromes: list[int] = []
    for i in range(ec_length):
        root = EXP_TABLE[i]
        acc = 0
        for coef in codeword:
            acc = gf_multiply(acc, root) ^ coef
        syndromes.append(acc)
    return syndromes
