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

import unittest

from tests.test_support import BYTE_CAPACITY
from upiqr.qr.capacity import (
    ERROR_LEVEL,
    REMAINDER_BITS,
    char_count_bits,
    fits,
    max_payload_len,
    required_bits,
    select_version,
    symbol_side,
    version_info,
)

TOTAL_CODEWORDS = {1: 26, 2: 44, 3: 70, 4: 100, 5: 134, 6: 172, 7: 196, 8: 242, 9: 292, 10: 346}


class TestVersionTable(unittest.TestCase):
    def test_table_is_level_m(self) -> None:
        self.assertEqual(ERROR_LEVEL, "M")

    def test_total_codewords_per_version(self) -> None:
        for version, total in TOTAL_CODEWORDS.items():
            with self.subTest(version=version):
                self.assertEqual(version_info(version).total_codewords, total)

    def test_byte_capacity_per_version(self) -> None:
        for version, capacity in BYTE_CAPACITY.items():
            with self.subTest(version=version):
                self.assertEqual(version_info(version).byte_capacity, capacity)

    def test_block_layout(self) -> None:
        self.assertEqual(version_info(1).blocks, ((16, 10),))
        self.assertEqual(version_info(5).blocks, ((43, 24), (43, 24)))
        self.assertEqual(
            version_info(9).blocks,
            ((36, 22), (36, 22), (36, 22), (37, 22), (37, 22)),
        )
        self.assertEqual(
            version_info(10).blocks,
            ((43, 26), (43, 26), (43, 26), (43, 26), (44, 26)),
        )

    def test_codewords_fill_the_symbol(self) -> None:
        for version in range(1, 11):
            info = version_info(version)
            with self.subTest(version=version):
                self.assertEqual(info.size, 4 * version + 17)
                self.assertEqual(symbol_side(version), info.size)
                self.assertIn(REMAINDER_BITS[version], (0, 7))

    def test_count_field_width(self) -> None:
        self.assertEqual(char_count_bits(1), 8)
        self.assertEqual(char_count_bits(9), 8)
        self.assertEqual(char_count_bits(10), 16)

    def test_unknown_version_rejected(self) -> None:
        for version in (0, 11, -1):
            with self.subTest(version=version):
                with self.assertRaisesRegex(ValueError, "version"):
                    version_info(version)


class TestVersionSelection(unittest.TestCase):
    def test_capacity_boundaries(self) -> None:
        for version, capacity in BYTE_CAPACITY.items():
            with self.subTest(version=version):
                self.assertEqual(select_version(capacity).version, version)
                if version < 10:
                    self.assertEqual(select_version(capacity + 1).version, version + 1)

    def test_selection_is_monotonic(self) -> None:
        previous = 1
        for length in range(0, 260):
            version = select_version(length).version
            self.assertGreaterEqual(version, previous)
            previous = version

    def test_selected_version_is_smallest_that_fits(self) -> None:
        for length in range(0, 214):
            info = select_version(length)
            self.assertTrue(fits(length, info))
            if info.version > 1:
                self.assertFalse(fits(length, version_info(info.version - 1)))

    def test_oversized_payload_falls_back_to_last_version(self) -> None:
        info = select_version(500)
        self.assertEqual(info.version, 10)
        self.assertFalse(fits(500, info))
        self.assertEqual(max_payload_len(), 213)

    def test_required_bits(self) -> None:
        self.assertEqual(required_bits(0, 1), 12)
        self.assertEqual(required_bits(14, 1), 124)
        self.assertEqual(required_bits(1, 10), 28)

    def test_negative_length_rejected(self) -> None:
        with self.assertRaises(ValueError):
            select_version(-1)


if __name__ == "__main__":
    unittest.main()
