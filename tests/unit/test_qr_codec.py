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

import base64
import io
import re
import tempfile
import unittest
from pathlib import Path

from PIL import Image

from tests.test_support import (
    BYTE_CAPACITY,
    HAS_SEGNO,
    HAS_ZXING,
    TEST_LINK,
    payload_for_version,
    payload_of_length,
    segno_matrix,
)
from upiqr.qr.capacity import select_version
from upiqr.qr.codec import (
    MIME_TYPES,
    PayloadTooLargeError,
    QrConfig,
    make_qr,
    qr_bytes,
    qr_data_uri,
    render_symbol,
    save_qr,
)
from upiqr.qr.scan import decode_png
from upiqr.render.png import PNG_MIME_TYPE
from upiqr.render.svg import SVG_MIME_TYPE

_WIDTH_RE = re.compile(rb'width="(\d+)"')


def _svg_width(svg: bytes) -> int:
    match = _WIDTH_RE.search(svg)
    assert match is not None
    return int(match.group(1))


class TestMakeQr(unittest.TestCase):
    def test_known_link_uses_version_four(self) -> None:
        symbol = make_qr(TEST_LINK)
        self.assertEqual(len(TEST_LINK), 52)
        self.assertEqual(symbol.version, 4)
        self.assertEqual(symbol.size, 33)
        self.assertEqual(symbol.mask, 0)
        self.assertFalse(symbol.overflow)
        self.assertEqual(symbol.payload_length, 52)

    def test_version_matches_capacity(self) -> None:
        for version, capacity in BYTE_CAPACITY.items():
            with self.subTest(version=version):
                self.assertEqual(make_qr(payload_of_length(capacity)).version, version)

    def test_encoding_is_deterministic(self) -> None:
        first = make_qr(TEST_LINK)
        second = make_qr(TEST_LINK)
        self.assertEqual(first, second)
        self.assertEqual(qr_bytes(TEST_LINK), qr_bytes(TEST_LINK))

    def test_string_and_latin1_bytes_agree(self) -> None:
        self.assertEqual(make_qr("café").modules, make_qr(b"caf\xe9").modules)

    def test_forced_version_and_mask(self) -> None:
        symbol = make_qr(b"hello", version=5, mask=3)
        self.assertEqual(symbol.version, 5)
        self.assertEqual(symbol.size, 37)
        self.assertEqual(symbol.mask, 3)

    def test_oversized_payload_sets_overflow(self) -> None:
        symbol = make_qr(payload_of_length(214))
        self.assertEqual(symbol.version, 10)
        self.assertTrue(symbol.overflow)
        self.assertEqual(symbol.payload_length, 214)

        forced = make_qr(payload_of_length(20), version=1)
        self.assertTrue(forced.overflow)
        self.assertEqual(forced.size, 21)

    def test_strict_mode_raises(self) -> None:
        with self.assertRaises(PayloadTooLargeError) as ctx:
            make_qr(payload_of_length(300), strict=True)
        self.assertEqual(ctx.exception.payload_len, 300)
        self.assertEqual(ctx.exception.capacity, 213)
        self.assertEqual(ctx.exception.version, 10)
        self.assertIsInstance(ctx.exception, ValueError)

    def test_strict_mode_allows_fitting_payloads(self) -> None:
        symbol = make_qr(payload_of_length(213), strict=True)
        self.assertFalse(symbol.overflow)

    def test_invalid_arguments_rejected(self) -> None:
        cases = (
            ("mask", {"mask": 8}),
            ("version", {"version": 0}),
            ("version", {"version": 11}),
        )
        for label, kwargs in cases:
            with self.subTest(label=label, kwargs=kwargs):
                with self.assertRaises(ValueError):
                    make_qr(b"data", **kwargs)

    @unittest.skipUnless(HAS_SEGNO, "segno not available")
    def test_matrix_matches_reference_encoder(self) -> None:
        for version in range(1, 11):
            payload = payload_for_version(version)
            symbol = make_qr(payload)
            with self.subTest(version=version):
                self.assertEqual(symbol.version, version)
                self.assertEqual(
                    [list(row) for row in symbol.modules],
                    segno_matrix(payload, version=version, mask=0),
                )

    @unittest.skipUnless(HAS_SEGNO, "segno not available")
    def test_every_mask_matches_reference_encoder(self) -> None:
        # Only full-capacity payloads are compared: with room to spare, segno appends an
        # extra 0x00 byte after a byte-aligned terminator where ISO 18004 starts padding.
        for version in (4, 7):
            payload = payload_for_version(version)
            self.assertEqual(len(payload), BYTE_CAPACITY[version])
            for mask in range(8):
                symbol = make_qr(payload, version=version, mask=mask)
                with self.subTest(version=version, mask=mask):
                    self.assertEqual(
                        [list(row) for row in symbol.modules],
                        segno_matrix(payload, version=version, mask=mask),
                    )


class TestQrOutputs(unittest.TestCase):
    def test_mime_types_follow_renderers(self) -> None:
        self.assertEqual(MIME_TYPES, {"svg": SVG_MIME_TYPE, "png": PNG_MIME_TYPE})
        png_uri = qr_data_uri(TEST_LINK, QrConfig(kind="png"))
        self.assertTrue(png_uri.startswith("data:image/png;base64,"))

    def test_svg_size_for_every_payload_length(self) -> None:
        for length in range(1, 214):
            svg = qr_bytes(payload_of_length(length))
            version = select_version(length).version
            with self.subTest(length=length):
                self.assertEqual(_svg_width(svg), (4 * version + 17 + 8) * 4)

    def test_png_signature(self) -> None:
        png = qr_bytes(TEST_LINK, kind="png")
        self.assertTrue(png.startswith(b"\x89PNG\r\n\x1a\n"))
        with Image.open(io.BytesIO(png)) as img:
            self.assertEqual(img.size, ((33 + 8) * 4, (33 + 8) * 4))

    def test_data_uri_prefixes(self) -> None:
        svg_uri = qr_data_uri(TEST_LINK)
        self.assertTrue(svg_uri.startswith("data:image/svg+xml;base64,"))
        svg = base64.b64decode(svg_uri.split(",", 1)[1])
        self.assertTrue(svg.startswith(b"<svg"))

        png_uri = qr_data_uri(TEST_LINK, QrConfig(kind="png", scale=2))
        self.assertTrue(png_uri.startswith("data:image/png;base64,"))

    def test_config_controls_rendering(self) -> None:
        uri = qr_data_uri(TEST_LINK, QrConfig(scale=2, border=1, dark="#123456"))
        svg = base64.b64decode(uri.split(",", 1)[1])
        self.assertEqual(_svg_width(svg), (33 + 2) * 2)
        self.assertIn(b'fill="#123456"', svg)

    def test_rounded_modules_only_for_png(self) -> None:
        symbol = make_qr(TEST_LINK)
        png = render_symbol(symbol, kind="png", module_shape="rounded")
        self.assertTrue(png.startswith(b"\x89PNG"))
        with self.assertRaisesRegex(ValueError, "PNG"):
            render_symbol(symbol, kind="svg", module_shape="rounded")

    def test_unknown_kind_rejected(self) -> None:
        with self.assertRaisesRegex(ValueError, "kind must be one of"):
            qr_bytes(TEST_LINK, kind="gif")

    def test_save_qr_infers_kind_from_suffix(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            svg_path = Path(tmpdir) / "pay.svg"
            png_path = Path(tmpdir) / "pay.png"
            symbol = save_qr(svg_path, TEST_LINK)
            save_qr(png_path, TEST_LINK, scale=2)
            self.assertEqual(symbol.version, 4)
            self.assertTrue(svg_path.read_bytes().startswith(b"<svg"))
            self.assertTrue(png_path.read_bytes().startswith(b"\x89PNG"))

    @unittest.skipUnless(HAS_ZXING, "zxingcpp not available")
    def test_payload_decodable_per_version(self) -> None:
        for version in range(1, 11):
            payload = payload_for_version(version)
            with self.subTest(version=version):
                png = qr_bytes(payload, kind="png")
                self.assertEqual(decode_png(png), [payload])

    @unittest.skipUnless(HAS_ZXING, "zxingcpp not available")
    def test_every_mask_decodable(self) -> None:
        for mask in range(8):
            with self.subTest(mask=mask):
                png = qr_bytes(TEST_LINK, kind="png", mask=mask)
                self.assertEqual(decode_png(png), [TEST_LINK.encode("ascii")])

    @unittest.skipUnless(HAS_ZXING, "zxingcpp not available")
    def test_binary_payload_decodable(self) -> None:
        data = bytes(range(200))
        png = qr_bytes(data, kind="png")
        self.assertEqual(decode_png(png), [data])

    @unittest.skipUnless(HAS_ZXING, "zxingcpp not available")
    def test_rounded_png_decodable(self) -> None:
        for scale in (2, 4, 8, 12, 16):
            png = qr_bytes(TEST_LINK, kind="png", module_shape="rounded", scale=scale)
            with self.subTest(scale=scale):
                self.assertEqual(decode_png(png), [TEST_LINK.encode("ascii")])


if __name__ == "__main__":
    unittest.main()
