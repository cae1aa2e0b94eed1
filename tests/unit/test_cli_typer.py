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

import re
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from typer.testing import CliRunner

from tests.test_support import HAS_ZXING, PACKAGED_CONFIG, TEST_LINK, isolated_config
from upiqr.cli import app
from upiqr.qr.codec import save_qr

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")
PAYMENT_ARGS = ["--vpa", "merchant@upi", "--amount", "250", "--note", "Test"]


def _strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


class TestCliTyper(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def _invoke(self, *args: str, config: Path = PACKAGED_CONFIG):
        with mock.patch("upiqr.cli.app.run_startup", return_value=False):
            result = self.runner.invoke(app, ["--config", str(config), *args])
        return result.exit_code, _strip_ansi(result.output)

    def test_root_info_commands(self) -> None:
        cases = (
            {
                "args": ["--help"],
                "expected_exit_code": 0,
                "contains": ("uri", "encode", "info", "validate", "scan"),
            },
            {
                "args": ["--version"],
                "expected_exit_code": 0,
                "contains": ("upiqr",),
            },
        )
        for case in cases:
            with self.subTest(args=case["args"]):
                with mock.patch("upiqr.cli.app.run_startup", return_value=False):
                    result = self.runner.invoke(app, case["args"])
                self.assertEqual(result.exit_code, case["expected_exit_code"])
                output = _strip_ansi(result.output)
                for expected in case["contains"]:
                    self.assertIn(expected, output)

    def test_root_no_subcommand_prints_help(self) -> None:
        with mock.patch("upiqr.cli.app.run_startup", return_value=False):
            result = self.runner.invoke(app, [])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("encode", _strip_ansi(result.output))

    def test_uri_prints_link(self) -> None:
        exit_code, output = self._invoke("uri", *PAYMENT_ARGS)
        self.assertEqual(exit_code, 0, output)
        self.assertEqual(output.strip(), TEST_LINK)

    def test_uri_aliases_and_zero_amount(self) -> None:
        exit_code, output = self._invoke(
            "uri", "--pa", "shop@okhdfc", "--pn", "Corner Store", "--am", "0", "--tr", "R1"
        )
        self.assertEqual(exit_code, 0, output)
        self.assertEqual(
            output.strip(),
            "upi://pay?pa=shop%40okhdfc&pn=Corner%20Store&cu=INR&tr=R1",
        )

    def test_uri_uses_configured_currency(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config = Path(tmpdir) / "config.toml"
            config.write_text('[upi]\ncurrency = "usd"\n', encoding="utf-8")
            exit_code, output = self._invoke("uri", "--vpa", "a@upi", config=config)
        self.assertEqual(exit_code, 0, output)
        self.assertEqual(output.strip(), "upi://pay?pa=a%40upi&cu=USD")

    def test_uri_requires_vpa(self) -> None:
        exit_code, output = self._invoke("uri", "--amount", "10")
        self.assertEqual(exit_code, 2)
        self.assertIn("--vpa", output)

    def test_encode_prints_data_uri(self) -> None:
        cases = (
            ([], "data:image/svg+xml;base64,"),
            (["--format", "png"], "data:image/png;base64,"),
            (["-f", "SVG", "--scale", "2", "--border", "0"], "data:image/svg+xml;base64,"),
        )
        for extra, prefix in cases:
            with self.subTest(extra=extra):
                exit_code, output = self._invoke("encode", *PAYMENT_ARGS, *extra)
                self.assertEqual(exit_code, 0, output)
                self.assertTrue(output.strip().startswith(prefix))

    def test_encode_writes_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            svg_path = Path(tmpdir) / "pay.svg"
            png_path = Path(tmpdir) / "pay.png"
            exit_code, output = self._invoke("encode", *PAYMENT_ARGS, "-o", str(svg_path))
            self.assertEqual(exit_code, 0, output)
            exit_code, output = self._invoke("encode", *PAYMENT_ARGS, "-o", str(png_path))
            self.assertEqual(exit_code, 0, output)
            self.assertTrue(svg_path.read_bytes().startswith(b"<svg"))
            self.assertTrue(png_path.read_bytes().startswith(b"\x89PNG"))

    def test_encode_rejects_unknown_format(self) -> None:
        exit_code, output = self._invoke("encode", *PAYMENT_ARGS, "--format", "gif")
        self.assertEqual(exit_code, 2)
        self.assertIn("format must be one of: svg, png", output)

    def test_encode_rejects_out_of_range_options(self) -> None:
        for extra in (["--mask", "8"], ["--qr-version", "11"], ["--scale", "0"]):
            with self.subTest(extra=extra):
                exit_code, _output = self._invoke("encode", *PAYMENT_ARGS, *extra)
                self.assertEqual(exit_code, 2)

    def test_encode_oversized_link_warns(self) -> None:
        exit_code, output = self._invoke("encode", "--vpa", "a@upi", "--note", "x" * 250)
        self.assertEqual(exit_code, 0, output)
        self.assertIn("Warning:", output)
        self.assertIn("data:image/svg+xml;base64,", output)

    def test_encode_oversized_link_strict_fails(self) -> None:
        exit_code, output = self._invoke(
            "encode", "--vpa", "a@upi", "--note", "x" * 250, "--strict"
        )
        self.assertEqual(exit_code, 2)
        self.assertIn("Error:", output)
        self.assertIn("exceeds version 10 capacity", output)

    def test_encode_quiet_hides_warning(self) -> None:
        with mock.patch("upiqr.cli.app.run_startup", return_value=False):
            result = self.runner.invoke(
                app,
                [
                    "--config",
                    str(PACKAGED_CONFIG),
                    "--quiet",
                    "encode",
                    "--vpa",
                    "a@upi",
                    "--note",
                    "x" * 250,
                ],
            )
        self.assertEqual(result.exit_code, 0)
        self.assertNotIn("Warning", result.output)

    def test_info_reports_version(self) -> None:
        exit_code, output = self._invoke("info", *PAYMENT_ARGS)
        self.assertEqual(exit_code, 0, output)
        self.assertIn("Byte capacity", output)
        self.assertIn("33 x 33", output)
        self.assertIn("62", output)
        self.assertRegex(output, r"Error correction\W+M\b")

    def test_info_forced_version(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config = Path(tmpdir) / "config.toml"
            config.write_text("[qr]\nversion = 2\n", encoding="utf-8")
            exit_code, output = self._invoke("info", *PAYMENT_ARGS, config=config)
        self.assertEqual(exit_code, 0, output)
        self.assertIn("25 x 25", output)
        self.assertRegex(output, r"Fits\W+no")

    def test_validate_command(self) -> None:
        exit_code, output = self._invoke("validate", "merchant@upi")
        self.assertEqual(exit_code, 0, output)
        self.assertIn("Valid: merchant@upi", output)

        exit_code, output = self._invoke("validate", "merchant")
        self.assertEqual(exit_code, 1)
        self.assertIn("exactly one @ symbol", output)

    def test_scan_missing_path(self) -> None:
        exit_code, output = self._invoke("scan", "/no/such/qr.png")
        self.assertEqual(exit_code, 2)
        self.assertIn("scan path not found", output)

    @unittest.skipUnless(HAS_ZXING, "zxingcpp not available")
    def test_encode_verify(self) -> None:
        exit_code, output = self._invoke("encode", *PAYMENT_ARGS, "--verify")
        self.assertEqual(exit_code, 0, output)
        self.assertIn("Verified:", output)

    @unittest.skipUnless(HAS_ZXING, "zxingcpp not available")
    def test_scan_prints_payload(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "pay.png"
            save_qr(path, TEST_LINK)
            exit_code, output = self._invoke("scan", tmpdir)
        self.assertEqual(exit_code, 0, output)
        self.assertEqual(output.strip(), TEST_LINK)

    def test_init_config_creates_user_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with isolated_config(Path(tmpdir)):
                result = self.runner.invoke(app, ["--init-config"])
                created = Path(tmpdir) / "xdg" / "upiqr" / "config.toml"
                self.assertEqual(result.exit_code, 0, result.output)
                self.assertTrue(created.is_file())
                self.assertIn("User config ready", _strip_ansi(result.output))


if __name__ == "__main__":
    unittest.main()
