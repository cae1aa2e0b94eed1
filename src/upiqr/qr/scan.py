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

"""Read QR payloads back out of images with zxing-cpp."""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

import zxingcpp
from PIL import Image

IMAGE_SUFFIXES = frozenset({".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tif", ".tiff", ".webp"})


class QrScanError(RuntimeError):
    """An image could not be read or held no QR symbol."""


@dataclass(frozen=True)
class QrDecoder:
    name: str
    read_barcodes: Callable[[Image.Image], list[bytes]]

    def decode(self, source: Path | BinaryIO, *, label: str) -> list[bytes]:
        try:
            with Image.open(source) as image:
                return self.read_barcodes(image.convert("RGB"))
        except OSError as exc:
            raise QrScanError(f"failed to read {label}") from exc


def _zxing_payloads(image: Image.Image) -> list[bytes]:
    payloads: list[bytes] = []
    for result in zxingcpp.read_barcodes(image):
        if result.format != zxingcpp.BarcodeFormat.QRCode:
            continue
        raw = result.bytes
        payloads.append(bytes(raw) if raw else result.text.encode("utf-8"))
    return payloads


def _load_decoder() -> QrDecoder:
    return QrDecoder(name="zxing-cpp", read_barcodes=_zxing_payloads)


def decode_png(data: bytes) -> list[bytes]:
    """Decode every QR symbol in an in-memory image (used to verify rendered output)."""
    return _load_decoder().decode(io.BytesIO(data), label="rendered image")


def scan_qr_payloads(paths: Sequence[str | Path]) -> list[bytes]:
    """Decode the QR symbols in each image, walking directories recursively.

    Raises QrScanError for missing paths, unsupported files, unreadable images,
    or when nothing decodes at all.
    """
    decoder = _load_decoder()
    payloads: list[bytes] = []
    for path in _expand_paths(paths):
        if path.suffix.lower() not in IMAGE_SUFFIXES:
            raise QrScanError(f"unsupported scan file type: {path}")
        payloads += decoder.decode(path, label=f"image: {path}")
    if not payloads:
        raise QrScanError("no QR codes found in scan inputs")
    return payloads


def _expand_paths(paths: Sequence[str | Path]) -> Iterator[Path]:
    for raw in map(Path, paths):
        if not raw.exists():
            raise QrScanError(f"scan path not found: {raw}")
        if not raw.is_dir():
            yield raw
            continue
        images = _iter_scan_files(raw)
        if not images:
            raise QrScanError(f"no scan files found in directory: {raw}")
        yield from images


def _iter_scan_files(directory: Path) -> list[Path]:
    return sorted(
        path
        for path in directory.rglob("*")
        if path.is_file() and path.suffix.lower() in IMAGE_SUFFIXES
    )
