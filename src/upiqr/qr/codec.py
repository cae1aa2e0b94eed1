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
from pathlib import Path

from ..core.bounds import DEFAULT_BORDER, DEFAULT_SCALE
from ..core.validation import require_choice
from ..render.png import PNG_MIME_TYPE, render_png
from ..render.svg import SVG_MIME_TYPE, data_uri, render_svg, svg_color
from .bitstream import encode_codewords, interleave, to_payload_bytes
from .capacity import fits, select_version, version_info
from .masking import DEFAULT_MASK, apply_mask, write_format_info
from .matrix import build_function_patterns
from .placement import place_codewords
from .symbol import QrSymbol

Color = str | tuple[int, int, int] | tuple[int, int, int, int] | None

OUTPUT_KINDS = ("svg", "png")
MIME_TYPES = {"svg": SVG_MIME_TYPE, "png": PNG_MIME_TYPE}


class PayloadTooLargeError(ValueError):
    def __init__(self, payload_len: int, capacity: int, version: int) -> None:
        super().__init__(
            f"payload of {payload_len} bytes exceeds version {version} capacity "
            f"({capacity} bytes)"
        )
        self.payload_len = payload_len
        self.capacity = capacity
        self.version = version


@dataclass(frozen=True)
class QrConfig:
    scale: int = DEFAULT_SCALE
    border: int = DEFAULT_BORDER
    kind: str = "svg"
    dark: Color = None
    light: Color = None
    module_shape: str = "square"
    version: int | None = None
    mask: int = DEFAULT_MASK
    strict: bool = False


def make_qr(
    data: bytes | str,
    *,
    version: int | None = None,
    mask: int = DEFAULT_MASK,
    strict: bool = False,
) -> QrSymbol:
    """Encode data in byte mode at error correction level M.

    A payload too long for the chosen version is cut at capacity and reported through
    ``QrSymbol.overflow``; with ``strict=True`` a :class:`PayloadTooLargeError` is raised
    instead.
    """
    payload = to_payload_bytes(data)
    info = select_version(len(payload)) if version is None else version_info(version)
    overflow = not fits(len(payload), info)
    if overflow and strict:
        raise PayloadTooLargeError(len(payload), info.byte_capacity, info.version)

    blocks = encode_codewords(payload, info)
    stream = interleave(blocks)
    if len(stream) != info.total_codewords:
        raise RuntimeError("interleaved stream length does not match version capacity")

    patterns = build_function_patterns(info.version)
    modules = place_codewords(patterns, stream)
    modules = apply_mask(modules, patterns, mask)
    write_format_info(modules, mask)

    return QrSymbol(
        version=info.version,
        mask=mask,
        modules=tuple(tuple(row) for row in modules),
        payload_length=len(payload),
        overflow=overflow,
    )


def render_symbol(
    symbol: QrSymbol,
    *,
    scale: int = DEFAULT_SCALE,
    border: int = DEFAULT_BORDER,
    kind: str = "svg",
    dark: Color = None,
    light: Color = None,
    module_shape: str = "square",
) -> bytes:
    normalized_kind = require_choice(kind, OUTPUT_KINDS, label="kind")
    if normalized_kind == "png":
        return render_png(
            symbol,
            scale=scale,
            border=border,
            dark=dark,
            light=light,
            module_shape=module_shape,
        )
    if module_shape.strip().lower() != "square":
        raise ValueError("custom module shapes are only supported for PNG output")
    svg = render_svg(
        symbol,
        scale=scale,
        border=border,
        dark=svg_color(dark, "black"),
        light=svg_color(light, "white"),
    )
    return svg.encode("utf-8")


def qr_bytes(
    data: bytes | str,
    *,
    scale: int = DEFAULT_SCALE,
    border: int = DEFAULT_BORDER,
    kind: str = "svg",
    dark: Color = None,
    light: Color = None,
    module_shape: str = "square",
    version: int | None = None,
    mask: int = DEFAULT_MASK,
    strict: bool = False,
) -> bytes:
    symbol = make_qr(data, version=version, mask=mask, strict=strict)
    return render_symbol(
        symbol,
        scale=scale,
        border=border,
        kind=kind,
        dark=dark,
        light=light,
        module_shape=module_shape,
    )


def qr_data_uri(data: bytes | str, config: QrConfig | None = None) -> str:
    """Encode data and return the rendering as a self-contained ``data:`` URI."""
    config = config or QrConfig()
    kind = require_choice(config.kind, OUTPUT_KINDS, label="kind")
    image = qr_bytes(
        data,
        scale=config.scale,
        border=config.border,
        kind=kind,
        dark=config.dark,
        light=config.light,
        module_shape=config.module_shape,
        version=config.version,
        mask=config.mask,
        strict=config.strict,
    )
    return data_uri(image, MIME_TYPES[kind])


def save_qr(
    path: str | Path,
    data: bytes | str,
    *,
    scale: int = DEFAULT_SCALE,
    border: int = DEFAULT_BORDER,
    kind: str | None = None,
    dark: Color = None,
    light: Color = None,
    module_shape: str = "square",
    version: int | None = None,
    mask: int = DEFAULT_MASK,
    strict: bool = False,
) -> QrSymbol:
    if kind is None:
        suffix = Path(path).suffix.lower().lstrip(".")
        kind = suffix or "svg"
    symbol = make_qr(data, version=version, mask=mask, strict=strict)
    image = render_symbol(
        symbol,
        scale=scale,
        border=border,
        kind=kind,
        dark=dark,
        light=light,
        module_shape=module_shape,
    )
    with open(path, "wb") as handle:
        handle.write(image)
    return symbol
