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

import base64

from ..core.bounds import DEFAULT_BORDER, DEFAULT_SCALE
from ..core.validation import require_non_negative_int, require_positive_int
from ..qr.symbol import QrSymbol

SVG_MIME_TYPE = "image/svg+xml"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def render_svg(
    symbol: QrSymbol,
    *,
    scale: int = DEFAULT_SCALE,
    border: int = DEFAULT_BORDER,
    dark: str = "black",
    light: str = "white",
) -> str:
    """Render the symbol as one background rect plus a single path of unit squares."""
    require_positive_int(scale, label="scale")
    require_non_negative_int(border, label="border")
    full_size, _height = symbol.symbol_size(scale=scale, border=border)

    segments: list[str] = []
    for row, col in symbol.dark_modules():
        x = (col + border) * scale
        y = (row + border) * scale
        segments.append(f"M{x},{y}h{scale}v{scale}h-{scale}z")

    return "".join(
        (
            f'<svg xmlns="{SVG_NAMESPACE}" viewBox="0 0 {full_size} {full_size}" '
            f'width="{full_size}" height="{full_size}">',
            f'<rect width="{full_size}" height="{full_size}" fill="{light}"/>',
            f'<path d="{"".join(segments)}" fill="{dark}"/>',
            "</svg>",
        )
    )


def svg_color(value: object, fallback: str) -> str:
    """Map a configured colour (name, hex string or RGB(A) tuple) to an SVG paint value."""
    if value is None:
        return fallback
    if isinstance(value, str):
        normalized = value.strip()
        if not normalized or normalized.lower() in ("none", "transparent"):
            return fallback
        return normalized
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        red, green, blue = (int(part) for part in value[:3])
        return f"rgb({red},{green},{blue})"
    return fallback


def data_uri(payload: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def svg_data_uri(svg: str) -> str:
    return data_uri(svg.encode("utf-8"), SVG_MIME_TYPE)
