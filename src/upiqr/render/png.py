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

import io

from PIL import Image, ImageColor, ImageDraw

from ..core.bounds import DEFAULT_BORDER, DEFAULT_SCALE
from ..core.validation import require_choice, require_non_negative_int, require_positive_int
from ..qr.symbol import QrSymbol

PNG_MIME_TYPE = "image/png"
MODULE_SHAPES = ("square", "rounded")

Rgba = tuple[int, int, int, int]

WHITE: Rgba = (255, 255, 255, 255)
BLACK: Rgba = (0, 0, 0, 255)

# corner radius as a fraction of the module size
_ROUNDED_RATIO = 0.2


def _rgba(value: object, fallback: Rgba) -> Rgba:
    """Resolve a Pillow colour name, hex string or RGB(A) sequence."""
    if isinstance(value, str):
        name = value.strip()
        if not name or name.lower() in ("none", "transparent"):
            return fallback
        return ImageColor.getcolor(name, "RGBA")
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        red, green, blue, *alpha = (int(channel) for channel in value)
        return (red, green, blue, alpha[0] if alpha else 255)
    return fallback


def _open_corners(
    modules: tuple[tuple[bool, ...], ...],
    row: int,
    col: int,
) -> tuple[bool, bool, bool, bool]:
    """Corners to round, in Pillow order: top-left, top-right, bottom-right, bottom-left."""
    size = len(modules)

    def dark(r: int, c: int) -> bool:
        return 0 <= r < size and 0 <= c < size and modules[r][c]

    up = dark(row - 1, col)
    down = dark(row + 1, col)
    left = dark(row, col - 1)
    right = dark(row, col + 1)
    return (
        not (up or left),
        not (up or right),
        not (down or right),
        not (down or left),
    )


def render_png(
    symbol: QrSymbol,
    *,
    scale: int = DEFAULT_SCALE,
    border: int = DEFAULT_BORDER,
    dark: object = None,
    light: object = None,
    module_shape: str = "square",
) -> bytes:
    require_positive_int(scale, label="scale")
    require_non_negative_int(border, label="border")
    shape = require_choice(module_shape, MODULE_SHAPES, label="module_shape")

    size, _height = symbol.symbol_size(scale=scale, border=border)
    image = Image.new("RGBA", (size, size), _rgba(light, WHITE))
    draw = ImageDraw.Draw(image)
    fill = _rgba(dark, BLACK)
    radius = scale * _ROUNDED_RATIO if shape == "rounded" else 0

    for row, col in symbol.dark_modules():
        left = (col + border) * scale
        top = (row + border) * scale
        # Pillow boxes include their end coordinates
        box = (left, top, left + scale - 1, top + scale - 1)
        if radius:
            # corners that touch a dark neighbour stay square so joined modules leave no gap
            corners = _open_corners(symbol.modules, row, col)
            draw.rounded_rectangle(box, radius=radius, fill=fill, corners=corners)
        else:
            draw.rectangle(box, fill=fill)

    with io.BytesIO() as buffer:
        image.save(buffer, format="PNG")
        return buffer.getvalue()
