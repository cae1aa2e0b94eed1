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

from dataclasses import replace
from pathlib import Path

import typer

from ...core.validation import require_choice
from ...qr.codec import MIME_TYPES, OUTPUT_KINDS, QrConfig, make_qr, render_symbol
from ...qr.scan import decode_png
from ...qr.symbol import QrSymbol
from ...render.svg import data_uri
from ...upi.uri import build_upi_uri
from ..core.common import GlobalOptions, _is_quiet, _load_config, _run_cli
from ..core.log import _warn
from ..core.options import (
    AMOUNT_OPTION,
    CURRENCY_OPTION,
    MCC_OPTION,
    NAME_OPTION,
    NOTE_OPTION,
    REF_OPTION,
    VPA_OPTION,
    build_params,
)
from ..ui import print_status

_ENCODE_HELP = (
    "Encode a UPI payment link as a QR code.\n\n"
    "Without --output the image is printed as a data URI.\n\n"
    "Examples:\n"
    "  upiqr encode --vpa merchant@upi --amount 250 --note Test\n"
    "  upiqr encode --vpa merchant@upi -o pay.svg\n"
    "  upiqr encode --vpa merchant@upi -o pay.png --scale 8 --verify\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_ENCODE_HELP)(encode)


def encode(
    ctx: typer.Context,
    vpa: str = VPA_OPTION,
    name: str | None = NAME_OPTION,
    amount: float | None = AMOUNT_OPTION,
    currency: str | None = CURRENCY_OPTION,
    note: str | None = NOTE_OPTION,
    mcc: str | None = MCC_OPTION,
    ref: str | None = REF_OPTION,
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the image to this file instead of printing a data URI.",
        rich_help_panel="Outputs",
    ),
    format: str | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Image format: svg or png (defaults to the output suffix, then config).",
        rich_help_panel="Outputs",
    ),
    scale: int | None = typer.Option(
        None,
        "--scale",
        min=1,
        help="Pixels per module.",
        rich_help_panel="QR",
    ),
    border: int | None = typer.Option(
        None,
        "--border",
        min=0,
        help="Quiet zone width in modules.",
        rich_help_panel="QR",
    ),
    mask: int | None = typer.Option(
        None,
        "--mask",
        min=0,
        max=7,
        help="Mask pattern (0-7).",
        rich_help_panel="QR",
    ),
    qr_version: int | None = typer.Option(
        None,
        "--qr-version",
        min=1,
        max=10,
        help="Force a QR version instead of picking the smallest that fits.",
        rich_help_panel="QR",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail instead of cutting payloads that do not fit.",
        rich_help_panel="QR",
    ),
    verify: bool = typer.Option(
        False,
        "--verify",
        help="Decode the rendered symbol with zxing-cpp and compare it to the link.",
        rich_help_panel="QR",
    ),
) -> None:
    def _run(options: GlobalOptions) -> None:
        config = _load_config(options)
        quiet = _is_quiet(options, config)
        qr_config = _apply_overrides(
            config.qr_config,
            output=output,
            format=format,
            scale=scale,
            border=border,
            mask=mask,
            qr_version=qr_version,
            strict=strict,
        )
        params = build_params(
            vpa=vpa,
            name=name,
            amount=amount,
            currency=currency,
            note=note,
            mcc=mcc,
            ref=ref,
            default_currency=config.upi.currency,
        )
        link = build_upi_uri(params)
        symbol = make_qr(
            link,
            version=qr_config.version,
            mask=qr_config.mask,
            strict=qr_config.strict,
        )
        if symbol.overflow:
            _warn(
                f"payment link ({symbol.payload_length} bytes) does not fit QR version "
                f"{symbol.version}; the symbol will not decode to the full link",
                quiet=quiet,
            )
        if verify:
            _verify_symbol(symbol, link)
            if not quiet:
                print_status("Verified", "symbol decodes to the payment link", style="ok")

        image = render_symbol(
            symbol,
            scale=qr_config.scale,
            border=qr_config.border,
            kind=qr_config.kind,
            dark=qr_config.dark,
            light=qr_config.light,
            module_shape=qr_config.module_shape,
        )
        if output is None:
            typer.echo(data_uri(image, MIME_TYPES[qr_config.kind]))
            return
        output.write_bytes(image)
        if not quiet:
            print_status("Wrote", str(output), style="field")

    _run_cli(ctx, _run)


def _apply_overrides(
    qr_config: QrConfig,
    *,
    output: Path | None,
    format: str | None,
    scale: int | None,
    border: int | None,
    mask: int | None,
    qr_version: int | None,
    strict: bool,
) -> QrConfig:
    kind = None
    if format is not None:
        kind = require_choice(format, OUTPUT_KINDS, label="format")
    elif output is not None:
        suffix = output.suffix.lower().lstrip(".")
        if suffix in OUTPUT_KINDS:
            kind = suffix
    overrides: dict[str, object] = {
        "kind": kind,
        "scale": scale,
        "border": border,
        "mask": mask,
        "version": qr_version,
        "strict": True if strict else None,
    }
    updates = {key: value for key, value in overrides.items() if value is not None}
    return replace(qr_config, **updates)


def _verify_symbol(symbol: QrSymbol, link: str) -> None:
    png = render_symbol(symbol, scale=4, border=4, kind="png")
    decoded = decode_png(png)
    expected = link.encode("latin-1", errors="replace")
    if decoded != [expected]:
        raise RuntimeError("rendered symbol does not decode to the payment link")
