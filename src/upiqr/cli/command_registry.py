#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    encode as encode_command,
    info as info_command,
    scan as scan_command,
    uri as uri_command,
    validate as validate_command,
)


def register(app: typer.Typer) -> None:
    uri_command.register(app)
    encode_command.register(app)
    info_command.register(app)
    validate_command.register(app)
    scan_command.register(app)
