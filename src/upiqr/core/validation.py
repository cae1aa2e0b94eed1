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

"""Argument checks shared by the encoder, renderers and config loader."""

from __future__ import annotations


def is_exact_int(value: object) -> bool:
    # bool is an int subclass; True must not pass as a scale of 1.
    return isinstance(value, int) and not isinstance(value, bool)


def require_positive_int(value: object, *, label: str) -> int:
    if not is_exact_int(value) or value <= 0:
        raise ValueError(f"{label} must be a positive int")
    return value


def require_non_negative_int(value: object, *, label: str) -> int:
    if not is_exact_int(value) or value < 0:
        raise ValueError(f"{label} must be a non-negative int")
    return value


def require_int_range(value: object, *, min_val: int, max_val: int, label: str) -> int:
    if not is_exact_int(value):
        raise ValueError(f"{label} must be an int")
    if not min_val <= value <= max_val:
        raise ValueError(f"{label} must be between {min_val} and {max_val}")
    return value


def require_choice(value: object, choices: tuple[str, ...], *, label: str) -> str:
    """Return ``value`` stripped and lower-cased if it names one of ``choices``."""
    normalized = value.strip().lower() if isinstance(value, str) else None
    if normalized not in choices:
        raise ValueError(f"{label} must be one of: {', '.join(choices)}")
    return normalized
