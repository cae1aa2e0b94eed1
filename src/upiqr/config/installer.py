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

"""Where config files live and how the packaged defaults reach the user."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "upiqr"
CONFIG_FILENAME = "config.toml"
CONFIG_PATH_ENV = "UPIQR_CONFIG"
XDG_CONFIG_ENV = "XDG_CONFIG_HOME"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().with_name("default.toml")


@dataclass(frozen=True)
class ConfigPaths:
    directory: Path

    @property
    def config_file(self) -> Path:
        return self.directory / CONFIG_FILENAME


def user_config_home() -> Path:
    xdg_home = os.environ.get(XDG_CONFIG_ENV)
    if xdg_home:
        return Path(xdg_home) / APP_NAME
    if sys.platform == "darwin":
        # platformdirs would pick ~/Library/Application Support
        return Path.home() / ".config" / APP_NAME
    return Path(user_config_dir(APP_NAME, appauthor=False))


def user_paths() -> ConfigPaths:
    return ConfigPaths(directory=user_config_home())


def init_user_config() -> Path:
    """Install the packaged defaults as the user config unless one is already there.

    Returns the user config file path.
    """
    target = user_paths().config_file
    if target.exists():
        return target
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        _install_defaults(target)
    except OSError as exc:
        raise OSError(f"unable to write default config to {target}: {exc}") from exc
    return target


def _install_defaults(target: Path) -> None:
    staging = target.with_name(f".{target.name}.tmp")
    staging.write_bytes(DEFAULT_CONFIG_PATH.read_bytes())
    os.replace(staging, target)


def resolve_config_path(path: str | Path | None = None) -> Path:
    """Pick the config file: explicit path, then $UPIQR_CONFIG, then user, then packaged."""
    for candidate in (path, os.environ.get(CONFIG_PATH_ENV)):
        if candidate:
            return Path(candidate)
    user_file = user_paths().config_file
    return user_file if user_file.is_file() else DEFAULT_CONFIG_PATH
