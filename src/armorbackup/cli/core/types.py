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


@dataclass
class BackupArgs:
    """Typed container for backup command arguments."""

    src: str
    config: str | None = None
    root_dir: str | None = None
    logger_format: str | None = None
    encrypt: bool = False
    recursive: bool = False
    selective: str | None = None
    layout: str | None = None
    strict_names: bool = False
    debug: bool = False
    quiet: bool = False


@dataclass
class ShareArgs:
    """Typed container for share command arguments."""

    dir: str
    config: str | None = None
    root_dir: str | None = None
    logger_format: str | None = None
    files: str | None = None
    prev_versions: bool = False
    debug: bool = False
    quiet: bool = False
