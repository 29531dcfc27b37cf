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

from pathlib import Path

from ..config import AppConfig
from .transfer import copy_file


def run_share(
    share_dir: str | Path,
    *,
    prev_versions: bool,
    config: AppConfig,
    files: frozenset[str] = frozenset(),
) -> Path | None:
    """Copy the backup's activity log into ``share_dir``.

    Only the ``prev_versions`` switch does anything; ``files`` is accepted so the
    command line keeps its shape and is otherwise ignored.
    """
    _ = files
    if not prev_versions:
        return None
    source = config.root_dir / config.log_filename
    destination = Path(share_dir) / config.share_log_filename
    copy_file(source, destination)
    return destination
