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

from rich.markup import escape

from ...activity_log import open_activity_log
from ...config import load_app_config
from ...core.policy import parse_selective
from ...core.share import run_share
from ..core.log import _warn
from ..core.types import ShareArgs
from ..ui import console


def run_share_command(args: ShareArgs) -> Path | None:
    config = load_app_config(
        args.config,
        root_dir=args.root_dir,
        logger_format=args.logger_format,
    )
    files = parse_selective(args.files)
    if files:
        _warn("--files is accepted but not used by share.", quiet=args.quiet)
    if not args.prev_versions:
        _warn("Nothing to share without --prev-versions.", quiet=args.quiet)
    with open_activity_log(config, console=console, quiet=args.quiet, to_file=False) as log:
        try:
            shared = run_share(
                Path(args.dir).expanduser(),
                prev_versions=args.prev_versions,
                config=config,
                files=files,
            )
        except (OSError, RuntimeError, ValueError) as exc:
            log.error(f"Sharing failed: {exc}")
            raise
    if shared is not None and not args.quiet:
        console.print(f"[success]Shared[/success] {escape(str(shared))}", soft_wrap=True)
    return shared
