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

import functools

import typer

from ..core.common import _ctx_value, _require_option, _run_cli
from ..core.types import ShareArgs
from ..flows.share import run_share_command

_SHARE_HELP = (
    "Export the backup activity log to another directory.\n\n"
    "Examples:\n"
    "  armorbackup share --dir ./outbox --prev-versions\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_SHARE_HELP)(share)


def share(
    ctx: typer.Context,
    share_dir: str | None = typer.Option(
        None,
        "--dir",
        "-d",
        help="Directory to share into.",
        rich_help_panel="Outputs",
    ),
    files: str | None = typer.Option(
        None,
        "--files",
        help="Files to send (comma-separated, currently unused).",
        rich_help_panel="Inputs",
    ),
    prev_versions: bool = typer.Option(
        False,
        "--prev-versions",
        help="Copy backup.log into the share directory as backup_share.log.",
        rich_help_panel="Inputs",
    ),
) -> None:
    dir_value = _require_option(share_dir, "Directory to share is required for sharing")
    debug_value = bool(_ctx_value(ctx, "debug"))
    args = ShareArgs(
        dir=dir_value,
        config=_ctx_value(ctx, "config"),
        root_dir=_ctx_value(ctx, "root_dir"),
        logger_format=_ctx_value(ctx, "logger_format"),
        files=files,
        prev_versions=prev_versions,
        debug=debug_value,
        quiet=bool(_ctx_value(ctx, "quiet")),
    )
    _run_cli(functools.partial(run_share_command, args), debug=debug_value)
