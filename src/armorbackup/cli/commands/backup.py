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
from ..core.types import BackupArgs
from ..flows.backup import run_backup_command

_BACKUP_HELP = (
    "Copy every file under a source directory into the backup root.\n\n"
    "Files land directly in the backup root by name. Encrypted files are ASCII-armored\n"
    "OpenPGP messages addressed to a one-time key that is thrown away.\n\n"
    "Examples:\n"
    "  armorbackup backup --src ./documents\n"
    "  armorbackup backup --src ./documents --encrypt\n"
    "  armorbackup backup --src ./documents --selective secrets.txt,keys.txt\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_BACKUP_HELP)(backup)


def backup(
    ctx: typer.Context,
    src: str | None = typer.Option(
        None,
        "--src",
        "-s",
        help="Source directory to back up.",
        rich_help_panel="Inputs",
    ),
    encrypt: bool = typer.Option(
        False,
        "--encrypt",
        help="Encrypt every file.",
        rich_help_panel="Encryption",
    ),
    recursive: bool = typer.Option(
        False,
        "--recursive",
        help="Encrypt files in all subdirectories (same effect as --encrypt).",
        rich_help_panel="Encryption",
    ),
    selective: str | None = typer.Option(
        None,
        "--selective",
        help="Encrypt only these file names (comma-separated).",
        rich_help_panel="Encryption",
    ),
    layout: str | None = typer.Option(
        None,
        "--layout",
        help="flat (file names only, default) or mirror (keep subdirectories).",
        rich_help_panel="Outputs",
    ),
    strict_names: bool = typer.Option(
        False,
        "--strict-names",
        help="Fail instead of overwriting when two files share a name in flat layout.",
        rich_help_panel="Outputs",
    ),
) -> None:
    src_value = _require_option(src, "Source directory is required for backup")
    debug_value = bool(_ctx_value(ctx, "debug"))
    args = BackupArgs(
        src=src_value,
        config=_ctx_value(ctx, "config"),
        root_dir=_ctx_value(ctx, "root_dir"),
        logger_format=_ctx_value(ctx, "logger_format"),
        encrypt=encrypt,
        recursive=recursive,
        selective=selective,
        layout=layout,
        strict_names=strict_names,
        debug=debug_value,
        quiet=bool(_ctx_value(ctx, "quiet")),
    )
    _run_cli(functools.partial(run_backup_command, args), debug=debug_value)
