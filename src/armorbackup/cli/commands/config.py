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

import typer

from ...config import load_app_config, resolve_config_path
from ..core.common import _ctx_value, _run_cli
from ..ui import console

_CONFIG_HELP = (
    "Show the effective settings.\n\n"
    "Values come from command-line options, then the TOML config file, then\n"
    "ARMORBACKUP_ROOT_DIR, then built-in defaults.\n\n"
    "Examples:\n"
    "  armorbackup config\n"
    "  armorbackup config --root-dir /mnt/backup --logger-format %Y-%m-%d\n"
    "  armorbackup config --print-path\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_CONFIG_HELP)(config)


def config(
    ctx: typer.Context,
    root_dir: str | None = typer.Option(
        None,
        "--root-dir",
        help="Root directory for the backup.",
        rich_help_panel="Config",
    ),
    logger_format: str | None = typer.Option(
        None,
        "--logger-format",
        help="Timestamp format for backup.log (Go layout or strftime).",
        rich_help_panel="Config",
    ),
    print_path: bool = typer.Option(
        False,
        "--print-path",
        help="Print the config file in use and exit.",
        rich_help_panel="Behavior",
    ),
) -> None:
    config_value = _ctx_value(ctx, "config")
    root_value = root_dir or _ctx_value(ctx, "root_dir")
    format_value = logger_format or _ctx_value(ctx, "logger_format")
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        if print_path:
            path = resolve_config_path(config_value)
            _print_plain("(built-in defaults)" if path is None else str(path))
            return
        settings = load_app_config(
            config_value,
            root_dir=root_value,
            logger_format=format_value,
        )
        _print_plain(f"Root Directory: {settings.root_dir}")
        _print_plain(f"Logger Format: {settings.logger_format}")

    _run_cli(_run, debug=debug_value)


def _print_plain(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)
