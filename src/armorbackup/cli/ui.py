#!/usr/bin/env python3
from __future__ import annotations

import sys
from dataclasses import dataclass

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from ..core.models import BackupResult


def isatty(stream, fallback) -> bool:
    if stream is not None:
        try:
            return bool(stream.isatty())
        except (OSError, ValueError, AttributeError):
            return False
    return bool(getattr(fallback, "isatty", lambda: False)())


THEME = Theme(
    {
        "title": "bold cyan",
        "accent": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "muted": "dim",
    }
)


@dataclass
class UIContext:
    theme: Theme
    console: Console
    console_err: Console


def _build_console(*, stderr: bool) -> Console:
    raw = sys.__stderr__ if stderr else sys.__stdout__
    fallback = sys.stderr if stderr else sys.stdout
    return Console(stderr=stderr, theme=THEME, force_terminal=isatty(raw, fallback))


DEFAULT_CONTEXT = UIContext(
    theme=THEME,
    console=_build_console(stderr=False),
    console_err=_build_console(stderr=True),
)
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def configure_ui(*, no_color: bool, context: UIContext | None = None) -> None:
    context = context or DEFAULT_CONTEXT
    context.console.no_color = no_color
    context.console_err.no_color = no_color


def build_backup_summary(result: BackupResult, *, root_dir: str) -> Table:
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column(style="muted")
    table.add_column(style="accent")
    table.add_row("Backup root", root_dir)
    table.add_row("Copied", str(result.copied_count))
    table.add_row("Encrypted", str(result.encrypted_count))
    return table
