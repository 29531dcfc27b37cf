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

"""Activity log written next to the backup.

The core only sees the :class:`ActivityLog` protocol. The CLI opens a
``logging``-backed implementation that appends to ``<root>/backup.log`` and
mirrors each line to the terminal through rich.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from rich.console import Console, ConsoleRenderable
from rich.logging import RichHandler

from .config import AppConfig

LOGGER_NAME = "armorbackup.activity"
COPIED_FILE_MESSAGE = "Copied file: {path}"


class ActivityLog(Protocol):
    def record(self, path: Path) -> None: ...

    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


@dataclass
class LoggingActivityLog:
    logger: logging.Logger

    def record(self, path: Path) -> None:
        self.logger.info(COPIED_FILE_MESSAGE.format(path=path))

    def info(self, message: str) -> None:
        self.logger.info(message)

    def error(self, message: str) -> None:
        self.logger.error(message)


@dataclass
class MemoryActivityLog:
    lines: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def record(self, path: Path) -> None:
        self.lines.append(COPIED_FILE_MESSAGE.format(path=path))

    def info(self, message: str) -> None:
        self.lines.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


def log_file_path(config: AppConfig) -> Path:
    return config.root_dir / config.log_filename


def _file_handler(config: AppConfig) -> logging.FileHandler:
    path = log_file_path(config)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", errors="surrogateescape")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(message)s", datefmt=config.timestamp_format)
    )
    return handler


class _ConsoleHandler(RichHandler):
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        # undecodable file names arrive surrogate-escaped; the terminal gets them escaped
        printable = message.encode("utf-8", "backslashreplace").decode("utf-8")
        return super().render_message(record, printable)


def _console_handler(config: AppConfig, console: Console) -> RichHandler:
    return _ConsoleHandler(
        console=console,
        show_level=False,
        show_path=False,
        markup=False,
        log_time_format=config.timestamp_format,
    )


@contextmanager
def open_activity_log(
    config: AppConfig,
    *,
    console: Console | None = None,
    quiet: bool = False,
    to_file: bool = True,
) -> Iterator[LoggingActivityLog]:
    """Attach the log handlers for one command.

    ``to_file=False`` keeps ``backup.log`` untouched, for commands that only read it.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    handlers: list[logging.Handler] = [_file_handler(config)] if to_file else []
    if console is not None and not quiet:
        handlers.append(_console_handler(config, console))
    if not handlers:
        handlers.append(logging.NullHandler())
    for handler in handlers:
        logger.addHandler(handler)
    try:
        yield LoggingActivityLog(logger)
    finally:
        for handler in handlers:
            logger.removeHandler(handler)
            handler.close()
