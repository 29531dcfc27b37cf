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

from ...activity_log import log_file_path, open_activity_log
from ...config import AppConfig, load_app_config, parse_layout
from ...core.backup import run_backup, validate_job
from ...core.models import BackupJob, BackupResult
from ...core.policy import parse_selective
from ...crypto import GnupgEncrypter
from ..core.log import _warn
from ..core.types import BackupArgs
from ..ui import build_backup_summary, console


def build_job(args: BackupArgs, config: AppConfig) -> BackupJob:
    return BackupJob(
        source_root=Path(args.src).expanduser(),
        destination_root=config.root_dir,
        encrypt_all=args.encrypt,
        recursive_encrypt=args.recursive,
        selective=parse_selective(args.selective),
        layout=parse_layout(args.layout) if args.layout else config.layout,
        strict_names=args.strict_names or config.strict_names,
        reserved_destinations=frozenset({log_file_path(config)}),
    )


def run_backup_command(args: BackupArgs) -> BackupResult:
    config = load_app_config(
        args.config,
        root_dir=args.root_dir,
        logger_format=args.logger_format,
    )
    job = build_job(args, config)
    validate_job(job)
    if job.encrypt_all or job.recursive_encrypt or job.selective:
        _warn(
            "Encrypted files use a one-time key that is discarded; they cannot be restored.",
            quiet=args.quiet,
        )
    encrypter = GnupgEncrypter(key_length=config.key_length, gpg_binary=config.gpg_binary)
    with open_activity_log(config, console=console, quiet=args.quiet) as log:
        try:
            result = run_backup(job, log=log, encrypter=encrypter)
        except (OSError, RuntimeError, ValueError) as exc:
            log.error(f"Backup failed: {exc}")
            raise
    if not args.quiet:
        console.print(build_backup_summary(result, root_dir=str(config.root_dir)))
    return result
