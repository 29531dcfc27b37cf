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

"""Backup runner.

Drives the walker one file at a time: resolve the encryption policy, write the
destination, then record the source path in the activity log. The first error
from any step aborts the run and propagates unchanged; files already written stay
where they are.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .models import BackupJob, BackupResult, FileEntry, Layout, ProcessedFile
from .policy import should_encrypt
from .state import BackupProgress, BackupState
from .transfer import Encrypter, process
from .walker import walk

if TYPE_CHECKING:
    from ..activity_log import ActivityLog


class NameCollisionError(ValueError):
    def __init__(self, destination: Path, first: Path, second: Path) -> None:
        super().__init__(
            f"name collision at {destination}: {first} and {second} flatten to the same file"
        )
        self.destination = destination
        self.first = first
        self.second = second


class ReservedDestinationError(ValueError):
    def __init__(self, destination: Path, source: Path) -> None:
        super().__init__(
            f"{source} would overwrite {destination}, which is reserved for the activity log"
        )
        self.destination = destination
        self.source = source


def validate_job(job: BackupJob) -> None:
    source = job.source_root.resolve()
    destination = job.destination_root.resolve()
    if not source.is_dir():
        return
    if destination == source or source in destination.parents:
        raise ValueError(f"backup root {job.destination_root} is inside source {job.source_root}")


def _check_collision(entry: FileEntry, job: BackupJob, written: dict[Path, Path]) -> None:
    if entry.destination_path in job.reserved_destinations:
        raise ReservedDestinationError(entry.destination_path, entry.source_path)
    if job.layout is not Layout.FLAT or not job.strict_names:
        return
    previous = written.get(entry.destination_path)
    if previous is not None and previous != entry.source_path:
        raise NameCollisionError(entry.destination_path, previous, entry.source_path)


def run_backup(
    job: BackupJob,
    *,
    log: ActivityLog,
    encrypter: Encrypter,
    progress: BackupProgress | None = None,
) -> BackupResult:
    validate_job(job)
    job.destination_root.mkdir(parents=True, exist_ok=True)
    tracker = progress or BackupProgress()
    processed: list[ProcessedFile] = []
    written: dict[Path, Path] = {}
    try:
        for entry in walk(job.source_root, job.destination_root, layout=job.layout):
            tracker.advance(BackupState.EMITTING)
            _check_collision(entry, job, written)
            if should_encrypt(entry, job):
                tracker.advance(BackupState.ENCRYPTING)
            else:
                tracker.advance(BackupState.COPYING)
            outcome = process(entry, job, encrypter=encrypter)
            tracker.advance(BackupState.LOGGING)
            log.record(entry.source_path)
            written[entry.destination_path] = entry.source_path
            processed.append(ProcessedFile(entry=entry, outcome=outcome))
            tracker.advance(BackupState.SCANNING)
        tracker.advance(BackupState.DONE)
    except Exception:
        tracker.abort()
        raise
    return BackupResult(files=tuple(processed))
