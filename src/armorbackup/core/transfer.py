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

import shutil
from pathlib import Path
from typing import Protocol

from .models import BackupJob, EncryptionOutcome, FileEntry
from .policy import should_encrypt

COPY_BUFFER_SIZE = 64 * 1024


class Encrypter(Protocol):
    def encrypt_file(self, source: Path, destination: Path) -> None: ...


def copy_file(source: Path, destination: Path) -> None:
    with open(source, "rb") as src, open(destination, "wb") as dest:
        shutil.copyfileobj(src, dest, COPY_BUFFER_SIZE)


def process(entry: FileEntry, job: BackupJob, *, encrypter: Encrypter) -> EncryptionOutcome:
    if entry.is_directory:
        raise ValueError(f"directories are not copied as entries: {entry.source_path}")
    entry.destination_path.parent.mkdir(parents=True, exist_ok=True)
    if should_encrypt(entry, job):
        encrypter.encrypt_file(entry.source_path, entry.destination_path)
        return EncryptionOutcome.ARMORED_CIPHERTEXT
    copy_file(entry.source_path, entry.destination_path)
    return EncryptionOutcome.PLAIN_COPY
