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

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Layout(str, Enum):
    FLAT = "flat"
    MIRROR = "mirror"


class EncryptionOutcome(str, Enum):
    PLAIN_COPY = "plain"
    ARMORED_CIPHERTEXT = "armored"


@dataclass(frozen=True)
class BackupJob:
    """Everything one backup invocation needs; built once and never mutated."""

    source_root: Path
    destination_root: Path
    encrypt_all: bool = False
    recursive_encrypt: bool = False
    selective: frozenset[str] = field(default_factory=frozenset)
    layout: Layout = Layout.FLAT
    strict_names: bool = False
    reserved_destinations: frozenset[Path] = field(default_factory=frozenset)


@dataclass(frozen=True)
class FileEntry:
    source_path: Path
    destination_path: Path
    is_directory: bool = False


@dataclass(frozen=True)
class ProcessedFile:
    entry: FileEntry
    outcome: EncryptionOutcome


@dataclass(frozen=True)
class BackupResult:
    files: tuple[ProcessedFile, ...] = ()

    @property
    def encrypted_count(self) -> int:
        return sum(1 for item in self.files if item.outcome is EncryptionOutcome.ARMORED_CIPHERTEXT)

    @property
    def copied_count(self) -> int:
        return sum(1 for item in self.files if item.outcome is EncryptionOutcome.PLAIN_COPY)
