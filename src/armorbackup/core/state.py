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


class BackupState(str, Enum):
    SCANNING = "scanning"
    EMITTING = "emitting"
    ENCRYPTING = "encrypting"
    COPYING = "copying"
    LOGGING = "logging"
    DONE = "done"
    ABORTED = "aborted"


_TRANSITIONS: dict[BackupState, frozenset[BackupState]] = {
    BackupState.SCANNING: frozenset({BackupState.EMITTING, BackupState.DONE}),
    BackupState.EMITTING: frozenset({BackupState.ENCRYPTING, BackupState.COPYING}),
    BackupState.ENCRYPTING: frozenset({BackupState.LOGGING}),
    BackupState.COPYING: frozenset({BackupState.LOGGING}),
    BackupState.LOGGING: frozenset({BackupState.SCANNING}),
    BackupState.DONE: frozenset(),
    BackupState.ABORTED: frozenset(),
}

TERMINAL_STATES = frozenset({BackupState.DONE, BackupState.ABORTED})


@dataclass
class BackupProgress:
    """Tracks where a backup run is; ``ABORTED`` is reachable from any live state."""

    state: BackupState = BackupState.SCANNING
    history: list[BackupState] = field(default_factory=lambda: [BackupState.SCANNING])

    def advance(self, target: BackupState) -> None:
        if target is BackupState.ABORTED and self.state not in TERMINAL_STATES:
            self._set(target)
            return
        if target not in _TRANSITIONS[self.state]:
            raise RuntimeError(f"invalid backup transition: {self.state.value} -> {target.value}")
        self._set(target)

    def abort(self) -> None:
        self.advance(BackupState.ABORTED)

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES

    def _set(self, target: BackupState) -> None:
        self.state = target
        self.history.append(target)
