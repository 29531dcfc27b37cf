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

"""Depth-first traversal of a source tree.

Nodes are visited in lexical order within each directory, each exactly once.
Symlinks are never followed. Any ``OSError`` raised while listing or inspecting a
node propagates to the caller and ends the traversal.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from pathlib import Path

from .models import FileEntry, Layout


def iter_tree(source_root: str | Path) -> Iterator[tuple[Path, bool]]:
    """Yield ``(path, is_directory)`` for every node under ``source_root``, root included."""
    root = Path(source_root)
    # the root itself is resolved through a symlink; nothing below it is
    is_dir = stat.S_ISDIR(os.stat(root).st_mode)
    yield root, is_dir
    if is_dir:
        yield from _iter_directory(root)


def _iter_directory(directory: Path) -> Iterator[tuple[Path, bool]]:
    with os.scandir(directory) as scan:
        children = sorted(scan, key=lambda item: item.name)
    for child in children:
        child_path = Path(child.path)
        child_is_dir = child.is_dir(follow_symlinks=False)
        yield child_path, child_is_dir
        if child_is_dir:
            yield from _iter_directory(child_path)


def walk(
    source_root: str | Path,
    destination_root: str | Path,
    *,
    layout: Layout = Layout.FLAT,
) -> Iterator[FileEntry]:
    root = Path(source_root)
    dest_root = Path(destination_root)
    for path, is_dir in iter_tree(root):
        if is_dir:
            continue
        yield FileEntry(
            source_path=path,
            destination_path=destination_for(path, root, dest_root, layout=layout),
        )


def destination_for(
    path: Path,
    source_root: Path,
    destination_root: Path,
    *,
    layout: Layout = Layout.FLAT,
) -> Path:
    if layout is Layout.MIRROR and path != source_root:
        return destination_root / path.relative_to(source_root)
    return destination_root / path.name
