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

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from ..core.models import Layout
from ..crypto.pgp_runtime import DEFAULT_KEY_LENGTH
from .installer import resolve_config_path
from .timefmt import DEFAULT_LOGGER_FORMAT, to_strftime

DEFAULT_ROOT_DIR = "./backup"
DEFAULT_LOG_FILENAME = "backup.log"
DEFAULT_SHARE_LOG_FILENAME = "backup_share.log"
ROOT_DIR_ENV = "ARMORBACKUP_ROOT_DIR"
MIN_KEY_LENGTH = 1024


@dataclass(frozen=True)
class AppConfig:
    root_dir: Path = Path(DEFAULT_ROOT_DIR)
    logger_format: str = DEFAULT_LOGGER_FORMAT
    layout: Layout = Layout.FLAT
    strict_names: bool = False
    gpg_binary: str | None = None
    key_length: int = DEFAULT_KEY_LENGTH
    log_filename: str = DEFAULT_LOG_FILENAME
    share_log_filename: str = DEFAULT_SHARE_LOG_FILENAME

    @property
    def timestamp_format(self) -> str:
        return to_strftime(self.logger_format)


def load_app_config(
    path: str | Path | None = None,
    *,
    root_dir: str | Path | None = None,
    logger_format: str | None = None,
) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path) if config_path is not None else {}
    backup_cfg = _get_dict(data, "backup")
    logging_cfg = _get_dict(data, "logging")
    gpg_cfg = _get_dict(data, "gpg")

    resolved_root = (
        root_dir
        or _parse_optional_str(backup_cfg.get("root_dir"), field="backup.root_dir")
        or os.environ.get(ROOT_DIR_ENV)
        or DEFAULT_ROOT_DIR
    )
    resolved_format = (
        logger_format
        or _parse_optional_str(logging_cfg.get("format"), field="logging.format")
        or DEFAULT_LOGGER_FORMAT
    )
    to_strftime(resolved_format)
    key_length = _parse_key_length(gpg_cfg.get("key_length"), field="gpg.key_length")
    return AppConfig(
        root_dir=Path(resolved_root).expanduser(),
        logger_format=resolved_format,
        layout=_parse_layout(backup_cfg.get("layout"), field="backup.layout"),
        strict_names=_parse_bool(
            backup_cfg.get("strict_names"), field="backup.strict_names", default=False
        ),
        gpg_binary=_parse_optional_str(gpg_cfg.get("binary"), field="gpg.binary"),
        key_length=key_length,
    )


def parse_layout(value: object) -> Layout:
    return _parse_layout(value, field="layout")


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_optional_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    return normalized or None


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{field} must be a boolean")


def _parse_layout(value: object, *, field: str) -> Layout:
    if value is None:
        return Layout.FLAT
    if isinstance(value, Layout):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if not normalized:
            return Layout.FLAT
        try:
            return Layout(normalized)
        except ValueError:
            pass
    raise ValueError(f"{field} must be 'flat' or 'mirror'")


def _parse_key_length(value: object, *, field: str) -> int:
    if value is None:
        return DEFAULT_KEY_LENGTH
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"{field} must be an integer")
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{field} must be an integer") from exc
    if parsed < MIN_KEY_LENGTH:
        raise ValueError(f"{field} must be at least {MIN_KEY_LENGTH}")
    return parsed
