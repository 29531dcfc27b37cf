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

"""Config loading and the user config file."""

from .installer import (
    DEFAULT_CONFIG_PATH,
    init_user_config,
    resolve_config_path,
    user_config_path,
)
from .loader import (
    DEFAULT_LOG_FILENAME,
    DEFAULT_ROOT_DIR,
    DEFAULT_SHARE_LOG_FILENAME,
    ROOT_DIR_ENV,
    AppConfig,
    load_app_config,
    parse_layout,
)
from .timefmt import DEFAULT_LOGGER_FORMAT, to_strftime

__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_LOGGER_FORMAT",
    "DEFAULT_LOG_FILENAME",
    "DEFAULT_ROOT_DIR",
    "DEFAULT_SHARE_LOG_FILENAME",
    "ROOT_DIR_ENV",
    "init_user_config",
    "load_app_config",
    "parse_layout",
    "resolve_config_path",
    "to_strftime",
    "user_config_path",
]
