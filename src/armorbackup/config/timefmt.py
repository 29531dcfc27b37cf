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

"""Timestamp layouts.

``logging.format`` accepts either a strftime pattern or a layout written against
Go's reference time ``Mon Jan 2 15:04:05 MST 2006`` (the format the tool has
always shipped as its default). Layouts without ``%`` are translated.
"""

from __future__ import annotations

import re

DEFAULT_LOGGER_FORMAT = "2006-01-02T15:04:05"

_REFERENCE_TOKENS = {
    "2006": "%Y",
    "January": "%B",
    "Monday": "%A",
    "-0700": "%z",
    "Jan": "%b",
    "Mon": "%a",
    "MST": "%Z",
    "PM": "%p",
    "01": "%m",
    "02": "%d",
    "03": "%I",
    "04": "%M",
    "05": "%S",
    "06": "%y",
    "15": "%H",
}
_TOKEN_RE = re.compile("|".join(re.escape(token) for token in _REFERENCE_TOKENS))


def is_strftime_pattern(layout: str) -> bool:
    return "%" in layout


def to_strftime(layout: str) -> str:
    if not layout.strip():
        raise ValueError("logger format must be a non-empty string")
    if is_strftime_pattern(layout):
        return layout
    return _TOKEN_RE.sub(lambda match: _REFERENCE_TOKENS[match.group(0)], layout)
