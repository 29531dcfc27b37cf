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

import unittest
from pathlib import Path

from armorbackup.core.models import FileEntry
from armorbackup.core.policy import parse_selective, should_encrypt
from tests.test_support import make_job


def _entry(name: str) -> FileEntry:
    return FileEntry(source_path=Path("src") / "nested" / name, destination_path=Path("out") / name)


class TestParseSelective(unittest.TestCase):
    def test_parse_selective(self) -> None:
        cases = (
            (None, frozenset()),
            ("", frozenset()),
            ("a.txt", frozenset({"a.txt"})),
            ("a.txt, b.txt ,,", frozenset({"a.txt", "b.txt"})),
            (" , ", frozenset()),
        )
        for raw, expected in cases:
            with self.subTest(raw=raw):
                self.assertEqual(parse_selective(raw), expected)


class TestShouldEncrypt(unittest.TestCase):
    def test_flag_combinations(self) -> None:
        cases = (
            {"kwargs": {}, "name": "a.txt", "expected": False},
            {"kwargs": {"encrypt_all": True}, "name": "a.txt", "expected": True},
            {"kwargs": {"recursive_encrypt": True}, "name": "a.txt", "expected": True},
            {"kwargs": {"selective": ("a.txt",)}, "name": "a.txt", "expected": True},
            {"kwargs": {"selective": ("a.txt",)}, "name": "b.txt", "expected": False},
            {
                "kwargs": {"encrypt_all": True, "selective": ("a.txt",)},
                "name": "b.txt",
                "expected": True,
            },
            {
                "kwargs": {"recursive_encrypt": True, "selective": ("a.txt",)},
                "name": "b.txt",
                "expected": True,
            },
        )
        for case in cases:
            with self.subTest(case=case):
                job = make_job(Path("src"), Path("out"), **case["kwargs"])
                self.assertEqual(should_encrypt(_entry(case["name"]), job), case["expected"])

    def test_selective_matches_basename_only(self) -> None:
        job = make_job(Path("src"), Path("out"), selective=("nested/a.txt",))
        self.assertFalse(should_encrypt(_entry("a.txt"), job))


if __name__ == "__main__":
    unittest.main()
