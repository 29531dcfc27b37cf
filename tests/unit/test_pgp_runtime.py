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

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from armorbackup.crypto import (
    ARMOR_BEGIN,
    ARMOR_END,
    GnupgEncrypter,
    PgpError,
    encrypt_file_armored,
    ephemeral_recipient,
    is_armored_message,
)
from armorbackup.crypto import pgp_runtime
from tests.test_support import requires_gpg


def _fake_gpg(
    *, fingerprint: str | None = "F" * 40, ok: bool = True, status: str = ""
) -> mock.Mock:
    gpg = mock.Mock()
    gpg.gen_key.return_value = mock.Mock(fingerprint=fingerprint, status=status, stderr="")
    gpg.encrypt_file.return_value = mock.Mock(ok=ok, status=status, stderr="")
    return gpg


class TestPgpRuntimeMocked(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self._tmp.name)
        self.source = self.tmp_path / "plain.txt"
        self.source.write_bytes(b"plaintext payload")
        self.dest = self.tmp_path / "plain.txt.asc"
        patcher = mock.patch("armorbackup.crypto.pgp_runtime._stop_agent")
        self.stop_agent = patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_encrypts_to_fresh_key_with_armor(self) -> None:
        gpg = _fake_gpg()
        with mock.patch("armorbackup.crypto.pgp_runtime.gnupg.GPG", return_value=gpg) as ctor:
            encrypt_file_armored(self.source, self.dest)

        home = ctor.call_args.kwargs["gnupghome"]
        self.assertFalse(os.path.exists(home))
        self.assertEqual(ctor.call_args.kwargs["gpgbinary"], "gpg")
        params = gpg.gen_key.call_args.args[0]
        self.assertIn("Name-Real: Backup", params)
        self.assertIn("%no-protection", params)
        self.assertIn("Key-Length: 2048", params)
        self.assertNotIn("Name-Email", params)
        self.assertNotIn("Name-Comment", params)
        self.assertNotIn("Passphrase", params)

        args, kwargs = gpg.encrypt_file.call_args
        self.assertEqual(args[1], ["F" * 40])
        self.assertTrue(kwargs["armor"])
        self.assertTrue(kwargs["always_trust"])
        self.assertEqual(kwargs["output"], str(self.dest))
        self.assertNotIn("sign", kwargs)
        self.assertNotIn("symmetric", kwargs)
        self.stop_agent.assert_called_once_with(home)

    def test_encrypter_forwards_settings(self) -> None:
        gpg = _fake_gpg()
        encrypter = GnupgEncrypter(key_length=3072, gpg_binary="/opt/gpg")
        with mock.patch("armorbackup.crypto.pgp_runtime.gnupg.GPG", return_value=gpg) as ctor:
            encrypter.encrypt_file(self.source, self.dest)
        self.assertEqual(ctor.call_args.kwargs["gpgbinary"], "/opt/gpg")
        self.assertIn("Key-Length: 3072", gpg.gen_key.call_args.args[0])

    def test_each_call_generates_a_new_key(self) -> None:
        gpg = _fake_gpg()
        with mock.patch("armorbackup.crypto.pgp_runtime.gnupg.GPG", return_value=gpg) as ctor:
            encrypt_file_armored(self.source, self.dest)
            encrypt_file_armored(self.source, self.dest)
        self.assertEqual(gpg.gen_key.call_count, 2)
        homes = [call.kwargs["gnupghome"] for call in ctor.call_args_list]
        self.assertNotEqual(homes[0], homes[1])

    def test_keyring_cleanup_failure_is_raised(self) -> None:
        real_home = tempfile.TemporaryDirectory()
        self.addCleanup(real_home.cleanup)

        class _UndeletableHome:
            def __init__(self, **kwargs: object) -> None:
                self.kwargs = kwargs

            def __enter__(self) -> str:
                return real_home.name

            def __exit__(self, *exc_info: object) -> None:
                raise PermissionError(f"cannot remove {real_home.name}")

        gpg = _fake_gpg()
        with mock.patch("armorbackup.crypto.pgp_runtime.gnupg.GPG", return_value=gpg):
            with mock.patch(
                "armorbackup.crypto.pgp_runtime.tempfile.TemporaryDirectory",
                side_effect=_UndeletableHome,
            ) as factory:
                with self.assertRaisesRegex(PermissionError, "cannot remove"):
                    encrypt_file_armored(self.source, self.dest)
        self.assertNotIn("ignore_cleanup_errors", factory.call_args.kwargs)
        gpg.encrypt_file.assert_called_once()

    def test_missing_binary_raises_pgp_error(self) -> None:
        with mock.patch(
            "armorbackup.crypto.pgp_runtime.gnupg.GPG",
            side_effect=OSError("Unable to run gpg (gpg) - it may not be available."),
        ):
            with self.assertRaisesRegex(PgpError, "Unable to run gpg"):
                encrypt_file_armored(self.source, self.dest)

    def test_key_generation_failure(self) -> None:
        gpg = _fake_gpg(fingerprint=None, status="key not created")
        with mock.patch("armorbackup.crypto.pgp_runtime.gnupg.GPG", return_value=gpg):
            with self.assertRaisesRegex(PgpError, "key generation: key not created"):
                encrypt_file_armored(self.source, self.dest)
        gpg.encrypt_file.assert_not_called()

    def test_encryption_failure(self) -> None:
        gpg = _fake_gpg(ok=False, status="invalid recipient")
        with mock.patch("armorbackup.crypto.pgp_runtime.gnupg.GPG", return_value=gpg):
            with self.assertRaisesRegex(PgpError, "encryption: invalid recipient"):
                encrypt_file_armored(self.source, self.dest)

    def test_missing_source_raises_os_error(self) -> None:
        gpg = _fake_gpg()
        with mock.patch("armorbackup.crypto.pgp_runtime.gnupg.GPG", return_value=gpg):
            with self.assertRaises(FileNotFoundError):
                encrypt_file_armored(self.tmp_path / "missing", self.dest)

    def test_pgp_error_message(self) -> None:
        self.assertEqual(str(PgpError("gnupg", "  ")), "openpgp (gnupg) failed: unknown error")
        self.assertIsInstance(PgpError("gnupg", "x"), RuntimeError)

    def test_status_detail_falls_back_to_stderr(self) -> None:
        result = mock.Mock(status=None, stderr="gpg: one\ngpg: last line\n")
        self.assertEqual(pgp_runtime._status_detail(result), "gpg: last line")

    def test_is_armored_message(self) -> None:
        self.assertTrue(is_armored_message(f"{ARMOR_BEGIN}\n\nabc\n{ARMOR_END}\n".encode()))
        self.assertFalse(is_armored_message(b"hello"))


@requires_gpg
class TestPgpRuntimeGnupg(unittest.TestCase):
    def test_real_encryption_produces_armored_ciphertext(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp_path = Path(tmpdir)
            source = tmp_path / "secret.txt"
            source.write_bytes(b"hello world\n" * 100)
            first = tmp_path / "first.asc"
            second = tmp_path / "second.asc"
            encrypt_file_armored(source, first)
            encrypt_file_armored(source, second)

            data = first.read_bytes()
            self.assertTrue(is_armored_message(data))
            self.assertNotIn(b"hello world", data)
            self.assertNotEqual(data, source.read_bytes())
            self.assertNotEqual(data, second.read_bytes())

    def test_ephemeral_home_is_removed(self) -> None:
        with ephemeral_recipient() as recipient:
            home = recipient.gpg.gnupghome
            self.assertEqual(len(recipient.fingerprint), 40)
            self.assertTrue(os.path.isdir(home))
        self.assertFalse(os.path.exists(home))


if __name__ == "__main__":
    unittest.main()
