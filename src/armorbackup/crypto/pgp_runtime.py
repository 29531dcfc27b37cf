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

"""OpenPGP encryption to a throwaway recipient.

Each call generates a new key pair inside a temporary GnuPG home, encrypts with
ASCII armor to that key and deletes the home afterwards. The private key is never
written anywhere else, so nothing produced here can be decrypted again.
"""

from __future__ import annotations

import shutil
import subprocess
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import gnupg

DEFAULT_IDENTITY = "Backup"
DEFAULT_KEY_LENGTH = 2048
ARMOR_BEGIN = "-----BEGIN PGP MESSAGE-----"
ARMOR_END = "-----END PGP MESSAGE-----"


@dataclass
class PgpError(RuntimeError):
    backend: str
    detail: str

    def __str__(self) -> str:
        message = self.detail.strip() or "unknown error"
        return f"openpgp ({self.backend}) failed: {message}"


@dataclass(frozen=True)
class EphemeralRecipient:
    gpg: gnupg.GPG
    fingerprint: str


def _status_detail(result: object) -> str:
    status = str(getattr(result, "status", "") or "").strip()
    if status:
        return status
    stderr = str(getattr(result, "stderr", "") or "").strip()
    if stderr:
        return stderr.splitlines()[-1]
    return ""


def _key_parameters(identity: str, key_length: int) -> str:
    # primary key signs, subkey encrypts; no email, comment or passphrase
    return "\n".join(
        [
            "Key-Type: RSA",
            f"Key-Length: {key_length}",
            "Key-Usage: sign",
            "Subkey-Type: RSA",
            f"Subkey-Length: {key_length}",
            "Subkey-Usage: encrypt",
            f"Name-Real: {identity}",
            "Expire-Date: 0",
            "%no-protection",
            "%commit",
            "",
        ]
    )


def _open_gpg(home: str, gpg_binary: str | None) -> gnupg.GPG:
    try:
        return gnupg.GPG(gpgbinary=gpg_binary or "gpg", gnupghome=home)
    except (OSError, ValueError) as exc:
        detail = str(exc).strip() or exc.__class__.__name__
        raise PgpError(backend="gnupg", detail=detail) from exc


def _stop_agent(home: str) -> None:
    gpgconf = shutil.which("gpgconf")
    if gpgconf is None:
        return
    subprocess.run(
        [gpgconf, "--homedir", home, "--kill", "gpg-agent"],
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        check=False,
    )


@contextmanager
def ephemeral_recipient(
    *,
    identity: str = DEFAULT_IDENTITY,
    key_length: int = DEFAULT_KEY_LENGTH,
    gpg_binary: str | None = None,
) -> Iterator[EphemeralRecipient]:
    with tempfile.TemporaryDirectory(prefix="armorbackup-gnupg-") as home:
        gpg = _open_gpg(home, gpg_binary)
        try:
            result = gpg.gen_key(_key_parameters(identity, key_length))
            fingerprint = str(getattr(result, "fingerprint", None) or "")
            if not fingerprint:
                raise PgpError(
                    backend="gnupg",
                    detail=f"key generation: {_status_detail(result) or 'no key produced'}",
                )
            yield EphemeralRecipient(gpg=gpg, fingerprint=fingerprint)
        finally:
            _stop_agent(home)


def encrypt_file_armored(
    source: str | Path,
    destination: str | Path,
    *,
    identity: str = DEFAULT_IDENTITY,
    key_length: int = DEFAULT_KEY_LENGTH,
    gpg_binary: str | None = None,
) -> None:
    with ephemeral_recipient(
        identity=identity,
        key_length=key_length,
        gpg_binary=gpg_binary,
    ) as recipient:
        with open(source, "rb") as handle:
            result = recipient.gpg.encrypt_file(
                handle,
                [recipient.fingerprint],
                armor=True,
                always_trust=True,
                output=str(destination),
            )
        if not result.ok:
            raise PgpError(
                backend="gnupg",
                detail=f"encryption: {_status_detail(result) or 'gpg reported failure'}",
            )


@dataclass(frozen=True)
class GnupgEncrypter:
    identity: str = DEFAULT_IDENTITY
    key_length: int = DEFAULT_KEY_LENGTH
    gpg_binary: str | None = None

    def encrypt_file(self, source: Path, destination: Path) -> None:
        encrypt_file_armored(
            source,
            destination,
            identity=self.identity,
            key_length=self.key_length,
            gpg_binary=self.gpg_binary,
        )


def is_armored_message(data: bytes) -> bool:
    text = data.decode("ascii", errors="replace").strip()
    return text.startswith(ARMOR_BEGIN) and text.endswith(ARMOR_END)
