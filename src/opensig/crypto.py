# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Cryptographic primitives: SHA-256 hashing and the AES-GCM cipher used to
encrypt signature annotations.

The annotation key is the 32-byte document hash itself, so anyone holding
the document can read its encrypted annotations and nobody else can.
"""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

import aiofiles
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

NONCE_LENGTH: int = 12
KEY_LENGTH: int = 32

_READ_CHUNK_SIZE = 1024 * 1024


def sha256(data: bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of ``data``."""
    return hashlib.sha256(data).digest()


async def hash_file(file_path: str | Path) -> bytes:
    """Return the SHA-256 digest of a file's raw bytes, read in chunks."""
    digest = hashlib.sha256()
    async with aiofiles.open(Path(file_path), mode="rb") as file_handle:
        while True:
            chunk = await file_handle.read(_READ_CHUNK_SIZE)
            if not chunk:
                break
            digest.update(chunk)
    return digest.digest()


class EncryptionKey:
    """
    AES-GCM key derived from a 32-byte document hash.

    Ciphertexts are laid out as ``nonce (12 bytes) || ciphertext || tag``.
    The cipher object is built on first use and reused afterwards.

    Parameters
    ----------
    hash:
        The 32-byte document hash used directly as the AES-256 key.
    """

    def __init__(self, hash: bytes) -> None:
        if len(hash) != KEY_LENGTH:
            raise ValueError(f"encryption key must be {KEY_LENGTH} bytes, got {len(hash)}")
        self.hash = bytes(hash)
        self._cipher: AESGCM | None = None

    def _get_cipher(self) -> AESGCM:
        if self._cipher is None:
            self._cipher = AESGCM(self.hash)
        return self._cipher

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt ``data`` under a fresh random nonce and return ``nonce || ciphertext``."""
        nonce = os.urandom(NONCE_LENGTH)
        return nonce + self._get_cipher().encrypt(nonce, bytes(data), None)

    def decrypt(self, data: bytes) -> bytes:
        """
        Split off the nonce and decrypt.

        Raises ``cryptography.exceptions.InvalidTag`` when the key is wrong
        or the ciphertext was altered, and ``ValueError`` when ``data`` is
        too short to hold a nonce.
        """
        if len(data) < NONCE_LENGTH:
            raise ValueError("encrypted data is shorter than the nonce")
        nonce, ciphertext = bytes(data[:NONCE_LENGTH]), bytes(data[NONCE_LENGTH:])
        return self._get_cipher().decrypt(nonce, ciphertext, None)
