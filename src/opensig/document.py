# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Document: primary entry point for signing and verifying a document.

A Document coordinates three concerns:

1. Identity: the 32-byte document hash, which also keys annotation encryption.
2. Discovery: finding the document's published signatures and, with them,
   the next unused signature hash.
3. Publishing: registering that hash, with an optional annotation, through
   the configured provider.

Usage::

    from opensig import Document, MemoryProvider

    document = Document(MemoryProvider(), document_hash)
    signatures = await document.verify()
    result = await document.sign({"type": "string", "content": "approved", "encrypted": True})
    receipt = await result.confirmation

A Document must be verified before it can be signed, and it signs one
signature at a time.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from opensig.chain import HashChain
from opensig.crypto import KEY_LENGTH, EncryptionKey, hash_file
from opensig.discovery import discover_signatures, publish_signature
from opensig.errors import (
    DocumentHashAlreadySetError,
    InvalidDocumentHashError,
    NotVerifiedError,
    SigningInProgressError,
)
from opensig.providers.interface import SignatureRegistry
from opensig.types import PublishedSignature, SignatureData, SignatureEvent
from opensig.utils import bytes_to_hex, hex_to_bytes

logger = logging.getLogger("opensig.document")


def _to_document_hash(value: bytes | bytearray | str) -> bytes:
    if isinstance(value, str):
        try:
            value = hex_to_bytes(value)
        except ValueError as error:
            raise InvalidDocumentHashError(f"document hash is not valid hex: {error}") from error
    if not isinstance(value, (bytes, bytearray)):
        raise InvalidDocumentHashError(
            f"document hash must be bytes or a hex string, got {type(value).__name__}"
        )
    if len(value) != KEY_LENGTH:
        raise InvalidDocumentHashError(
            f"document hash must be {KEY_LENGTH} bytes, got {len(value)}"
        )
    return bytes(value)


class Document:
    """
    A document, identified by its hash, that can be signed and verified.

    Parameters
    ----------
    network:
        Provider used to query and publish signatures.  Its ``chain_id``
        selects the signature hash chain.
    document_hash:
        32-byte hash of the document (bytes or hex).  May be omitted by
        subclasses that derive the hash later.
    """

    def __init__(
        self,
        network: SignatureRegistry,
        document_hash: bytes | bytearray | str | None = None,
    ) -> None:
        self.network = network
        self.document_hash: bytes | None = None
        self.encryption_key: EncryptionKey | None = None
        self.hashes: HashChain | None = None
        self.signatures: list[SignatureEvent] = []
        self._signing_in_progress = False
        if document_hash is not None:
            self._set_document_hash(document_hash)

    @property
    def signing_in_progress(self) -> bool:
        return self._signing_in_progress

    @property
    def verified(self) -> bool:
        return self.hashes is not None

    async def verify(self) -> list[SignatureEvent]:
        """
        Retrieve every signature of this document on the provider's chain.

        May be called any number of times; each successful call replaces
        the document's hash chain with a freshly positioned one.  On failure
        the previous state is left untouched.

        Returns
        -------
        list[SignatureEvent]
            Signatures in the order the provider returned them, or an empty
            list if the document has never been signed.
        """
        if self.document_hash is None:
            raise InvalidDocumentHashError("document hash has not been set")
        logger.debug("verifying hash %s", bytes_to_hex(self.document_hash))
        result = await discover_signatures(
            self.network.chain_id,
            self.document_hash,
            self.encryption_key,
            self.network.query_signatures,
        )
        self.hashes = result.hashes
        self.signatures = result.signatures
        return result.signatures

    async def sign(
        self,
        data: SignatureData | Mapping[str, Any] | None = None,
    ) -> PublishedSignature:
        """
        Sign the document with the next unused signature hash.

        ``data`` optionally annotates the signature with ``type``
        (``"string"`` or ``"hex"``), ``content`` and ``encrypted``.  Encrypted
        annotations are keyed by the document hash.

        If encoding or publishing fails the signature hash is released, so
        the next ``sign`` uses the same hash again.

        Raises
        ------
        SigningInProgressError
            A previous ``sign`` on this document has not finished.
        NotVerifiedError
            ``verify`` has not completed successfully yet.
        """
        if self._signing_in_progress:
            raise SigningInProgressError()
        if self.hashes is None:
            raise NotVerifiedError()
        hashes = self.hashes
        self._signing_in_progress = True
        try:
            signature = hashes.extend(1)[0]
            try:
                return await publish_signature(self.network, signature, data, self.encryption_key)
            except BaseException:
                hashes.reset(hashes.current_index() - 1)
                raise
        finally:
            self._signing_in_progress = False

    def _set_document_hash(self, document_hash: bytes | bytearray | str) -> None:
        if self.document_hash is not None:
            raise DocumentHashAlreadySetError()
        self.document_hash = _to_document_hash(document_hash)
        self.encryption_key = EncryptionKey(self.document_hash)


class File(Document):
    """
    A Document whose hash is the SHA-256 of a file's contents.

    The file is read and hashed on the first ``verify``; later calls reuse
    the hash.

    Parameters
    ----------
    network:
        Provider used to query and publish signatures.
    file_path:
        Path of the file to sign.
    """

    def __init__(self, network: SignatureRegistry, file_path: str | Path) -> None:
        super().__init__(network)
        self.file_path = Path(file_path)

    async def verify(self) -> list[SignatureEvent]:
        if self.document_hash is None:
            logger.debug("verifying file %s", self.file_path)
            file_hash = await hash_file(self.file_path)
            if self.document_hash is None:
                self._set_document_hash(file_hash)
        return await super().verify()
