# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Signature annotation codec (OpenSig standard v0.1).

Wire layout, hex encoded with a ``0x`` prefix::

    [version:1][type:1][payload:*]

``type`` is the content type (0 = UTF-16BE string, 1 = raw bytes) OR'd with
``0x80`` when the payload is encrypted.  An encrypted payload is
``nonce(12) || AES-GCM ciphertext+tag`` keyed by the document hash.  A
signature without an annotation carries the empty payload ``0x``.

Encoding rejects bad input.  Decoding never raises: registry data is public
and may be malformed or addressed to another key, so problems come back as
``"invalid"`` annotations or empty content.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from cryptography.exceptions import InvalidTag
from pydantic import BaseModel

from opensig.crypto import EncryptionKey
from opensig.errors import InvalidSignatureDataError
from opensig.types import NO_SIGNATURE_DATA, SignatureData
from opensig.utils import (
    bytes_to_hex,
    hex_to_bytes,
    is_hex_string,
    strip_0x,
    unicode_hex_to_str,
    unicode_str_to_hex,
)

logger = logging.getLogger("opensig.codec")

SIG_DATA_VERSION: str = "00"
SIG_DATA_ENCRYPTED_FLAG: int = 0x80
SIG_DATA_TYPE_STRING: int = 0
SIG_DATA_TYPE_BYTES: int = 1

EMPTY_DATA: str = "0x"

# version byte + type byte + at least one payload byte
MIN_DATA_LENGTH: int = 3


def _as_mapping(data: SignatureData | Mapping[str, Any] | None) -> Mapping[str, Any]:
    if data is None:
        return {}
    if isinstance(data, BaseModel):
        return data.model_dump()
    return data


def encode_data(
    data: SignatureData | Mapping[str, Any] | None,
    encryption_key: EncryptionKey | None,
) -> str:
    """
    Encode an annotation for publishing.

    ``data`` has the keys ``type`` (``"string"`` or ``"hex"``), ``content``
    and ``encrypted``.  Missing or empty content, including empty hex
    (``"0x"``), encodes to ``"0x"``.

    Raises ``InvalidSignatureDataError`` when the type is unknown, the
    encrypted flag is not a boolean, or the content does not match the type.
    """
    fields = _as_mapping(data)
    content = fields.get("content")
    if content is None or content == "":
        return EMPTY_DATA

    encrypted = fields.get("encrypted")
    if encrypted is not None and not isinstance(encrypted, bool):
        raise InvalidSignatureDataError("invalid data encrypted flag", field="encrypted")

    data_type = fields.get("type")
    if data_type == "string":
        if not isinstance(content, str):
            raise InvalidSignatureDataError("invalid data content", field="content")
        type_field = SIG_DATA_TYPE_STRING
        payload = unicode_str_to_hex(content)
    elif data_type == "hex":
        if not is_hex_string(content):
            raise InvalidSignatureDataError("invalid data content", field="content")
        type_field = SIG_DATA_TYPE_BYTES
        payload = strip_0x(content).lower()
        if not payload:
            return EMPTY_DATA
    else:
        raise InvalidSignatureDataError(f"invalid data type '{data_type}'", field="type")

    if encrypted:
        if encryption_key is None:
            raise InvalidSignatureDataError(
                "encrypted data requires an encryption key", field="encrypted"
            )
        type_field |= SIG_DATA_ENCRYPTED_FLAG
        payload = bytes_to_hex(encryption_key.encrypt(bytes.fromhex(payload)), prefix=False)

    return f"0x{SIG_DATA_VERSION}{type_field:02x}{payload}"


def decode_data(encoded: str | bytes | None, encryption_key: EncryptionKey | None) -> SignatureData:
    """
    Decode an on-chain annotation payload.

    Returns ``type="none"`` for an empty payload and ``type="invalid"`` with a
    diagnostic ``content`` for anything that cannot be interpreted.  An
    encrypted payload that fails to decrypt decodes with empty content.
    """
    if isinstance(encoded, (bytes, bytearray)):
        encoded = bytes_to_hex(encoded)
    if not encoded or encoded == EMPTY_DATA:
        return NO_SIGNATURE_DATA
    if not is_hex_string(encoded):
        return SignatureData(type="invalid", content="data is not a hex string")

    digits = strip_0x(encoded).lower()
    if len(digits) < MIN_DATA_LENGTH * 2:
        return SignatureData(type="invalid", content=f"data is < {MIN_DATA_LENGTH} bytes")

    version = digits[0:2]
    type_field = int(digits[2:4], 16)
    encrypted = bool(type_field & SIG_DATA_ENCRYPTED_FLAG)
    data_type = type_field & ~SIG_DATA_ENCRYPTED_FLAG

    payload = digits[4:]
    if encrypted and payload:
        payload = _decrypt_payload(payload, encryption_key)

    if data_type == SIG_DATA_TYPE_STRING:
        return SignatureData(
            type="string",
            content=unicode_hex_to_str(payload),
            encrypted=encrypted,
            version=version,
        )
    if data_type == SIG_DATA_TYPE_BYTES:
        return SignatureData(type="hex", content="0x" + payload, encrypted=encrypted, version=version)
    return SignatureData(
        type="invalid",
        content=f"unrecognised type: {data_type} (version={version})",
        encrypted=encrypted,
        version=version,
    )


def _decrypt_payload(payload: str, encryption_key: EncryptionKey | None) -> str:
    if encryption_key is None:
        logger.debug("no encryption key available for encrypted signature data")
        return ""
    try:
        return bytes_to_hex(encryption_key.decrypt(hex_to_bytes(payload)), prefix=False)
    except (InvalidTag, ValueError) as error:
        logger.debug("failed to decrypt signature data: %r", error)
        return ""
