# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Reading registry ``Signature`` events.

The registry contract emits::

    event Signature(uint256 time, address indexed signer, bytes32 indexed signature, bytes data)

As returned by ``eth_getLogs`` the event selector sits in ``topics[0]``, the
indexed fields in ``topics[1]`` and ``topics[2]``, and the non-indexed
``(time, data)`` tuple is ABI encoded in the log's ``data`` field.  Indexers
and in-process registries may instead hand back the four fields directly;
both shapes are accepted here.  Signer addresses are returned in EIP-55
checksum form.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import eth_abi
from eth_abi.exceptions import DecodingError
from eth_utils import keccak, to_checksum_address
from pydantic import ValidationError

from opensig.types import RegistryLog
from opensig.utils import bytes_to_hex, hex_to_bytes, is_hex_string, strip_0x

WORD_SIZE: int = 32

SIGNATURE_EVENT_ABI: str = "Signature(uint256,address,bytes32,bytes)"
SIGNATURE_EVENT_TOPIC: str = bytes_to_hex(keccak(text=SIGNATURE_EVENT_ABI))

_LOG_DATA_TYPES = ["uint256", "bytes"]

_STRUCTURED_FIELDS = ("time", "signer", "signature")


def encode_log_data(time: int, data: bytes) -> str:
    """ABI encode the non-indexed ``(uint256 time, bytes data)`` event fields."""
    return bytes_to_hex(eth_abi.encode(_LOG_DATA_TYPES, [time, bytes(data)]))


def decode_log_data(encoded: str) -> tuple[int, bytes]:
    """
    Decode the ABI encoded ``(uint256 time, bytes data)`` fields.

    Raises ``ValueError`` when the encoding is truncated or inconsistent.
    """
    try:
        time, data = eth_abi.decode(_LOG_DATA_TYPES, hex_to_bytes(encoded))
    except DecodingError as error:
        raise ValueError(f"malformed log data: {error}") from error
    return time, data


def address_topic(address: str) -> str:
    """Left-pad a 20-byte address into a 32-byte indexed topic."""
    return "0x" + strip_0x(address).lower().rjust(2 * WORD_SIZE, "0")


def _topic_to_address(topic: str) -> str:
    if not is_hex_string(topic) or len(strip_0x(topic)) != 2 * WORD_SIZE:
        raise ValueError(f"malformed address topic: {topic!r}")
    return to_checksum_address("0x" + strip_0x(topic)[-40:])


def _parse_rpc_log(record: Mapping[str, Any]) -> RegistryLog:
    topics = record["topics"]
    if len(topics) < 3:
        raise ValueError("Signature event has fewer than three topics")
    if "0x" + strip_0x(str(topics[0])).lower() != SIGNATURE_EVENT_TOPIC:
        raise ValueError(f"not a Signature event: {topics[0]!r}")
    signature = topics[2]
    if not is_hex_string(signature) or len(strip_0x(signature)) != 2 * WORD_SIZE:
        raise ValueError(f"malformed signature topic: {signature!r}")
    time, data = decode_log_data(record["data"])
    return RegistryLog(
        time=time,
        signer=_topic_to_address(topics[1]),
        signature="0x" + strip_0x(signature).lower(),
        data=bytes_to_hex(data),
    )


def parse_signature_log(record: Any) -> RegistryLog | None:
    """
    Read a raw log record as a registry ``Signature`` event.

    Returns None when the record has neither recognised shape or its
    contents are malformed.
    """
    if isinstance(record, RegistryLog):
        return record
    if not isinstance(record, Mapping):
        return None
    try:
        if "topics" in record and "data" in record:
            return _parse_rpc_log(record)
        if all(name in record for name in _STRUCTURED_FIELDS):
            fields = dict(record)
            if isinstance(fields.get("data"), (bytes, bytearray)):
                fields["data"] = bytes_to_hex(fields["data"])
            parsed = RegistryLog.model_validate(fields)
            return parsed.model_copy(
                update={
                    "signer": to_checksum_address(parsed.signer),
                    "signature": parsed.signature.lower(),
                }
            )
    except (KeyError, TypeError, ValueError, ValidationError):
        return None
    return None
