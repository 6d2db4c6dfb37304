# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Signature discovery and publishing.

Discovery walks a document's hash chain in batches, asking the registry
which of the batch's hashes have been published.  A full batch means more
signatures may follow, so the next batch is queried; a short batch ends the
search.  When the signature count is an exact multiple of the batch size
this costs one extra, empty, query.  Other OpenSig clients stop on the same
rule, so it is kept as is.

Batches are queried strictly one after another: whether to continue and
which index is the latest published both depend on the previous batch.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from opensig.chain import HashChain
from opensig.codec import decode_data, encode_data
from opensig.crypto import EncryptionKey
from opensig.events import parse_signature_log
from opensig.types import (
    DiscoveryResult,
    PublishedSignature,
    SignatureData,
    SignatureEvent,
    UnparseableSignatureEvent,
)
from opensig.utils import bytes_to_hex

logger = logging.getLogger("opensig.discovery")

# Maximum number of signatures to search for in each verification query.
MAX_SIGS_PER_DISCOVERY_ITERATION: int = 10

QuerySignatures = Callable[[list[str]], Awaitable[list[Any]]]


def decode_signature_event(record: Any, encryption_key: EncryptionKey | None) -> SignatureEvent:
    """
    Turn a raw registry log record into a SignatureEvent, decrypting and
    decoding its annotation.  Unreadable records become an
    UnparseableSignatureEvent.
    """
    log = parse_signature_log(record)
    if log is None:
        logger.debug("unparseable signature event: %r", record)
        return UnparseableSignatureEvent(event=record)
    return SignatureEvent(
        time=log.time,
        signatory=log.signer,
        signature=log.signature,
        data=decode_data(log.data, encryption_key),
        event=record,
    )


async def discover_signatures(
    chain_id: int | str,
    document_hash: bytes,
    encryption_key: EncryptionKey | None,
    query: QuerySignatures,
) -> DiscoveryResult:
    """
    Find every published signature of a document on one chain.

    Parameters
    ----------
    chain_id:
        Chain the signatures were published to.
    document_hash:
        32-byte document hash.
    encryption_key:
        Key used to decrypt encrypted annotations.
    query:
        Async callable taking a list of ``0x``-hex signature hashes and
        returning the matching raw log records, in any order.

    Returns
    -------
    DiscoveryResult
        The decoded signatures, in the order returned, and the hash chain
        positioned at the latest published signature (index -1 if none).
    """
    hashes = HashChain(document_hash, chain_id)
    signatures: list[SignatureEvent] = []
    last_signature_index = -1

    while True:
        batch = [bytes_to_hex(h) for h in hashes.extend(MAX_SIGS_PER_DISCOVERY_ITERATION)]
        logger.debug("querying the blockchain for signatures: %s", batch)

        records = await query(batch)
        logger.debug("found events: %r", records)

        events = [decode_signature_event(record, encryption_key) for record in records]
        signatures.extend(events)

        for event in events:
            if not event.parsed:
                continue
            index = hashes.index_of(event.signature)
            if index > last_signature_index:
                last_signature_index = index

        if len(events) != MAX_SIGS_PER_DISCOVERY_ITERATION:
            hashes.reset(last_signature_index)
            return DiscoveryResult(signatures=signatures, hashes=hashes)


async def publish_signature(
    network: Any,
    signature: bytes,
    data: SignatureData | Mapping[str, Any] | None,
    encryption_key: EncryptionKey | None,
) -> PublishedSignature:
    """
    Encode ``data`` and publish ``signature`` with it through ``network``.

    Raises ``InvalidSignatureDataError`` before anything is published when
    the annotation cannot be encoded.  Provider failures propagate unchanged.
    """
    signature_hex = bytes_to_hex(signature)
    encoded = encode_data(data, encryption_key)
    logger.debug("publishing signature: %s with data %s", signature_hex, encoded)
    return await network.publish_signature(signature_hex, encoded)
