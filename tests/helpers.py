# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation
"""Test doubles and log builders shared across the opensig test modules."""

from __future__ import annotations

import asyncio
from typing import Any

from opensig.events import SIGNATURE_EVENT_TOPIC, address_topic, encode_log_data
from opensig.types import PublishedSignature

SAMPLE_HASH = bytes.fromhex("abcdef1234567890abcdef1234567890abcdef1234567890abcdef1234567890")


def make_rpc_log(time: int, signer: str, signature: str, data: bytes, index: int = 0) -> dict[str, Any]:
    """Build an ``eth_getLogs`` style entry for a registry Signature event."""
    return {
        "address": "0x1234567890abcdef1234567890abcdef12345678",
        "blockHash": "0x1c8aff950685c2ed4bc3174f3472287b56d9517b9c948127319a09a7a36deac8",
        "blockNumber": hex(index + 1),
        "logIndex": hex(index),
        "removed": False,
        "transactionHash": "0x1c8aff950685c2ed4bc3174f3472287b56d9517b9c948127319a09a7a36deac8",
        "transactionIndex": "0x0",
        "data": encode_log_data(time, data),
        "topics": [SIGNATURE_EVENT_TOPIC, address_topic(signer), signature],
    }


def make_structured_log(time: int, signer: str, signature: str, data: str = "0x") -> dict[str, Any]:
    return {"time": time, "signer": signer, "signature": signature, "data": data}


class MockNetwork:
    """
    Scriptable provider double that records every call.

    ``query_results`` is consumed one batch per query; once exhausted every
    query returns no records.  ``publish_errors`` is consumed one entry per
    publish; ``None`` entries publish successfully.
    """

    def __init__(self, chain_id: int = 1) -> None:
        self.chain_id = chain_id
        self.query_calls: list[list[str]] = []
        self.publish_calls: list[tuple[str, str]] = []
        self.query_results: list[list[Any]] = []
        self.query_error: BaseException | None = None
        self.publish_errors: list[BaseException | None] = []
        self.publish_delay: float = 0.0

    async def query_signatures(self, ids: list[str]) -> list[Any]:
        self.query_calls.append(list(ids))
        if self.query_error is not None:
            raise self.query_error
        if self.query_results:
            return self.query_results.pop(0)
        return []

    async def publish_signature(self, signature: str, data: str) -> PublishedSignature:
        self.publish_calls.append((signature, data))
        if self.publish_delay:
            await asyncio.sleep(self.publish_delay)
        if self.publish_errors:
            error = self.publish_errors.pop(0)
            if error is not None:
                raise error
        confirmation: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        confirmation.set_result("confirmed")
        return PublishedSignature(
            tx_hash="0x123",
            signatory="0xabc",
            signature=signature,
            data=data,
            confirmation=confirmation,
        )
