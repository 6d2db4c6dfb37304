# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Ethereum JSON-RPC provider.

Signature lookups go straight to a node's ``eth_getLogs``.  Publishing needs
a wallet, which stays outside this package: pass a ``TransactionSender``
that submits ``registerSignature(bytes32, bytes)`` to the registry contract
and returns the transaction hash.  The provider then tracks confirmation
over the same RPC endpoint.

Uses ``httpx`` for transport.  A caller-owned ``httpx.AsyncClient`` can be
injected for connection reuse or testing.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from typing import Any, Protocol

import httpx

from opensig.config import NetworkConfig
from opensig.errors import (
    BlockchainNotSupportedError,
    RpcError,
    TransactionRevertedError,
    UnsupportedOperationError,
)
from opensig.providers.interface import BlockchainProvider
from opensig.types import PublishedSignature

logger = logging.getLogger("opensig.providers.jsonrpc")


def _log_failed_confirmation(confirmation: asyncio.Future[Any]) -> None:
    # Marks the exception as retrieved; awaiting the confirmation still raises.
    if confirmation.cancelled():
        return
    error = confirmation.exception()
    if error is not None:
        logger.warning("transaction confirmation failed: %s", error)


class TransactionSender(Protocol):
    """
    Wallet-side half of publishing.

    Implementations sign and submit transactions with whatever key
    management they use; the provider never sees private keys.
    """

    async def get_address(self) -> str:
        """Return the address transactions are sent from."""
        ...

    async def register_signature(self, contract: str, signature: str, data: str) -> str:
        """Submit ``registerSignature(signature, data)`` and return the transaction hash."""
        ...


class JsonRpcProvider(BlockchainProvider):
    """
    Provider backed by an HTTP JSON-RPC endpoint.

    Parameters
    ----------
    config:
        Network description, including the registry contract address.
    url:
        JSON-RPC endpoint.
    http_client:
        Optional ``httpx.AsyncClient``.  When omitted the provider creates
        and owns one; close it with ``aclose`` or ``async with``.
    sender:
        Optional ``TransactionSender`` used by ``publish_signature``.
    """

    def __init__(
        self,
        config: NetworkConfig,
        url: str,
        http_client: httpx.AsyncClient | None = None,
        sender: TransactionSender | None = None,
    ) -> None:
        super().__init__(config)
        self.url = url
        self.sender = sender
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=30.0)
        self._request_ids = itertools.count(1)

    async def __aenter__(self) -> JsonRpcProvider:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def call(self, method: str, params: list[Any]) -> Any:
        """Send one JSON-RPC request and return its ``result``."""
        payload = {"jsonrpc": "2.0", "id": next(self._request_ids), "method": method, "params": params}
        response = await self._client.post(self.url, json=payload)
        response.raise_for_status()
        body = response.json()
        error = body.get("error")
        if error is not None:
            raise RpcError(method, error.get("code"), str(error.get("message", "")))
        return body.get("result")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def check_network(self) -> None:
        """Raise ``BlockchainNotSupportedError`` unless the node serves the configured chain."""
        actual = int(await self.call("eth_chainId", []), 16)
        if actual != self.chain_id:
            raise BlockchainNotSupportedError(self.chain_id, actual)

    async def query_signatures(self, ids: list[str]) -> list[Any]:
        log_filter = {
            "address": self.contract,
            "fromBlock": hex(self.config.creation_block) if self.config.creation_block is not None else "earliest",
            "topics": [None, None, ids],
        }
        return await self.call("eth_getLogs", [log_filter]) or []

    async def publish_signature(self, signature: str, data: str) -> PublishedSignature:
        """
        Submit the signature through the configured sender.

        The returned ``confirmation`` is a running task.  Await it for the
        receipt or cancel it to stop polling; a failure that nobody awaits is
        logged at WARNING.
        """
        if self.sender is None:
            raise UnsupportedOperationError("publish_signature", type(self).__name__)
        signatory = await self.sender.get_address()
        tx_hash = await self.sender.register_signature(self.contract, signature, data)
        logger.debug("published signature %s in transaction %s", signature, tx_hash)
        confirmation = asyncio.ensure_future(self.await_transaction_confirmation(tx_hash))
        confirmation.add_done_callback(_log_failed_confirmation)
        return PublishedSignature(
            tx_hash=tx_hash,
            signatory=signatory,
            signature=signature,
            data=data,
            confirmation=confirmation,
        )

    async def get_transaction_receipt(self, tx_hash: str) -> dict[str, Any] | None:
        return await self.call("eth_getTransactionReceipt", [tx_hash])

    async def await_transaction_confirmation(self, tx_hash: str) -> dict[str, Any]:
        """
        Wait one block time, then poll until the transaction has a receipt.

        Returns the receipt (after ``network_latency``) when the transaction
        succeeded and raises ``TransactionRevertedError`` when it reverted.
        There is no overall timeout; cancel the awaiting task to give up.
        """
        await asyncio.sleep(self.config.block_time)
        while True:
            receipt = await self.get_transaction_receipt(tx_hash)
            if receipt is not None:
                break
            await asyncio.sleep(self.config.receipt_poll_interval)

        if int(str(receipt.get("status", "0x0")), 16) != 1:
            raise TransactionRevertedError(tx_hash, receipt)
        if self.config.network_latency > 0:
            await asyncio.sleep(self.config.network_latency)
        return receipt
