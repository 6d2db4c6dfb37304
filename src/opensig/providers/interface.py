# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
The two operations a Document needs from a blockchain.

Anything with a ``chain_id`` and the two coroutines of ``SignatureRegistry``
can back a Document.  ``BlockchainProvider`` is a convenience base class
carrying a ``NetworkConfig``; operations a subclass leaves out fail
immediately with ``UnsupportedOperationError``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from opensig.config import NetworkConfig
from opensig.errors import UnsupportedOperationError
from opensig.types import PublishedSignature


@runtime_checkable
class SignatureRegistry(Protocol):
    """Structural contract for signature publishing and lookup backends."""

    chain_id: int

    async def publish_signature(self, signature: str, data: str) -> PublishedSignature:
        """
        Publish a signature hash with its encoded annotation.

        Resolves once the transaction has been submitted, not confirmed.
        Raises when the user cancels or the transaction cannot be submitted.
        """
        ...

    async def query_signatures(self, ids: list[str]) -> list[Any]:
        """
        Return the registry log records for any of the given signature
        hashes (``0x``-prefixed, 32 bytes) that have been published.
        """
        ...


class BlockchainProvider:
    """
    Base class for providers configured from a ``NetworkConfig``.

    Parameters
    ----------
    config:
        Network the provider talks to.
    """

    def __init__(self, config: NetworkConfig) -> None:
        self.config = config

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def chain_id(self) -> int:
        return self.config.chain_id

    @property
    def contract(self) -> str:
        return self.config.contract

    async def publish_signature(self, signature: str, data: str) -> PublishedSignature:
        raise UnsupportedOperationError("publish_signature", type(self).__name__)

    async def query_signatures(self, ids: list[str]) -> list[Any]:
        raise UnsupportedOperationError("query_signatures", type(self).__name__)
