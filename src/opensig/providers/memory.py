# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Volatile in-memory signature registry.

Behaves like the registry contract: each signature hash can be registered
once, and every registration is recorded as a ``Signature`` log.  Suitable
for testing, examples and offline use.  Data is lost when the process exits.
"""

from __future__ import annotations

import asyncio
import time
import uuid
from typing import Any

from eth_utils import to_checksum_address

from opensig.config import NetworkConfig
from opensig.errors import SignatureAlreadyRegisteredError
from opensig.providers.interface import BlockchainProvider
from opensig.types import PublishedSignature, RegistryLog
from opensig.utils import strip_0x

DEFAULT_SIGNATORY: str = "0x" + "00" * 19 + "01"


class MemoryProvider(BlockchainProvider):
    """
    In-memory, non-persistent registry implementing both provider operations.

    Parameters
    ----------
    config:
        Network description.  Defaults to a local chain with id 1.
    signatory:
        Address recorded as the signer of every published signature.
    """

    def __init__(
        self,
        config: NetworkConfig | None = None,
        signatory: str = DEFAULT_SIGNATORY,
    ) -> None:
        super().__init__(
            config or NetworkConfig(name="memory", chain_id=1, contract="0x" + "00" * 20)
        )
        self.signatory = to_checksum_address(signatory)
        self._logs: list[RegistryLog] = []
        self._registered: set[str] = set()

    async def publish_signature(self, signature: str, data: str) -> PublishedSignature:
        key = "0x" + strip_0x(signature).lower()
        if key in self._registered:
            raise SignatureAlreadyRegisteredError(signature)
        self._registered.add(key)
        self._logs.append(
            RegistryLog(time=int(time.time()), signer=self.signatory, signature=key, data=data)
        )
        tx_hash = "0x" + uuid.uuid4().hex * 2
        receipt = {"transactionHash": tx_hash, "status": 1, "blockNumber": len(self._logs)}
        confirmation: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        confirmation.set_result(receipt)
        return PublishedSignature(
            tx_hash=tx_hash,
            signatory=self.signatory,
            signature=signature,
            data=data,
            confirmation=confirmation,
        )

    async def query_signatures(self, ids: list[str]) -> list[Any]:
        wanted = {"0x" + strip_0x(i).lower() for i in ids}
        return [log.model_dump() for log in self._logs if log.signature in wanted]

    def is_registered(self, signature: str) -> bool:
        return "0x" + strip_0x(signature).lower() in self._registered

    def count(self) -> int:
        """Return the number of signatures registered so far."""
        return len(self._logs)
