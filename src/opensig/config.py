# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field


class NetworkConfig(BaseModel, frozen=True):
    """
    Configuration for a blockchain provider.

    Attributes:
        name: Human-readable network name.
        chain_id: Chain identifier.  Seeds the signature hash chain, so it
            must match the chain the registry contract lives on.
        contract: Address of the OpenSig registry contract on this chain.
        block_time: Average block time in seconds.  A confirmation waits one
            block time before it starts polling for the receipt.
        creation_block: Block in which the registry contract was created.
            Log queries start here; None queries from the genesis block.
        network_latency: Extra delay in seconds after a receipt is seen,
            for setups that publish and query through different nodes.
        receipt_poll_interval: Seconds between receipt polls.

    Example::

        config = NetworkConfig(
            name="Polygon",
            chain_id=137,
            contract="0x1234567890abcdef1234567890abcdef12345678",
            block_time=2.0,
            creation_block=50_000_000,
        )
    """

    name: str = "unknown"
    chain_id: Annotated[int, Field(ge=0)]
    contract: str
    block_time: Annotated[float, Field(ge=0)] = 12.0
    creation_block: Annotated[int, Field(ge=0)] | None = None
    network_latency: Annotated[float, Field(ge=0)] = 0.0
    receipt_poll_interval: Annotated[float, Field(gt=0)] = 1.0
