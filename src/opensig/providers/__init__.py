# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation
from opensig.providers.interface import BlockchainProvider, SignatureRegistry
from opensig.providers.jsonrpc import JsonRpcProvider, TransactionSender
from opensig.providers.memory import MemoryProvider

__all__ = [
    "BlockchainProvider",
    "SignatureRegistry",
    "JsonRpcProvider",
    "TransactionSender",
    "MemoryProvider",
]
