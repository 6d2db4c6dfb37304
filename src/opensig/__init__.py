# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
opensig — Sign and verify documents on a blockchain with the OpenSig protocol.

Public API surface:

    Classes:
        Document          — verify() then sign() a document identified by its hash
        File              — Document whose hash is taken from a file
        HashChain         — Deterministic per-document, per-chain signature hashes
        EncryptionKey     — AES-GCM key derived from a document hash
        MemoryProvider    — In-process signature registry
        JsonRpcProvider   — Ethereum JSON-RPC signature registry
        BlockchainProvider — Base class for custom providers

    Functions:
        discover_signatures — Batched discovery of a document's published signatures
        publish_signature   — Encode an annotation and publish a signature hash
        encode_data         — Encode a signature annotation
        decode_data         — Decode a signature annotation
        parse_signature_log — Read a raw log record as a registry event

    Types:
        SignatureData, SignatureEvent, UnparseableSignatureEvent, RegistryLog,
        PublishedSignature, DiscoveryResult, NetworkConfig, SignatureRegistry
"""

from opensig.chain import HashChain
from opensig.codec import decode_data, encode_data
from opensig.config import NetworkConfig
from opensig.crypto import EncryptionKey, hash_file, sha256
from opensig.discovery import (
    MAX_SIGS_PER_DISCOVERY_ITERATION,
    discover_signatures,
    publish_signature,
)
from opensig.document import Document, File
from opensig.errors import (
    BlockchainNotSupportedError,
    DocumentHashAlreadySetError,
    InvalidDocumentHashError,
    InvalidSignatureDataError,
    NotVerifiedError,
    OpenSigError,
    RpcError,
    SignatureAlreadyRegisteredError,
    SigningInProgressError,
    TransactionRevertedError,
    UnsupportedOperationError,
)
from opensig.events import encode_log_data, parse_signature_log
from opensig.providers import (
    BlockchainProvider,
    JsonRpcProvider,
    MemoryProvider,
    SignatureRegistry,
    TransactionSender,
)
from opensig.types import (
    DiscoveryResult,
    PublishedSignature,
    RegistryLog,
    SignatureData,
    SignatureEvent,
    UnparseableSignatureEvent,
)

__all__ = [
    # Core classes
    "Document",
    "File",
    "HashChain",
    "EncryptionKey",
    # Providers
    "BlockchainProvider",
    "SignatureRegistry",
    "TransactionSender",
    "MemoryProvider",
    "JsonRpcProvider",
    # Functions
    "discover_signatures",
    "publish_signature",
    "encode_data",
    "decode_data",
    "parse_signature_log",
    "encode_log_data",
    "hash_file",
    "sha256",
    "MAX_SIGS_PER_DISCOVERY_ITERATION",
    # Types
    "NetworkConfig",
    "SignatureData",
    "SignatureEvent",
    "UnparseableSignatureEvent",
    "RegistryLog",
    "PublishedSignature",
    "DiscoveryResult",
    # Errors
    "OpenSigError",
    "InvalidSignatureDataError",
    "NotVerifiedError",
    "SigningInProgressError",
    "DocumentHashAlreadySetError",
    "InvalidDocumentHashError",
    "UnsupportedOperationError",
    "BlockchainNotSupportedError",
    "SignatureAlreadyRegisteredError",
    "TransactionRevertedError",
    "RpcError",
]
