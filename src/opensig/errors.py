# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from typing import Any


class OpenSigError(Exception):
    """Base class for all opensig SDK errors."""

    def __init__(self, message: str, code: str = "OPENSIG_ERROR") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class InvalidSignatureDataError(OpenSigError):
    """
    Raised when annotation data passed to ``sign`` cannot be encoded.

    Attributes:
        field: The annotation field that failed validation
            (``"type"``, ``"content"`` or ``"encrypted"``).
    """

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message, code="INVALID_SIGNATURE_DATA")
        self.field = field


class NotVerifiedError(OpenSigError):
    """Raised when ``sign`` is called before a successful ``verify``."""

    def __init__(self) -> None:
        super().__init__("Must verify before signing", code="NOT_VERIFIED")


class SigningInProgressError(OpenSigError):
    """Raised when ``sign`` is called while a previous sign is still publishing."""

    def __init__(self) -> None:
        super().__init__("Signing already in progress", code="SIGNING_IN_PROGRESS")


class DocumentHashAlreadySetError(OpenSigError):
    """Raised when a Document's hash is initialised a second time."""

    def __init__(self) -> None:
        super().__init__("document hash already initialised", code="DOCUMENT_HASH_ALREADY_SET")


class InvalidDocumentHashError(OpenSigError):
    """Raised when a document hash is missing or is not 32 bytes long."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INVALID_DOCUMENT_HASH")


class UnsupportedOperationError(OpenSigError):
    """
    Raised by provider operations that the configured backend does not
    implement.  This is an integration error, not a transport failure.
    """

    def __init__(self, operation: str, provider: str) -> None:
        super().__init__(
            f"{provider}.{operation} is not supported by this provider "
            "and must be overridden.",
            code="UNSUPPORTED_OPERATION",
        )
        self.operation = operation
        self.provider = provider


class BlockchainNotSupportedError(OpenSigError):
    """Raised when the connected blockchain is not the one the provider is configured for."""

    def __init__(self, expected_chain_id: int | None = None, actual_chain_id: int | None = None) -> None:
        detail = ""
        if expected_chain_id is not None and actual_chain_id is not None:
            detail = f" (expected chain {expected_chain_id}, connected to {actual_chain_id})"
        super().__init__(f"Blockchain not supported{detail}", code="BLOCKCHAIN_NOT_SUPPORTED")
        self.expected_chain_id = expected_chain_id
        self.actual_chain_id = actual_chain_id


class SignatureAlreadyRegisteredError(OpenSigError):
    """Raised by a registry when a signature hash has already been published."""

    def __init__(self, signature: str) -> None:
        super().__init__(
            f"Signature {signature} is already registered.",
            code="SIGNATURE_ALREADY_REGISTERED",
        )
        self.signature = signature


class TransactionRevertedError(OpenSigError):
    """Raised by a confirmation when the publishing transaction reverted."""

    def __init__(self, tx_hash: str, receipt: Any) -> None:
        super().__init__(f"Transaction {tx_hash} reverted.", code="TRANSACTION_REVERTED")
        self.tx_hash = tx_hash
        self.receipt = receipt


class RpcError(OpenSigError):
    """Raised when a JSON-RPC node returns an error object."""

    def __init__(self, method: str, rpc_code: int | None, rpc_message: str) -> None:
        super().__init__(
            f"JSON-RPC call '{method}' failed: {rpc_message} (code {rpc_code})",
            code="RPC_ERROR",
        )
        self.method = method
        self.rpc_code = rpc_code
        self.rpc_message = rpc_message
