# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Shared type definitions for the opensig package.

Decoded annotations and signature events are frozen Pydantic v2 models:
they describe facts already recorded on a blockchain and are never edited.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Literal

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from opensig.chain import HashChain

SignatureDataType = Literal["none", "string", "hex", "invalid"]


class SignatureData(BaseModel):
    """
    An annotation attached to a signature.

    ``type`` is ``"string"`` (UTF-16 text) or ``"hex"`` (``0x``-prefixed
    binary) for annotations that decoded cleanly, ``"none"`` when the
    signature carries no annotation, and ``"invalid"`` when the on-chain
    bytes could not be interpreted (``content`` then holds a diagnostic).
    """

    model_config = ConfigDict(frozen=True)

    type: SignatureDataType
    content: str | None = None
    encrypted: bool | None = None
    version: str | None = None


NO_SIGNATURE_DATA = SignatureData(type="none")


class RegistryLog(BaseModel):
    """
    The four fields of a registry ``Signature`` event.

    ``data`` is the raw annotation payload as a ``0x``-prefixed hex string.
    """

    model_config = ConfigDict(frozen=True)

    time: int = Field(..., ge=0, description="Block timestamp in seconds.")
    signer: str = Field(..., description="Address of the account that published the signature.")
    signature: str = Field(..., description="32-byte signature hash, 0x-prefixed hex.")
    data: str = Field(default="0x", description="Encoded annotation payload.")


class SignatureEvent(BaseModel):
    """A signature discovered on the blockchain, with its annotation decoded."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    time: int
    signatory: str
    signature: str
    data: SignatureData
    event: Any = None
    parsed: bool = True


class UnparseableSignatureEvent(SignatureEvent):
    """
    Stand-in for a log record that could not be read as a registry event.

    Discovery keeps these in its result rather than failing the batch.
    """

    time: int = 0
    signatory: str = ""
    signature: str = ""
    data: SignatureData = NO_SIGNATURE_DATA
    parsed: bool = False


@dataclass(frozen=True)
class PublishedSignature:
    """
    Returned by a provider once a signature transaction has been submitted.

    Attributes:
        tx_hash: Hash of the submitted transaction.
        signatory: Address of the signing account.
        signature: The signature hash that was published.
        data: The encoded annotation payload that was published.
        confirmation: Awaitable resolving to the transaction receipt once
            the transaction is confirmed.
    """

    tx_hash: str
    signatory: str
    signature: str
    data: str
    confirmation: Awaitable[Any]


@dataclass(frozen=True)
class DiscoveryResult:
    """
    Outcome of a discovery run.

    ``hashes`` is left pointing at the last published signature, so its next
    ``extend`` yields the first unused signature hash.
    """

    signatures: list[SignatureEvent]
    hashes: HashChain
