# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Deterministic chain of signature hashes for a document on a given blockchain.

For a document hash ``Hd`` on chain ``C``::

    Hc   = SHA256(ascii(C) || Hd)          chain-specific document hash
    H[0] = SHA256(Hc)
    H[i] = SHA256(Hc || H[i-1])            for i >= 1

Every OpenSig client derives exactly this sequence, so the n-th signature of
a document can be looked up on-chain by anyone holding the document.  The
chain id in the seed keeps signatures on different chains unlinkable.
"""

from __future__ import annotations

from opensig.crypto import sha256
from opensig.utils import bytes_to_hex, chain_id_bytes, concat_bytes, strip_0x


class HashChain:
    """
    Lazily materialised sequence of signature hashes plus a pointer.

    The pointer marks the last hash consumed (signed) or confirmed as
    published; ``-1`` means none.  Materialised hashes are cached and never
    recomputed or discarded, so moving the pointer back with ``reset`` is
    free and ``extend`` only hashes what has not been seen before.

    Thread safety: this class is not thread-safe.  A Document owns exactly
    one chain and never shares it.

    Parameters
    ----------
    document_hash:
        32-byte hash of the document.
    chain_id:
        Identifier of the blockchain the signatures are published to.
    """

    def __init__(self, document_hash: bytes, chain_id: int | str) -> None:
        self.document_hash = bytes(document_hash)
        self.chain_id = chain_id
        self.chain_specific_hash: bytes | None = None
        self._hashes: list[bytes] = []
        self._hash_ptr: int = -1

    def extend(self, n: int = 1) -> list[bytes]:
        """
        Advance the pointer by ``n`` and return the ``n`` hashes it moved over,
        materialising any that have not yet been generated.
        """
        if n < 0:
            raise ValueError("n must be a non-negative integer")
        if self.chain_specific_hash is None:
            self.chain_specific_hash = sha256(
                concat_bytes(chain_id_bytes(self.chain_id), self.document_hash)
            )
        if not self._hashes:
            self._hashes.append(sha256(self.chain_specific_hash))
        while len(self._hashes) <= self._hash_ptr + n:
            self._hashes.append(sha256(concat_bytes(self.chain_specific_hash, self._hashes[-1])))
        start = self._hash_ptr + 1
        self._hash_ptr += n
        return self._hashes[start : self._hash_ptr + 1]

    def current(self) -> bytes | None:
        """Return the hash at the pointer, or None before anything is consumed."""
        return self._hashes[self._hash_ptr] if self._hash_ptr >= 0 else None

    def current_index(self) -> int:
        return self._hash_ptr

    def element_at(self, index: int) -> bytes | None:
        """Return the materialised hash at ``index`` without generating new ones."""
        return self._hashes[index] if 0 <= index < len(self._hashes) else None

    def index_of(self, signature: str) -> int:
        """Return the position of a ``0x``-hex signature in the chain, or -1."""
        target = "0x" + strip_0x(signature).lower()
        for index, value in enumerate(self._hashes):
            if bytes_to_hex(value) == target:
                return index
        return -1

    def reset(self, n: int = 0) -> None:
        """Move the pointer to ``n``.  Materialised hashes are kept."""
        self._hash_ptr = n

    def size(self) -> int:
        """Return the number of hashes up to and including the pointer."""
        return self._hash_ptr + 1

    def materialised(self) -> int:
        """Return how many hashes have been generated so far."""
        return len(self._hashes)
