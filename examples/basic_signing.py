# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
basic_signing.py — Demonstrates the Document verify / sign lifecycle.

Shows how to:
- Back a document with the in-memory signature registry
- Verify a document before signing it
- Sign with plain, encrypted and binary annotations
- Read the signatures back from a second Document instance

Run: python examples/basic_signing.py
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

# Allow running directly from the examples directory.
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from opensig import Document, MemoryProvider, sha256


async def main() -> None:
    provider = MemoryProvider()
    document_hash = sha256(b"Memorandum of understanding, revision 4")

    print("=== OpenSig — Basic Signing Example ===\n")

    document = Document(provider, document_hash)
    existing = await document.verify()
    print(f"Existing signatures: {len(existing)}")

    annotations = [
        None,
        {"type": "string", "content": "Approved by legal"},
        {"type": "string", "content": "Internal reference 7731", "encrypted": True},
        {"type": "hex", "content": "0xc0ffee"},
    ]

    print("\nSigning...")
    for annotation in annotations:
        result = await document.sign(annotation)
        receipt = await result.confirmation
        print(
            f"  signature {result.signature[:18]}..."
            f" | data {result.data[:18]}"
            f" | block {receipt['blockNumber']}"
        )

    # A fresh Document sees everything published so far.
    print("\n--- Verified signatures ---")
    reader = Document(provider, document_hash)
    for event in await reader.verify():
        label = event.data.type
        if event.data.encrypted:
            label += " (encrypted)"
        print(f"  {event.signature[:18]}... by {event.signatory}: {label} {event.data.content or ''}")

    next_index = reader.hashes.current_index() + 1
    print(f"\nNext signature will use chain index {next_index}")


if __name__ == "__main__":
    asyncio.run(main())
