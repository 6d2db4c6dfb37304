# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation
"""Shared fixtures for opensig SDK tests."""

from __future__ import annotations

import pytest

from helpers import SAMPLE_HASH, MockNetwork
from opensig.crypto import EncryptionKey


@pytest.fixture
def sample_hash() -> bytes:
    """The 32-byte document hash used throughout the suite."""
    return SAMPLE_HASH


@pytest.fixture
def encryption_key(sample_hash: bytes) -> EncryptionKey:
    return EncryptionKey(sample_hash)


@pytest.fixture
def network() -> MockNetwork:
    """A provider double on chain 1 with no published signatures."""
    return MockNetwork()
