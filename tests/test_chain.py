# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation
"""
Tests for HashChain — derivation of the signature hash sequence and the
behaviour of its pointer.
"""

from __future__ import annotations

import hashlib

import pytest

from opensig.chain import HashChain
from opensig.utils import bytes_to_hex

DUMMY_HASH = bytes([1]) * 32


def _sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


# ---------------------------------------------------------------------------
# TestHashDerivation
# ---------------------------------------------------------------------------


class TestHashDerivation:
    def test_chain_specific_hash_is_not_computed_until_first_extend(self) -> None:
        chain = HashChain(DUMMY_HASH, 1)
        assert chain.chain_specific_hash is None
        chain.extend(1)
        assert chain.chain_specific_hash is not None

    def test_chain_specific_hash_is_hash_of_ascii_chain_id_and_document_hash(self) -> None:
        chain = HashChain(DUMMY_HASH, 1)
        chain.extend(1)
        assert chain.chain_specific_hash == _sha256(b"1" + DUMMY_HASH)

    def test_chain_specific_hash_encodes_every_digit_of_a_high_chain_id(self) -> None:
        chain = HashChain(DUMMY_HASH, 987654321)
        chain.extend(1)
        assert chain.chain_specific_hash == _sha256(b"987654321" + DUMMY_HASH)

    def test_numeric_string_chain_id_matches_integer_chain_id(self) -> None:
        from_int = HashChain(DUMMY_HASH, 137)
        from_str = HashChain(DUMMY_HASH, "137")
        assert from_int.extend(3) == from_str.extend(3)

    def test_first_signature_is_hash_of_chain_specific_hash(self) -> None:
        chain = HashChain(DUMMY_HASH, 4)
        chain.extend(1)
        chain_specific_hash = _sha256(b"4" + DUMMY_HASH)
        assert chain.element_at(0) == _sha256(chain_specific_hash)

    def test_second_signature_is_hash_of_chain_specific_hash_and_first(self) -> None:
        chain = HashChain(DUMMY_HASH, 4)
        chain.extend(2)
        chain_specific_hash = _sha256(b"4" + DUMMY_HASH)
        first = _sha256(chain_specific_hash)
        assert chain.element_at(0) == first
        assert chain.element_at(1) == _sha256(chain_specific_hash + first)

    def test_nth_signature_follows_the_recurrence(self) -> None:
        chain = HashChain(DUMMY_HASH, 4)
        chain.extend(100)
        chain_specific_hash = _sha256(b"4" + DUMMY_HASH)
        previous = _sha256(chain_specific_hash)
        assert chain.element_at(0) == previous
        for i in range(1, 100):
            expected = _sha256(chain_specific_hash + previous)
            assert chain.element_at(i) == expected
            previous = expected

    def test_consecutive_single_extends_match_the_recurrence(self) -> None:
        chain = HashChain(DUMMY_HASH, 4)
        chain_specific_hash = _sha256(b"4" + DUMMY_HASH)
        expected = _sha256(chain_specific_hash)
        for _ in range(100):
            step = chain.extend()
            assert step == [expected]
            expected = _sha256(chain_specific_hash + expected)
        assert chain.size() == 100

    def test_generates_hashes_deterministically(self) -> None:
        first = HashChain(DUMMY_HASH, 1).extend(25)
        second = HashChain(DUMMY_HASH, 1).extend(25)
        assert first == second

    def test_different_chains_produce_different_sequences(self) -> None:
        mainnet = HashChain(DUMMY_HASH, 1).extend(5)
        polygon = HashChain(DUMMY_HASH, 137).extend(5)
        assert set(mainnet).isdisjoint(polygon)

    def test_first_hundred_hashes_are_unique(self) -> None:
        hashes = HashChain(DUMMY_HASH, 1).extend(100)
        assert len({bytes_to_hex(h) for h in hashes}) == 100

    def test_every_hash_is_32_bytes(self) -> None:
        assert all(len(h) == 32 for h in HashChain(DUMMY_HASH, 1).extend(20))


# ---------------------------------------------------------------------------
# TestPointer
# ---------------------------------------------------------------------------


class TestPointer:
    def test_new_chain_has_no_current_hash(self) -> None:
        chain = HashChain(DUMMY_HASH, 1)
        assert chain.current_index() == -1
        assert chain.current() is None
        assert chain.size() == 0

    def test_extend_returns_requested_number_of_hashes(self) -> None:
        assert len(HashChain(DUMMY_HASH, 1).extend(5)) == 5

    def test_extend_without_argument_returns_one_hash(self) -> None:
        chain = HashChain(DUMMY_HASH, 1)
        hashes = chain.extend()
        assert len(hashes) == 1
        assert hashes[0] == chain.element_at(0)

    def test_extend_moves_pointer_to_last_returned_hash(self) -> None:
        chain = HashChain(DUMMY_HASH, 1)
        chain.extend(4)
        assert chain.current_index() == 3
        assert chain.current() == chain.element_at(3)

    def test_extend_returns_the_slice_after_the_pointer(self) -> None:
        chain = HashChain(DUMMY_HASH, 1)
        chain.extend(3)
        hashes = chain.extend(2)
        assert hashes == [chain.element_at(3), chain.element_at(4)]

    def test_extend_zero_returns_nothing_and_keeps_pointer(self) -> None:
        chain = HashChain(DUMMY_HASH, 1)
        chain.extend(2)
        assert chain.extend(0) == []
        assert chain.current_index() == 1

    def test_extend_rejects_negative_count(self) -> None:
        with pytest.raises(ValueError):
            HashChain(DUMMY_HASH, 1).extend(-1)

    def test_reset_repositions_the_pointer(self) -> None:
        chain = HashChain(DUMMY_HASH, 1)
        chain.extend(4)
        chain.reset(1)
        assert chain.current_index() == 1
        assert chain.current() == chain.element_at(1)

    def test_reset_defaults_to_index_zero(self) -> None:
        chain = HashChain(DUMMY_HASH, 1)
        chain.extend(4)
        chain.reset()
        assert chain.current_index() == 0

    def test_reset_does_not_discard_generated_hashes(self) -> None:
        chain = HashChain(DUMMY_HASH, 1)
        generated = chain.extend(10)
        chain.reset(-1)
        assert [chain.element_at(i) for i in range(10)] == generated
        assert chain.materialised() == 10

    def test_extend_after_reset_returns_the_same_hashes_again(self) -> None:
        chain = HashChain(DUMMY_HASH, 1)
        chain.extend(3)
        chain.reset(1)
        hashes = chain.extend(2)
        assert hashes == [chain.element_at(2), chain.element_at(3)]
        assert chain.current_index() == 3

    def test_size_counts_hashes_up_to_the_pointer(self) -> None:
        chain = HashChain(DUMMY_HASH, 1)
        chain.extend(5)
        assert chain.size() == 5
        chain.reset(2)
        assert chain.size() == 3

    def test_element_at_does_not_generate_hashes(self) -> None:
        chain = HashChain(DUMMY_HASH, 1)
        chain.extend(2)
        assert chain.element_at(2) is None
        assert chain.element_at(-1) is None
        assert chain.materialised() == 2


# ---------------------------------------------------------------------------
# TestIndexOf
# ---------------------------------------------------------------------------


class TestIndexOf:
    def test_index_of_returns_position_of_hex_hash(self) -> None:
        chain = HashChain(DUMMY_HASH, 1)
        hashes = chain.extend(5)
        assert chain.index_of(bytes_to_hex(hashes[2])) == 2

    def test_index_of_ignores_case_and_prefix(self) -> None:
        chain = HashChain(DUMMY_HASH, 1)
        hashes = chain.extend(5)
        assert chain.index_of(hashes[4].hex().upper()) == 4

    def test_index_of_returns_minus_one_for_unknown_hash(self) -> None:
        chain = HashChain(DUMMY_HASH, 1)
        chain.extend(5)
        assert chain.index_of("0x" + "00" * 32) == -1

    def test_index_of_only_searches_generated_hashes(self) -> None:
        longer = HashChain(DUMMY_HASH, 1).extend(10)
        chain = HashChain(DUMMY_HASH, 1)
        chain.extend(5)
        assert chain.index_of(bytes_to_hex(longer[7])) == -1
