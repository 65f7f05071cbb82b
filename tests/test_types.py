"""
Ledger Runtime Type Tests
"""

import pytest
from ledger_runtime.core.types import U32, U64, U128, Hash
from ledger_runtime.core.hashing import merkle_root, sha3_256
from ledger_runtime.constants import BALANCE_BITS, BLOCK_NUMBER_BITS, NONCE_BITS


class TestUnsignedInt:
    """Tests for bounded unsigned integers."""

    def test_zero_and_one(self):
        """Test zero and one constructors."""
        assert U128.zero() == 0
        assert U64.one() == 1
        assert isinstance(U32.zero(), U32)

    def test_max_value(self):
        """Test maximum values per width."""
        assert U32.max_value() == 2**32 - 1
        assert U64.max_value() == 2**64 - 1
        assert U128.max_value() == 2**128 - 1

    def test_widths_follow_constants(self):
        """Test each width matches the associated type it backs."""
        assert U128.BITS == BALANCE_BITS
        assert U64.BITS == BLOCK_NUMBER_BITS
        assert U32.BITS == NONCE_BITS

    def test_out_of_range_rejected(self):
        """Test construction outside the range."""
        with pytest.raises(ValueError):
            U32(-1)
        with pytest.raises(ValueError):
            U32(2**32)

    def test_non_int_rejected(self):
        """Test construction from non-integers."""
        with pytest.raises(TypeError):
            U64(1.5)
        with pytest.raises(TypeError):
            U64(True)

    def test_checked_add(self):
        """Test checked addition."""
        assert U32(5).checked_add(3) == 8
        assert isinstance(U32(5).checked_add(3), U32)
        assert U32.max_value().checked_add(0) == U32.max_value()
        assert U32.max_value().checked_add(1) is None

    def test_checked_sub(self):
        """Test checked subtraction."""
        assert U128(10).checked_sub(3) == 7
        assert U128(3).checked_sub(3) == 0
        assert U128(3).checked_sub(4) is None

    def test_saturating_and_wrapping_add(self):
        """Test saturating and wrapping addition at the boundary."""
        top = U32.max_value()
        assert top.saturating_add(1) == top
        assert top.wrapping_add(1) == 0
        assert top.wrapping_add(2) == 1

    def test_to_bytes_be(self):
        """Test fixed-width big-endian encoding."""
        assert U32(1).to_bytes_be() == b"\x00\x00\x00\x01"
        assert len(U128(1).to_bytes_be()) == 16

    def test_repr(self):
        """Test repr shows the type."""
        assert repr(U64(7)) == "U64(7)"


class TestHash:
    """Tests for Hash type."""

    def test_hash_zero(self):
        """Test zero hash creation."""
        h = Hash.zero()
        assert h.data == bytes(32)
        assert h == Hash.zero()

    def test_hash_wrong_size(self):
        """Test hash size validation."""
        with pytest.raises(ValueError):
            Hash(bytes(31))

    def test_hash_hex(self):
        """Test hex rendering of the raw bytes."""
        h = Hash(bytes([0xAB] * 32))
        assert h.hex() == "ab" * 32

    def test_sha3_256_known_vector(self):
        """Test SHA3-256 of the empty string."""
        assert sha3_256(b"").hex() == (
            "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"
        )


class TestMerkleRoot:
    """Tests for merkle_root."""

    def test_empty(self):
        """Test empty list gives zero hash."""
        assert merkle_root([]) == Hash.zero()

    def test_single(self):
        """Test single leaf is the root."""
        leaf = sha3_256(b"leaf")
        assert merkle_root([leaf]) == leaf

    def test_pair(self):
        """Test two leaves hash together."""
        a, b = sha3_256(b"a"), sha3_256(b"b")
        assert merkle_root([a, b]) == sha3_256(a.data + b.data)

    def test_odd_count_pads_last(self):
        """Test padding by duplicating the last leaf."""
        a, b, c = sha3_256(b"a"), sha3_256(b"b"), sha3_256(b"c")
        assert merkle_root([a, b, c]) == merkle_root([a, b, c, c])
