"""
test_imt_hash.py — Unit Tests for the IMT Digest Engine
=========================================================
"""

import re
from array import array

import pytest
from imt_hasher.core.imt_hash import (
    COEFFICIENTS,
    DIGEST_LENGTH,
    InvalidByteValue,
    digest,
    hash_state,
    imt_hash,
)

HEX_DIGEST = re.compile(r"^[0-9a-f]{16}$")


class TestCoefficients:
    """Tests for the fixed coefficient table."""

    def test_table_values(self):
        """Coefficients are the first eight primes."""
        assert COEFFICIENTS == (2, 3, 5, 7, 11, 13, 17, 19)

    def test_table_is_immutable(self):
        """The table is a tuple and cannot be assigned to."""
        with pytest.raises(TypeError):
            COEFFICIENTS[0] = 4

    def test_digest_length(self):
        """Digest length is two hex characters per coefficient."""
        assert DIGEST_LENGTH == 16


class TestHashState:
    """Tests for the raw accumulators."""

    def test_single_byte_chain(self):
        """Each position folds the byte into the settled previous position."""
        assert hash_state([65]) == [130, 75, 190, 0, 205, 195, 85, 45]

    def test_empty_input_is_zero_filled(self):
        """No bytes leaves every accumulator at zero."""
        assert hash_state(b"") == [0] * 8

    def test_accumulators_in_range(self):
        """Accumulators stay within [0, 254]."""
        state = hash_state(bytes(range(256)) * 4)
        assert len(state) == len(COEFFICIENTS)
        assert all(0 <= value <= 254 for value in state)

    def test_last_byte_settles_each_pass(self):
        """Each pass overwrites its slot, so only the final byte survives."""
        assert hash_state(b"xyzB") == hash_state(b"B")

    def test_fresh_state_per_call(self):
        """A previous call does not leak into the next one."""
        first = hash_state(b"\x01")
        hash_state(b"\xfe\xfd")
        assert hash_state(b"\x01") == first


class TestImtHash:
    """Tests for the hex digest."""

    def test_golden_single_byte(self):
        """ASCII 'A' produces the pinned digest."""
        assert imt_hash(b"A") == "824bbe00cdc3552d"

    def test_golden_one(self):
        """Byte 0x01 produces the pinned digest."""
        assert imt_hash([1]) == "0209326671cfdd8a"

    def test_empty_input(self):
        """Empty input yields sixteen zeros."""
        assert imt_hash(b"") == "0000000000000000"
        assert imt_hash([]) == "0000000000000000"

    @pytest.mark.parametrize(
        "data",
        [b"", b"\x00", b"Hello, World!", bytes(range(256)), b"X" * 100_000],
    )
    def test_fixed_length_lowercase_hex(self, data):
        """Digest is always 16 lowercase hex characters."""
        result = imt_hash(data)
        assert len(result) == DIGEST_LENGTH
        assert HEX_DIGEST.match(result)

    def test_deterministic(self):
        """Same input always yields the same digest."""
        data = b"%PDF-1.4 sample document body"
        assert imt_hash(data) == imt_hash(data)

    def test_bytes_and_int_list_agree(self):
        """bytes, bytearray, memoryview and int lists hash identically."""
        data = b"payload"
        expected = imt_hash(data)
        assert imt_hash(bytearray(data)) == expected
        assert imt_hash(memoryview(data)) == expected
        assert imt_hash(list(data)) == expected

    def test_digest_alias(self):
        """digest is the same operation as imt_hash."""
        assert digest(b"A") == imt_hash(b"A")


class TestValidation:
    """Tests for input validation."""

    def test_value_above_range_raises(self):
        """Values above 255 are rejected."""
        with pytest.raises(InvalidByteValue, match="out of range"):
            imt_hash([1, 256])

    def test_negative_value_raises(self):
        """Negative values are rejected."""
        with pytest.raises(InvalidByteValue, match="out of range"):
            imt_hash([-1])

    def test_non_integer_raises(self):
        """Non-integers are rejected."""
        with pytest.raises(InvalidByteValue, match="not an integer"):
            imt_hash([1, "a"])

    def test_bool_raises(self):
        """Booleans are not treated as bytes."""
        with pytest.raises(InvalidByteValue):
            imt_hash([True])

    def test_is_value_error(self):
        """InvalidByteValue is a ValueError."""
        assert issubclass(InvalidByteValue, ValueError)

    def test_wide_memoryview_out_of_range_raises(self):
        """A memoryview over wider items is checked element by element."""
        with pytest.raises(InvalidByteValue, match="out of range"):
            imt_hash(memoryview(array("i", [1000])))

    def test_wide_memoryview_in_range_hashes(self):
        """A memoryview over wider items with byte-sized values is accepted."""
        assert imt_hash(memoryview(array("i", [65]))) == imt_hash(b"A")
