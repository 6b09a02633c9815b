"""
imt_hash.py — IMT Digest Engine
=================================
Reduces a byte sequence to a fixed 16-character hex digest.

Algorithm (position-major):
    for each position i in 0..7:
        for each input byte b:
            state[i] = ((state[i-1] + b) * COEFFICIENTS[i]) % 255
    where state[-1] is taken as 0.

Position i is computed in its own full pass over the input and reads
the settled value of position i-1. Each pass overwrites its slot, so
only the last input byte reaches the digest.

This is a fingerprint, not a cryptographic hash.
"""

import logging
from typing import List, Sequence, Tuple, Union

from imt_hasher.core.hex_encoding import to_hex_string

logger = logging.getLogger(__name__)

COEFFICIENTS: Tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 19)
MODULUS = 255
DIGEST_LENGTH = 2 * len(COEFFICIENTS)

ByteSequence = Union[bytes, bytearray, memoryview, Sequence[int]]


class InvalidByteValue(ValueError):
    """Raised when an input element is not an integer in [0, 255]."""


def _validate(data: ByteSequence) -> None:
    if isinstance(data, (bytes, bytearray)):
        return
    if isinstance(data, memoryview) and data.format == "B":
        return
    for index, value in enumerate(data):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidByteValue(
                f"Byte at index {index} is not an integer: {value!r}"
            )
        if not 0 <= value <= 255:
            raise InvalidByteValue(
                f"Byte at index {index} out of range [0, 255]: {value}"
            )


def hash_state(data: ByteSequence) -> List[int]:
    """
    Run the IMT hash and return the raw accumulators.

    Accumulators start at 0, so an empty input leaves all of them at 0.

    Args:
        data: Bytes, or any sequence of ints in [0, 255].

    Returns:
        List of ``len(COEFFICIENTS)`` ints, each in [0, 254].

    Raises:
        InvalidByteValue: If a non-bytes input holds a value outside [0, 255].
    """
    _validate(data)

    state = [0] * len(COEFFICIENTS)
    for i, coefficient in enumerate(COEFFICIENTS):
        for byte in data:
            prev = state[i - 1] if i > 0 else 0
            state[i] = ((prev + byte) * coefficient) % MODULUS
    return state


def imt_hash(data: ByteSequence) -> str:
    """
    Compute the IMT digest of the given data.

    Args:
        data: Bytes, or any sequence of ints in [0, 255].

    Returns:
        Lowercase hexadecimal digest (16 characters).

    Raises:
        InvalidByteValue: If a non-bytes input holds a value outside [0, 255].
    """
    digest = to_hex_string(hash_state(data))
    logger.debug("IMT: %s (%d bytes)", digest, len(data))
    return digest


digest = imt_hash
