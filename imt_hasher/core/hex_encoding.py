"""
hex_encoding.py — Hex Encoder
===============================
Renders byte-valued integers as a lowercase hexadecimal string,
two digits per value, in input order.
"""

from typing import Iterable


def to_hex_string(values: Iterable[int]) -> str:
    """
    Encode integers as concatenated two-digit lowercase hex.

    Each value is masked to its low 8 bits first, so ``-1`` renders
    as ``"ff"`` and ``256`` as ``"00"``.

    Args:
        values: Integers to encode.

    Returns:
        Hex string of length ``2 * len(values)`` (empty for no values).
    """
    return "".join(f"{value & 0xFF:02x}" for value in values)


encode = to_hex_string
