from typing import Sequence

from sdes.bits import Bits
from sdes.errors import LengthMismatch, MalformedBitInput


def sbox_lookup(bits: Sequence[int], sbox: Sequence[Sequence[int]]) -> Bits:
    """
    bits: 4-bit vector.
    sbox: 4×4 table.
    Returns the 2-bit output of the S-box lookup, MSB first.

    The row comes from the outer bits (0 and 3) and the column from the
    inner bits (1 and 2).
    """
    if len(bits) != 4:
        raise LengthMismatch(f"S-box input must be 4 bits, got {len(bits)}")
    # Anything but 0/1 would index outside the 4x4 table or wrap around.
    if any(b not in (0, 1) for b in bits):
        raise MalformedBitInput(f"S-box input {tuple(bits)} is not a bit vector")
    row = bits[0] * 2 + bits[3]
    col = bits[1] * 2 + bits[2]
    val = sbox[row][col]
    if not 0 <= val <= 3:
        raise ValueError(f"S-box entry at [{row}][{col}] is {val}, not a 2-bit value")
    return ((val >> 1) & 1, val & 1)
