from typing import Optional, Sequence, Tuple

from sdes.errors import InvalidTableIndex, LengthMismatch, MalformedBitInput

Bits = Tuple[int, ...]


def permute(bits: Sequence[int], table: Sequence[int]) -> Bits:
    """
    Apply a permutation table (1-based indices) to the input bit vector.
    The output has len(table) bits, so a table may also expand or compress.
    """
    n = len(bits)
    output = [0] * len(table)
    for i, position in enumerate(table):
        if not 1 <= position <= n:
            raise InvalidTableIndex(
                f"table entry {position} at index {i} is outside 1..{n}"
            )
        output[i] = bits[position - 1]
    return tuple(output)


def left_shift(bits: Sequence[int], shift: int) -> Bits:
    """
    Perform a circular left shift by `shift` positions.
    """
    if shift < 0:
        raise ValueError("shift must be non-negative")
    n = len(bits)
    if n == 0:
        return ()
    return tuple(bits[(i + shift) % n] for i in range(n))


def xor(a: Sequence[int], b: Sequence[int]) -> Bits:
    """
    Elementwise XOR of two equal-length bit vectors.
    """
    if len(a) != len(b):
        raise LengthMismatch(f"cannot xor {len(a)} bits with {len(b)} bits")
    output = [0] * len(a)
    for i in range(len(a)):
        output[i] = a[i] ^ b[i]
    return tuple(output)


def bits_from_string(text: str, expected_length: Optional[int] = None) -> Bits:
    """
    Convert a string of '0'/'1' characters into a bit vector.

    Args:
        text: e.g. "1010000010"
        expected_length: if given, the exact number of bits required.

    Returns:
        Tuple of ints, one per character.
    """
    bad = sorted(set(text) - {"0", "1"})
    if bad:
        raise MalformedBitInput(f"{text!r} contains non-bit characters {bad}")
    if expected_length is not None and len(text) != expected_length:
        raise MalformedBitInput(
            f"{text!r} has {len(text)} bits, expected {expected_length}"
        )
    return tuple(ord(c) - ord("0") for c in text)


def bits_to_string(bits: Sequence[int]) -> str:
    return "".join(str(b) for b in bits)


def bits_to_int(bits: Sequence[int]) -> int:
    """
    Convert a list of bits (0/1) to an integer, MSB first.
    Example: [1,0,1] → 5.
    """
    value = 0
    for b in bits:
        value = (value << 1) | b
    return value


def int_to_bits(value: int, width: int) -> Bits:
    """Inverse of bits_to_int for a fixed width."""
    return tuple((value >> (width - 1 - i)) & 1 for i in range(width))
