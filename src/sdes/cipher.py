import logging
from typing import NamedTuple, Sequence

from sdes.bits import Bits, bits_from_string, bits_to_string, permute, xor
from sdes.errors import LengthMismatch
from sdes.keys import generate_keys
from sdes.sbox import sbox_lookup
from sdes.tables import DEFAULT_TABLES, CipherTables

logger = logging.getLogger(__name__)


class EncryptionTrace(NamedTuple):
    k1: Bits
    k2: Bits
    round1: Bits
    ciphertext: Bits


def encrypt_round(block: Sequence[int], round_key: Sequence[int],
                  tables: CipherTables = DEFAULT_TABLES) -> Bits:
    """
    One full round: IP, the Feistel function on the right half, IP^-1.
    block: 8-bit vector
    round_key: 8-bit subkey
    Returns the 8-bit output. The halves are not swapped.
    """
    if len(block) != 8:
        raise LengthMismatch(f"block must be 8 bits, got {len(block)}")
    if len(round_key) != 8:
        raise LengthMismatch(f"round key must be 8 bits, got {len(round_key)}")

    # Initial Permutation (IP)
    ip_bits = permute(block, tables.ip)
    left, right = ip_bits[:4], ip_bits[4:]

    # Expand and permute right half, then mix in the key
    expanded = permute(right, tables.ep)  # 8 bits
    xored = xor(expanded, round_key)

    # Apply S-boxes
    s0_out = sbox_lookup(xored[:4], tables.s0)
    s1_out = sbox_lookup(xored[4:], tables.s1)
    p4_out = permute(s0_out + s1_out, tables.p4)

    new_left = xor(p4_out, left)
    output = permute(new_left + right, tables.ip_inv)
    logger.debug("round %s -> %s", bits_to_string(block), bits_to_string(output))
    return output


def encrypt_trace(plaintext: Sequence[int], master_key: Sequence[int],
                  tables: CipherTables = DEFAULT_TABLES) -> EncryptionTrace:
    """
    Encrypt and keep the subkeys and the output of the first round.
    """
    k1, k2 = generate_keys(master_key, tables)
    round1 = encrypt_round(plaintext, k1, tables)
    ciphertext = encrypt_round(round1, k2, tables)
    return EncryptionTrace(k1, k2, round1, ciphertext)


def encrypt(plaintext: Sequence[int], master_key: Sequence[int],
            tables: CipherTables = DEFAULT_TABLES) -> Bits:
    """
    Encrypt an 8-bit plaintext with a 10-bit key: a round under K1
    followed by a round under K2.
    """
    return encrypt_trace(plaintext, master_key, tables).ciphertext


def sdes_encrypt(plaintext: str, key: str) -> str:
    """
    Encrypt an 8-bit plaintext string with a 10-bit key string.
    Returns the 8-bit ciphertext string.
    """
    plaintext_bits = bits_from_string(plaintext, 8)
    key_bits = bits_from_string(key, 10)
    return bits_to_string(encrypt(plaintext_bits, key_bits))
