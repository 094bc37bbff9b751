import logging
from typing import NamedTuple, Sequence

from sdes.bits import Bits, bits_to_string, left_shift, permute
from sdes.errors import LengthMismatch
from sdes.tables import DEFAULT_TABLES, CipherTables

logger = logging.getLogger(__name__)


class RoundKeys(NamedTuple):
    k1: Bits
    k2: Bits


def generate_keys(master_key: Sequence[int], tables: CipherTables = DEFAULT_TABLES) -> RoundKeys:
    """
    Given a 10-bit key, generate the two 8-bit subkeys (K1, K2).
    """
    if len(master_key) != 10:
        raise LengthMismatch(f"master key must be 10 bits, got {len(master_key)}")

    # Apply P10 permutation
    permuted = permute(master_key, tables.p10)
    left, right = permuted[:5], permuted[5:]

    # Left shift each half by 1
    left1 = left_shift(left, 1)
    right1 = left_shift(right, 1)
    # First subkey K1 via P8
    k1 = permute(left1 + right1, tables.p8)

    # Left shift the already shifted halves by 2
    left2 = left_shift(left1, 2)
    right2 = left_shift(right1, 2)
    # Second subkey K2 via P8
    k2 = permute(left2 + right2, tables.p8)

    logger.debug("key %s -> K1 %s, K2 %s",
                 bits_to_string(master_key), bits_to_string(k1), bits_to_string(k2))
    return RoundKeys(k1, k2)
