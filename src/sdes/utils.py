from typing import Sequence

import numpy as np


def to_jsonable(obj):
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, (np.float32, np.float64)):
        return float(obj)
    if isinstance(obj, (np.int32, np.int64)):
        return int(obj)
    if isinstance(obj, dict):
        return {k: to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(x) for x in obj]
    return obj


def hamming_distance(a: Sequence, b: Sequence) -> int:
    """
    Compute the Hamming distance between two bit vectors of equal length.
    Args:
        a: First bit string or vector (e.g., '0101' or (0, 1, 0, 1))
        b: Second bit string or vector of the same length
    Returns:
        Number of positions at which the corresponding bits are different.
    """
    if len(a) != len(b):
        raise ValueError("Bit strings must be of equal length.")
    return sum(x != y for x, y in zip(a, b))


def random_bitstring(length: int) -> str:
    """
    Return a random bitstring of given length (characters '0' or '1').
    """
    return "".join(np.random.choice(['0', '1'], size=length))


def random_10bit_string() -> str:
    """Return a random 10-bit string."""
    return random_bitstring(10)
