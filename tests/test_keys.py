import itertools

import pytest
from sdes.bits import bits_from_string, bits_to_string
from sdes.errors import LengthMismatch
from sdes.keys import RoundKeys, generate_keys


def test_key_schedule_length():
    # Given a valid 10-bit key, generate_keys should return two 8-bit subkeys.
    K1, K2 = generate_keys(bits_from_string("1010000010"))
    assert len(K1) == 8
    assert len(K2) == 8


def test_key_schedule_known_vector():
    keys = generate_keys(bits_from_string("1010000010"))
    assert isinstance(keys, RoundKeys)
    assert bits_to_string(keys.k1) == "10100100"
    assert bits_to_string(keys.k2) == "01000011"


def test_key_schedule_zero_key():
    k1, k2 = generate_keys([0] * 10)
    assert k1 == (0,) * 8
    assert k2 == (0,) * 8


def test_key_schedule_is_deterministic():
    key = bits_from_string("0111010010")
    assert generate_keys(key) == generate_keys(key)
    # lists and tuples give the same keys
    assert generate_keys(list(key)) == generate_keys(key)


def test_every_key_bit_reaches_a_subkey():
    # Flipping any single master-key bit changes K1 or K2.
    for key in itertools.product([0, 1], repeat=10):
        base = generate_keys(key)
        for i in range(10):
            flipped = list(key)
            flipped[i] ^= 1
            assert generate_keys(flipped) != base


def test_key_schedule_wrong_length():
    with pytest.raises(LengthMismatch):
        generate_keys([1, 0, 1])
    with pytest.raises(LengthMismatch):
        generate_keys([0] * 11)
