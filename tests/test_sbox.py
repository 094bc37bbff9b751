import itertools

import pytest
from sdes.errors import LengthMismatch, MalformedBitInput
from sdes.sbox import sbox_lookup
from sdes.tables import S0, S1


def test_sbox_output_is_two_bits():
    for sbox in (S0, S1):
        for bits in itertools.product([0, 1], repeat=4):
            out = sbox_lookup(bits, sbox)
            assert len(out) == 2
            assert set(out) <= {0, 1}
            assert 0 <= out[0] * 2 + out[1] <= 3


def test_sbox_known_lookups():
    # row 2, col 0 of S0 is 0
    assert sbox_lookup((1, 0, 0, 0), S0) == (0, 0)
    # row 0, col 3 of S0 is 2
    assert sbox_lookup((0, 1, 1, 0), S0) == (1, 0)
    # row 2, col 2 of S1 is 1
    assert sbox_lookup((1, 1, 0, 0), S1) == (0, 1)
    # row 3, col 1 of S1 is 1
    assert sbox_lookup((1, 0, 1, 1), S1) == (0, 1)


def test_sbox_row_uses_outer_bits():
    # bits 0 and 3 pick the row: 0001 -> row 1, col 0 -> S0[1][0] = 3.
    # Adjacent-bit indexing would read S0[0][1] = 0 instead.
    assert sbox_lookup((0, 0, 0, 1), S0) == (1, 1)


def test_sbox_wrong_length():
    with pytest.raises(LengthMismatch):
        sbox_lookup((1, 0, 1), S0)
    with pytest.raises(LengthMismatch):
        sbox_lookup((1, 0, 1, 0, 1), S1)


def test_sbox_rejects_non_bits():
    # -1 would silently read S0[-1][0]; 2 would point past the last row
    with pytest.raises(MalformedBitInput):
        sbox_lookup((0, 0, 0, -1), S0)
    with pytest.raises(MalformedBitInput):
        sbox_lookup((2, 0, 0, 0), S1)
    with pytest.raises(ValueError):
        sbox_lookup((0, 3, 0, 0), S0)


def test_sbox_entry_out_of_range():
    bad = ((4, 0, 0, 0),) * 4
    with pytest.raises(ValueError):
        sbox_lookup((0, 0, 0, 0), bad)
