from dataclasses import dataclass, fields
from typing import Tuple

from sdes.errors import InvalidTableIndex, LengthMismatch

# Permutation tables (1-based indexing)
P10    = (3, 5, 2, 7, 4, 10, 1, 9, 8, 6)
P8     = (6, 3, 7, 4, 8, 5, 10, 9)
IP     = (2, 6, 3, 1, 4, 8, 5, 7)
IP_INV = (4, 1, 3, 5, 7, 2, 8, 6)
EP     = (4, 1, 2, 3, 2, 3, 4, 1)
P4     = (2, 4, 3, 1)

S0 = (
    (1, 0, 3, 2),
    (3, 2, 1, 0),
    (0, 2, 1, 3),
    (3, 1, 3, 2),
)

S1 = (
    (0, 1, 2, 3),
    (2, 0, 1, 3),
    (3, 0, 1, 0),
    (2, 1, 0, 3),
)

Table = Tuple[int, ...]
SBox = Tuple[Tuple[int, ...], ...]

# name -> (output length, input length the indices address)
TABLE_SHAPES = {
    "p10": (10, 10),
    "p8": (8, 10),
    "ip": (8, 8),
    "ep": (8, 4),
    "p4": (4, 4),
    "ip_inv": (8, 8),
}


@dataclass(frozen=True)
class CipherTables:
    """
    Every constant the key schedule and the round function read.

    Instances are immutable; build a new one (dataclasses.replace) to use
    tables loaded from a file.
    """
    p10: Table = P10
    p8: Table = P8
    ip: Table = IP
    ep: Table = EP
    p4: Table = P4
    ip_inv: Table = IP_INV
    s0: SBox = S0
    s1: SBox = S1

    def __post_init__(self):
        # Freeze whatever sequences we were handed.
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in TABLE_SHAPES:
                frozen = tuple(int(v) for v in value)
            else:
                frozen = tuple(tuple(int(v) for v in row) for row in value)
            object.__setattr__(self, f.name, frozen)

    def validate(self) -> "CipherTables":
        """
        Check every table against the shape its stage needs.
        Raises LengthMismatch or InvalidTableIndex; returns self otherwise.
        """
        for name, (out_len, in_len) in TABLE_SHAPES.items():
            table = getattr(self, name)
            if len(table) != out_len:
                raise LengthMismatch(
                    f"{name.upper()} must have {out_len} entries, got {len(table)}"
                )
            for position in table:
                if not 1 <= position <= in_len:
                    raise InvalidTableIndex(
                        f"{name.upper()} entry {position} is outside 1..{in_len}"
                    )
        for name in ("s0", "s1"):
            sbox = getattr(self, name)
            if len(sbox) != 4 or any(len(row) != 4 for row in sbox):
                raise LengthMismatch(f"{name.upper()} must be a 4x4 table")
            if any(not 0 <= v <= 3 for row in sbox for v in row):
                raise ValueError(f"{name.upper()} entries must be in 0..3")
        return self


DEFAULT_TABLES = CipherTables().validate()
