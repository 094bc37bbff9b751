from sdes.bits import left_shift, permute, xor
from sdes.cipher import encrypt, encrypt_round, encrypt_trace, sdes_encrypt
from sdes.keys import RoundKeys, generate_keys
from sdes.sbox import sbox_lookup
from sdes.tables import DEFAULT_TABLES, CipherTables

__version__ = "0.1.0"
