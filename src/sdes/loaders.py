"""
Reading cipher inputs from text files.

Two formats are supported, both "label: value" per line:

    permutations.txt        input.txt
    P10: 3 5 2 7 4 10 ...   Key: 1010000010
    P8: 6 3 7 4 8 5 10 9    Plaintext: 10100101
"""

import logging
from dataclasses import replace
from typing import Dict, Mapping, Sequence, Tuple

from sdes.errors import InputFormatError, TableFormatError
from sdes.tables import DEFAULT_TABLES, CipherTables

logger = logging.getLogger(__name__)

# table name as written in the file (upper-cased) -> CipherTables field
TABLE_NAMES = {
    "P10": "p10",
    "P8": "p8",
    "IP": "ip",
    "EP": "ep",
    "P4": "p4",
    "IP_INV": "ip_inv",
    "IP-1": "ip_inv",
    "IP^-1": "ip_inv",
    "IPINV": "ip_inv",
    "IP_INVERSE": "ip_inv",
}


def read_permutations(path) -> Dict[str, Tuple[int, ...]]:
    """
    Read named permutation tables from a file.

    Args:
        path: file with one "NAME: v1 v2 ..." line per table. Blank lines
              and lines starting with '#' are skipped.

    Returns:
        Mapping from table name to its 1-based indices.
    """
    permutations = {}
    with open(path, "r") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            name, sep, values = line.partition(":")
            if not sep or not name.strip():
                raise TableFormatError(f"{path}:{lineno}: expected 'NAME: values'")
            try:
                permutations[name.strip()] = tuple(int(v) for v in values.split())
            except ValueError as exc:
                raise TableFormatError(f"{path}:{lineno}: {exc}") from exc
    logger.info("Read %d permutation tables from %s", len(permutations), path)
    return permutations


def read_input(path) -> Tuple[str, str]:
    """
    Read the key and plaintext bit strings from a file.
    Returns (key, plaintext) exactly as written, without parsing the bits.
    """
    key = plaintext = None
    with open(path, "r") as f:
        for line in f:
            label, _, value = line.partition(":")
            label = label.strip()
            if label == "Key":
                key = value.strip()
            elif label == "Plaintext":
                plaintext = value.strip()
    if key is None:
        raise InputFormatError(f"{path}: no 'Key:' line")
    if plaintext is None:
        raise InputFormatError(f"{path}: no 'Plaintext:' line")
    return key, plaintext


def tables_from_mapping(mapping: Mapping[str, Sequence[int]],
                        base: CipherTables = DEFAULT_TABLES) -> CipherTables:
    """
    Override the tables in `base` with those named in `mapping` and validate
    the result. Unknown names are ignored with a warning.
    """
    overrides = {}
    for name, table in mapping.items():
        field = TABLE_NAMES.get(name.strip().upper())
        if field is None:
            logger.warning("Ignoring unknown permutation table %r", name)
            continue
        overrides[field] = tuple(table)
    return replace(base, **overrides).validate()


def load_tables(path) -> CipherTables:
    return tables_from_mapping(read_permutations(path))
