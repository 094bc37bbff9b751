import logging
from pathlib import Path

import pytest
from sdes.errors import InputFormatError, InvalidTableIndex, TableFormatError
from sdes.loaders import load_tables, read_input, read_permutations, tables_from_mapping
from sdes.tables import DEFAULT_TABLES

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def test_read_permutations(tmp_path):
    path = tmp_path / "permutations.txt"
    path.write_text("# tables\nP10: 3 5 2 7 4 10 1 9 8 6\n\nP4:2 4 3 1\n")
    tables = read_permutations(path)
    assert tables == {"P10": (3, 5, 2, 7, 4, 10, 1, 9, 8, 6), "P4": (2, 4, 3, 1)}


def test_read_permutations_bad_lines(tmp_path):
    path = tmp_path / "permutations.txt"
    path.write_text("P10 3 5 2\n")
    with pytest.raises(TableFormatError):
        read_permutations(path)

    path.write_text("P8: 6 3 seven\n")
    with pytest.raises(TableFormatError, match=":1:"):
        read_permutations(path)


def test_read_input(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("Key: 1010000010\nComment: ignored\nPlaintext: 10100101\n")
    assert read_input(path) == ("1010000010", "10100101")


def test_read_input_missing_field(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("Key: 1010000010\n")
    with pytest.raises(InputFormatError):
        read_input(path)


def test_read_input_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_input(tmp_path / "nope.txt")


def test_tables_from_mapping_aliases():
    ip_inv = (4, 1, 3, 5, 7, 2, 8, 6)
    for name in ("IP-1", "IP_INV", "ip^-1", " IPINV "):
        tables = tables_from_mapping({name: ip_inv})
        assert tables.ip_inv == ip_inv
    # missing names fall back to the defaults
    assert tables_from_mapping({}) == DEFAULT_TABLES


def test_tables_from_mapping_unknown_name(caplog):
    with caplog.at_level(logging.WARNING, logger="sdes.loaders"):
        tables = tables_from_mapping({"P12": (1, 2)})
    assert tables == DEFAULT_TABLES
    assert "P12" in caplog.text


def test_tables_from_mapping_validates():
    with pytest.raises(InvalidTableIndex):
        tables_from_mapping({"IP": (2, 6, 3, 1, 4, 8, 5, 9)})


def test_bundled_permutations_match_defaults():
    assert load_tables(DATA_DIR / "permutations.txt") == DEFAULT_TABLES


def test_bundled_input():
    assert read_input(DATA_DIR / "input.txt") == ("1010000010", "10100101")
