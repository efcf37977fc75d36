import pytest
from typing import Any

from business_logic.edm.checksum import (
    checksum_values,
    compute_checksum,
    parse_checksum,
    split_checksum,
    verify_checksum,
)
from business_logic.edm.errors import InvalidChecksumDigits, MissingChecksumDelimiter
from edm_samples import ALARMS, CONFIG, FUEL, LAST, REGISTRATION, make_line


def test_compute_checksum(subtests: Any) -> None:
    with subtests.test("Leading '$' excluded"):
        assert compute_checksum("$U,N354DT") == 0x15
        assert compute_checksum("#U,N354DT") == 0x15

    with subtests.test("Known EDM lines"):
        assert compute_checksum("$C, 700,63741, 6193, 1552, 292") == 0x58
        assert compute_checksum("$A,305,230,500,415,60,1650,230,90") == 0x7F
        assert compute_checksum("$L, 49") == 0x4D

    with subtests.test("Only '$'"):
        assert compute_checksum("$") == 0


def test_verify_checksum(subtests: Any) -> None:
    for line in (REGISTRATION, ALARMS, FUEL, CONFIG, LAST):
        with subtests.test(line):
            assert verify_checksum(line)

    with subtests.test("Lowercase hex digits"):
        assert verify_checksum("$L, 49*4d")

    with subtests.test("Trailing whitespace after digits"):
        assert verify_checksum("$L, 49*4D \r")


def test_single_byte_mutation_invalidates(subtests: Any) -> None:
    for line in (REGISTRATION, ALARMS, FUEL):
        payload, digits = split_checksum(line)
        for i in range(1, len(payload)):
            mutated = payload[:i] + chr(ord(payload[i]) ^ 0x01) + payload[i + 1:]
            with subtests.test(f"{line} byte {i}"):
                assert not verify_checksum(f"{mutated}*{digits}")


def test_corrupted_checksum_digit() -> None:
    bad = REGISTRATION[:-1] + ("0" if REGISTRATION[-1] != "0" else "1")
    assert not verify_checksum(bad)


def test_checksum_errors(subtests: Any) -> None:
    with subtests.test("No delimiter"):
        with pytest.raises(MissingChecksumDelimiter):
            verify_checksum("$U,N354DT")

    for digits in ("", "G1", "1", "123", "-1", "0x"):
        with subtests.test(f"Bad digits {digits!r}"):
            with pytest.raises(InvalidChecksumDigits):
                parse_checksum(digits)

    with subtests.test("Split on first '*' only"):
        assert split_checksum("$U,A*B*15") == ("$U,A", "B*15")
        with pytest.raises(InvalidChecksumDigits):
            verify_checksum("$U,A*B*15")


def test_checksum_values() -> None:
    line = make_line("T, 5,13, 5,23, 2, 2222")
    declared, computed = checksum_values(line)
    assert declared == computed == int(line[-2:], 16)
