import string
from functools import reduce
from typing import Tuple

from config import CHECKSUM_DELIM, CHECKSUM_DIGITS, HEADER_ENCODING
from business_logic.edm.errors import InvalidChecksumDigits, MissingChecksumDelimiter

_HEX_DIGITS = set(string.hexdigits)


def split_checksum(line: str) -> Tuple[str, str]:
    """Split '$<tag><payload>*<hh>' at the first '*'."""
    payload, sep, digits = line.partition(CHECKSUM_DELIM)
    if not sep:
        raise MissingChecksumDelimiter(f"No {CHECKSUM_DELIM!r} in header line {line!r}")
    return payload, digits


def parse_checksum(digits: str) -> int:
    text = digits.strip()
    if len(text) != CHECKSUM_DIGITS or not set(text) <= _HEX_DIGITS:
        raise InvalidChecksumDigits(digits)
    return int(text, 16)


def compute_checksum(payload: str) -> int:
    """XOR of every payload byte after the leading '$'."""
    return reduce(lambda acc, b: acc ^ b, payload.encode(HEADER_ENCODING)[1:], 0)


def checksum_values(line: str) -> Tuple[int, int]:
    """Return (declared, computed) checksums for one header line."""
    payload, digits = split_checksum(line)
    return parse_checksum(digits), compute_checksum(payload)


def verify_checksum(line: str) -> bool:
    declared, computed = checksum_values(line)
    return declared == computed
