from typing import List

from config import FIELD_DELIM
from business_logic.edm.checksum import split_checksum
from business_logic.edm.errors import EmptyTagLine


def line_tag(line: str) -> str:
    """The tag is the character right after '$'."""
    if len(line) < 2:
        raise EmptyTagLine(f"Header line has no tag: {line!r}")
    return line[1]


def tokenize(line: str) -> List[str]:
    """
    Drop the checksum, split the payload on commas and trim each token.
    The first token ('$<tag>') is discarded; empty tokens are kept.
    """
    payload, _ = split_checksum(line)
    return [token.strip() for token in payload.split(FIELD_DELIM)[1:]]
