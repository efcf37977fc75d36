import logging
from typing import List, Tuple

from config import HEADER_ENCODING, LINE_END, LINE_START
from business_logic.edm.byte_source import Buffer
from business_logic.edm.errors import InvalidEncoding, NoHeaderTerminator
from business_logic.edm.models import HeaderLine

logger = logging.getLogger(__name__)


def find_header_end(data: Buffer) -> int:
    """
    Return the offset of the first newline whose next byte is not '$'.
    Everything before it is header text, everything from it on is binary.
    """
    size = len(data)
    pos = 0
    while True:
        pos = data.find(LINE_END, pos)
        if pos == -1 or pos + 1 >= size:
            raise NoHeaderTerminator(
                f"No end of header found in {size} byte(s)", offset=size
            )
        if data[pos + 1] != LINE_START:
            logger.debug("Header ends at offset 0x%X", pos)
            return pos
        pos += 1


def header_region(data: Buffer) -> Tuple[str, int]:
    """Slice the header out of the buffer and decode it as text."""
    end = find_header_end(data)
    raw = bytes(data[:end])
    try:
        return raw.decode(HEADER_ENCODING), end
    except UnicodeDecodeError as e:
        raise InvalidEncoding(
            f"Header is not valid {HEADER_ENCODING} text", offset=e.start
        ) from e


def split_lines(text: str) -> List[HeaderLine]:
    lines: List[HeaderLine] = []
    if not text:
        return lines
    offset = 0
    for line_no, raw in enumerate(text.split("\n"), start=1):
        line = raw[:-1] if raw.endswith("\r") else raw
        tag = line[1] if len(line) > 1 else None
        lines.append(HeaderLine(line_no=line_no, offset=offset, text=line, tag=tag))
        offset += len(raw.encode(HEADER_ENCODING)) + 1
    return lines
