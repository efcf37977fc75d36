# header_parser.py
import logging
import os
from typing import Any, Dict, List, Mapping, Optional

from config import DEFAULT_STRICT
from business_logic.edm.boundary import header_region, split_lines
from business_logic.edm.byte_source import Buffer, open_log
from business_logic.edm.checksum import checksum_values
from business_logic.edm.decoders import DECODERS, TagDecoder
from business_logic.edm.errors import ChecksumMismatch, FormatError, TokenCountMismatch
from business_logic.edm.models import (
    HeaderDecodeResult,
    HeaderLine,
    HeaderRecord,
    LineWarning,
)
from business_logic.edm.tokenizer import line_tag, tokenize

logger = logging.getLogger(__name__)


def _check_line(line: HeaderLine) -> str:
    """Return the tag of a line whose checksum is valid, raise otherwise."""
    tag = line_tag(line.text)
    declared, computed = checksum_values(line.text)
    if declared != computed:
        raise ChecksumMismatch(declared, computed)
    return tag


def decode_header(
    data: Buffer,
    strict: bool = DEFAULT_STRICT,
    decoders: Optional[Mapping[str, TagDecoder]] = None,
) -> HeaderDecodeResult:
    """
    Decode the ASCII header at the start of an EDM buffer.

    Lines are handled in order; a later line with the same tag replaces the
    earlier value, and a line whose decode fails resets its field to None.
    In lenient mode line-level problems are collected as warnings; in strict
    mode the first one is raised, except token-count shortfalls on tags whose
    decoder is marked lenient_count ($U), which stay warnings.
    Boundary and encoding errors always raise.
    """
    if decoders is None:
        decoders = DECODERS

    text, header_end = header_region(data)
    fields: Dict[str, Any] = {}
    warnings: List[LineWarning] = []

    for line in split_lines(text):
        decoder = None
        try:
            tag = _check_line(line)
            decoder = decoders.get(tag)
            if decoder is None:
                logger.debug("Line %d: no decoder for tag %r", line.line_no, tag)
                continue
            try:
                fields[decoder.field] = decoder.decode(tokenize(line.text))
            except FormatError:
                fields[decoder.field] = None
                raise
            logger.debug("Line %d: decoded %s", line.line_no, decoder.field)
        except FormatError as e:
            e.at(line.line_no, line.offset, line.tag)
            tolerated = (
                decoder is not None
                and decoder.lenient_count
                and isinstance(e, TokenCountMismatch)
            )
            if strict and not tolerated:
                raise
            logger.warning("%s", e)
            warnings.append(
                LineWarning(
                    line_no=line.line_no,
                    offset=line.offset,
                    tag=line.tag,
                    code=e.code,
                    message=e.message,
                )
            )

    return HeaderDecodeResult(
        record=HeaderRecord(**fields),
        header_end=header_end,
        warnings=tuple(warnings),
    )


# ----------------------------------------------------------------------
# File-backed parser
# ----------------------------------------------------------------------
class EdmHeaderParser:
    def __init__(self, path: str, strict: bool = DEFAULT_STRICT):
        self.path = os.path.abspath(path)
        self.strict = strict

    def decode(self) -> HeaderDecodeResult:
        with open_log(self.path) as data:
            return decode_header(data, strict=self.strict)

    def record(self) -> HeaderRecord:
        return self.decode().record
