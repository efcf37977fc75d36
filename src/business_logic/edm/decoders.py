import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from config import TAG_ALARMS, TAG_REGISTRATION, TOKEN_COUNTS, VOLTS_SCALE
from business_logic.edm.errors import TokenCountMismatch, UnparseableNumericToken
from business_logic.edm.models import Alarms

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _parse_int(field: str, token: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise UnparseableNumericToken(field, token)
    return int(token)


def _parse_float(field: str, token: str) -> float:
    if not _FLOAT_RE.fullmatch(token):
        raise UnparseableNumericToken(field, token)
    return float(token)


def _volts(field: str, token: str) -> float:
    return _parse_float(field, token) / VOLTS_SCALE


# $A,<volts hi*10>,<volts lo*10>,<dif>,<cht>,<cld>,<egt>,<oil hi>,<oil lo>*hh
ALARM_FIELDS = (
    ("volts_max", _volts),
    ("volts_min", _volts),
    ("egt_spread_max", _parse_int),
    ("cht_max", _parse_int),
    ("cht_cool_rate_max", _parse_int),
    ("egt_max", _parse_int),
    ("oil_temp_max", _parse_int),
    ("oil_temp_min", _parse_int),
)


def decode_registration(tokens: List[str]) -> str:
    expected = TOKEN_COUNTS[TAG_REGISTRATION]
    if len(tokens) != expected:
        raise TokenCountMismatch(expected, len(tokens))
    return tokens[0]


def decode_alarms(tokens: List[str]) -> Alarms:
    expected = TOKEN_COUNTS[TAG_ALARMS]
    values = {name: parse(name, token) for (name, parse), token in zip(ALARM_FIELDS, tokens)}
    if len(values) < expected:
        raise TokenCountMismatch(expected, len(tokens))
    return Alarms(**values)


@dataclass(frozen=True)
class TagDecoder:
    field: str
    decode: Callable[[List[str]], Any]
    # token-count shortfalls only warn, even in strict mode
    lenient_count: bool = False


DECODERS: Dict[str, TagDecoder] = {
    TAG_REGISTRATION: TagDecoder("registration", decode_registration, lenient_count=True),
    TAG_ALARMS: TagDecoder("alarms", decode_alarms),
}


def register_decoder(
    tag: str,
    field: str,
    decode: Callable[[List[str]], Any],
    lenient_count: bool = False,
) -> None:
    """Add or replace the decoder for a tag. field must be a HeaderRecord field."""
    DECODERS[tag] = TagDecoder(field, decode, lenient_count)


def decoder_for(tag: str) -> Optional[TagDecoder]:
    return DECODERS.get(tag)
