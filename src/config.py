from typing import Dict

# ----------------------------------------------------------------------
# Header line framing
# ----------------------------------------------------------------------
LINE_START = ord('$')                   # 0x24, first byte of every header line
LINE_END = b'\n'                        # 0x0A
CHECKSUM_DELIM = '*'                    # payload / checksum separator
FIELD_DELIM = ','                       # token separator inside the payload
CHECKSUM_DIGITS = 2                     # checksum suffix is one hex byte
HEADER_ENCODING = 'utf-8'               # header is ASCII, decoded as UTF-8

# ----------------------------------------------------------------------
# Line tags
# ----------------------------------------------------------------------
TAG_REGISTRATION = 'U'
TAG_ALARMS = 'A'

# Tokens expected after the tag token
TOKEN_COUNTS: Dict[str, int] = {
    TAG_REGISTRATION: 1,
    TAG_ALARMS: 8,
}

# ----------------------------------------------------------------------
# Scaling
# ----------------------------------------------------------------------
VOLTS_SCALE = 10.0                      # volts are stored in tenths

# ----------------------------------------------------------------------
# Default parser behaviour
# ----------------------------------------------------------------------
DEFAULT_STRICT = False
LOG_LEVEL_ENV = 'EDM_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'INFO'
