from typing import Optional


class FormatError(Exception):
    """Base class for everything that can go wrong decoding an EDM header."""

    def __init__(
        self,
        message: str,
        line_no: Optional[int] = None,
        offset: Optional[int] = None,
        tag: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line_no = line_no
        self.offset = offset
        self.tag = tag

    @property
    def code(self) -> str:
        return type(self).__name__

    def at(self, line_no: int, offset: int, tag: Optional[str]) -> "FormatError":
        """Attach the location of the offending line and return self."""
        self.line_no = line_no
        self.offset = offset
        if tag is not None:
            self.tag = tag
        return self

    def __str__(self) -> str:
        where = []
        if self.line_no is not None:
            where.append(f"line {self.line_no}")
        if self.offset is not None:
            where.append(f"offset 0x{self.offset:X}")
        if self.tag is not None:
            where.append(f"tag {self.tag!r}")
        if not where:
            return self.message
        return f"{self.message} ({', '.join(where)})"


class NoHeaderTerminator(FormatError):
    pass


class InvalidEncoding(FormatError):
    pass


class MissingChecksumDelimiter(FormatError):
    pass


class InvalidChecksumDigits(FormatError):
    def __init__(self, digits: str, **kwargs) -> None:
        super().__init__(f"Checksum is not two hex digits: {digits!r}", **kwargs)
        self.digits = digits


class ChecksumMismatch(FormatError):
    def __init__(self, expected: int, computed: int, **kwargs) -> None:
        super().__init__(
            f"Checksum mismatch: declared 0x{expected:02X}, computed 0x{computed:02X}",
            **kwargs,
        )
        self.expected = expected
        self.computed = computed


class UnparseableNumericToken(FormatError):
    def __init__(self, field: str, token: str, **kwargs) -> None:
        super().__init__(f"Could not parse {field} from token {token!r}", **kwargs)
        self.field = field
        self.token = token


class EmptyTagLine(FormatError):
    pass


class TokenCountMismatch(FormatError):
    def __init__(self, expected: int, actual: int, **kwargs) -> None:
        super().__init__(f"Expected {expected} token(s), got {actual}", **kwargs)
        self.expected = expected
        self.actual = actual
